"""Notificación por correo (outbox en disco).

Por qué está en adapters:
- El render (Jinja2) y el destino (ficheros .eml) son detalles de infraestructura.
- El Core solo conoce `OrderEvent`.

No hay SMTP: cada evento se deja en `<outbox>/<order_id>-<kind>.eml` para que
otro proceso (o una persona) lo envíe.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from core.domain.errors import NotificationError
from core.domain.models import OrderEvent, OrderEventKind
from core.interfaces.notifier import OrderNotifier

_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

_SUBJECTS: dict[OrderEventKind, str] = {
    OrderEventKind.CREATED: "Order received",
    OrderEventKind.CONFIRMED: "Order confirmed",
    OrderEventKind.CANCELLED: "Order cancelled",
}


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        keep_trailing_newline=True,
    )


def render_order_email(*, event: OrderEvent, sender: str) -> str:
    """Renderiza el mensaje completo (cabeceras + cuerpo)."""

    order = event.order
    template = _get_env().get_template("order_event.eml.j2")
    return template.render(
        event=event,
        order=order,
        sender=sender,
        subject=f"{_SUBJECTS[event.kind]} ({order.id})",
        occurred_at=event.occurred_at.isoformat(timespec="seconds"),
    )


class EmailOutboxNotifier(OrderNotifier):
    """Escribe un .eml por evento en el directorio outbox."""

    name = "email"

    def __init__(self, outbox_dir: Path, *, sender: str = "orders@orderflow.local") -> None:
        self._outbox_dir = Path(outbox_dir)
        self._sender = sender

    def message_path(self, event: OrderEvent) -> Path:
        kind = event.kind.value.removeprefix("order.")
        return self._outbox_dir / f"{event.order.id}-{kind}.eml"

    def notify(self, event: OrderEvent) -> None:
        try:
            message = render_order_email(event=event, sender=self._sender)
        except TemplateError as exc:
            raise NotificationError(self.name, f"cannot render message: {exc}") from exc

        output_path = self.message_path(event)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(message, encoding="utf-8")
        except OSError as exc:
            raise NotificationError(self.name, f"cannot write {output_path}: {exc}") from exc
