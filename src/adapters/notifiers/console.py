"""Notificación en consola (Rich).

Por qué Rich:
- Panel legible para demos y desarrollo local sin configurar nada.
- La `Console` es inyectable, así los tests capturan la salida.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import OrderEvent, OrderEventKind
from core.interfaces.notifier import OrderNotifier

_STYLES: dict[OrderEventKind, str] = {
    OrderEventKind.CREATED: "cyan",
    OrderEventKind.CONFIRMED: "green",
    OrderEventKind.CANCELLED: "red",
}


def build_order_panel(event: OrderEvent) -> Panel:
    """Panel para presentar un `OrderEvent`."""

    order = event.order
    style = _STYLES.get(event.kind, "white")

    table = Table.grid(padding=(0, 2))
    table.add_column(style="dim", no_wrap=True)
    table.add_column(style="white")
    table.add_row("Order", order.id)
    table.add_row("User", order.user_id)
    table.add_row("Email", order.email)
    table.add_row("Amount", f"{order.amount} {order.currency}")
    table.add_row("Status", order.status.value)

    title = Text(event.kind.value, style=f"bold {style}")
    return Panel(table, title=title, border_style=style)


class ConsoleNotifier(OrderNotifier):
    name = "console"

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def notify(self, event: OrderEvent) -> None:
        self._console.print(build_order_panel(event))
