"""Contrato de notificación de eventos de pedidos."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import OrderEvent


@runtime_checkable
class OrderNotifier(Protocol):
    """Entrega un `OrderEvent` a un canal (consola, webhook, outbox...).

    Reglas de diseño:
    - `name` identifica el canal en logs y en `OrderResult.delivered`.
    - Cualquier fallo de entrega se eleva como `NotificationError`.
    """

    name: str

    def notify(self, event: OrderEvent) -> None:
        ...
