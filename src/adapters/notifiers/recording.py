"""Notificador que solo recuerda los eventos.

Sirve para tests y para ejecuciones en seco (`notifiers=["recording"]`).
"""

from __future__ import annotations

from core.domain.models import OrderEvent
from core.interfaces.notifier import OrderNotifier


class RecordingNotifier(OrderNotifier):
    name = "recording"

    def __init__(self) -> None:
        self.events: list[OrderEvent] = []

    def notify(self, event: OrderEvent) -> None:
        self.events.append(event)
