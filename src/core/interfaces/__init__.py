"""Interfaces/abstracciones del Core (puertos).

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: los casos de uso dependen de abstracciones.
"""

from core.interfaces.notifier import OrderNotifier
from core.interfaces.repository import OrderRepository

__all__ = [
    "OrderNotifier",
    "OrderRepository",
]
