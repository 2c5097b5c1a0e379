"""Errores del dominio.

Por qué una jerarquía propia:
- Los casos de uso y los llamadores capturan `OrderError` sin conocer httpx,
  ficheros ni pydantic.
- Los adapters traducen sus fallos de infraestructura a `PersistenceError` /
  `NotificationError` (siempre con `raise ... from exc`).
"""

from __future__ import annotations


class OrderError(Exception):
    """Base de todos los errores de orderflow."""


class InvalidOrderError(OrderError):
    """Un campo del pedido viola una regla de negocio."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class InvalidEmailError(InvalidOrderError):
    def __init__(self, email: str) -> None:
        super().__init__("email", f"invalid email address {email!r}")
        self.email = email


class InvalidOrderAmountError(InvalidOrderError):
    def __init__(self, amount: object, reason: str) -> None:
        super().__init__("amount", f"invalid order amount {amount}: {reason}")
        self.amount = amount
        self.reason = reason


class OrderNotFoundError(OrderError):
    def __init__(self, order_id: str) -> None:
        super().__init__(f"order {order_id!r} not found")
        self.order_id = order_id


class DuplicateOrderError(OrderError):
    def __init__(self, order_id: str) -> None:
        super().__init__(f"order {order_id!r} already exists")
        self.order_id = order_id


class InvalidStatusTransitionError(OrderError):
    def __init__(self, order_id: str, current: str, target: str) -> None:
        super().__init__(f"order {order_id!r} cannot go from {current!r} to {target!r}")
        self.order_id = order_id
        self.current = current
        self.target = target


class PersistenceError(OrderError):
    """El adaptador de persistencia no pudo leer o escribir."""


class NotificationError(OrderError):
    """Un notificador no pudo entregar un evento."""

    def __init__(self, notifier: str, message: str) -> None:
        super().__init__(f"{notifier}: {message}")
        self.notifier = notifier
        self.message = message


class ConfigurationError(OrderError):
    """La configuración no permite componer los adapters pedidos."""
