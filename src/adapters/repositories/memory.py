"""Repositorio en memoria.

Útil para tests, demos y como adaptador por defecto: no sobrevive al proceso.
"""

from __future__ import annotations

from core.domain.errors import DuplicateOrderError, OrderNotFoundError
from core.domain.models import Order
from core.interfaces.repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):
    """Guarda copias profundas en un dict indexado por id."""

    def __init__(self) -> None:
        self._orders: dict[str, Order] = {}

    def __len__(self) -> int:
        return len(self._orders)

    def add(self, order: Order) -> None:
        if order.id in self._orders:
            raise DuplicateOrderError(order.id)
        self._orders[order.id] = order.model_copy(deep=True)

    def save(self, order: Order) -> None:
        if order.id not in self._orders:
            raise OrderNotFoundError(order.id)
        self._orders[order.id] = order.model_copy(deep=True)

    def get(self, order_id: str) -> Order | None:
        stored = self._orders.get(order_id)
        return stored.model_copy(deep=True) if stored else None

    def list_by_user(self, user_id: str) -> list[Order]:
        found = [o for o in self._orders.values() if o.user_id == user_id]
        found.sort(key=lambda o: o.created_at)
        return [o.model_copy(deep=True) for o in found]
