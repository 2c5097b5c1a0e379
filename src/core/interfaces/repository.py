"""Contrato de persistencia de pedidos.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que adaptadores (memoria, fichero JSON, ...) sean intercambiables y
  testeables sin acoplar el Core a implementaciones concretas.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Order


@runtime_checkable
class OrderRepository(Protocol):
    """Contrato mínimo para guardar y recuperar pedidos.

    Reglas de diseño:
    - Devuelve copias: modificar un pedido obtenido no altera el almacenamiento
      hasta llamar a `save`.
    - Los fallos de almacenamiento se elevan como `PersistenceError`.
    """

    def add(self, order: Order) -> None:
        """Guarda un pedido nuevo (`DuplicateOrderError` si el id ya existe)."""

        ...

    def save(self, order: Order) -> None:
        """Reemplaza un pedido existente (`OrderNotFoundError` si no existe)."""

        ...

    def get(self, order_id: str) -> Order | None:
        ...

    def list_by_user(self, user_id: str) -> list[Order]:
        """Pedidos del usuario, del más antiguo al más reciente."""

        ...
