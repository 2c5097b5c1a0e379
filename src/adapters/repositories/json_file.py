"""Repositorio en un fichero JSON.

Por qué JSON:
- Interoperabilidad con otras herramientas y legible a simple vista.
- Demuestra que el Core no cambia al sustituir el adaptador de memoria.

Formato (UTF-8, estable):
    {"orders": [<Order.model_dump(mode="json")>, ...]}

No es un motor de persistencia: cada operación lee y reescribe el documento
entero.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from core.domain.errors import DuplicateOrderError, OrderNotFoundError, PersistenceError
from core.domain.models import Order
from core.interfaces.repository import OrderRepository


class OrdersFile(BaseModel):
    orders: list[Order] = Field(default_factory=list)


def load_orders_file(path: Path) -> OrdersFile:
    if not path.exists():
        return OrdersFile()
    try:
        raw = path.read_text(encoding="utf-8")
        data = json.loads(raw)
        return OrdersFile.model_validate(data)
    except (OSError, ValueError, ValidationError) as exc:
        raise PersistenceError(f"cannot read orders from {path}: {exc}") from exc


def export_orders_json(*, orders: OrdersFile, output_path: Path) -> Path:
    """Escribe el documento con formato estable (temp + replace)."""

    payload = orders.model_dump(mode="json")
    tmp_path = output_path.with_name(output_path.name + ".tmp")
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
            encoding="utf-8",
        )
        tmp_path.replace(output_path)
    except OSError as exc:
        raise PersistenceError(f"cannot write orders to {output_path}: {exc}") from exc
    return output_path


class JsonFileOrderRepository(OrderRepository):
    """Implementa `OrderRepository` sobre un único fichero JSON."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def add(self, order: Order) -> None:
        data = load_orders_file(self._path)
        if any(o.id == order.id for o in data.orders):
            raise DuplicateOrderError(order.id)
        data.orders.append(order)
        export_orders_json(orders=data, output_path=self._path)

    def save(self, order: Order) -> None:
        data = load_orders_file(self._path)
        for index, stored in enumerate(data.orders):
            if stored.id == order.id:
                data.orders[index] = order
                break
        else:
            raise OrderNotFoundError(order.id)
        export_orders_json(orders=data, output_path=self._path)

    def get(self, order_id: str) -> Order | None:
        for order in load_orders_file(self._path).orders:
            if order.id == order_id:
                return order
        return None

    def list_by_user(self, user_id: str) -> list[Order]:
        found = [o for o in load_orders_file(self._path).orders if o.user_id == user_id]
        found.sort(key=lambda o: o.created_at)
        return found
