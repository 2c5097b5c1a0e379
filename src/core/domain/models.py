"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estructural y documentación autocontenida (Field) sin
  acoplar el Core a librerías de I/O.
- Facilita la serialización estable que necesitan los adapters (JSON, webhook).

Nota:
- Estos modelos describen *qué* es un pedido y *cómo cambia de estado*, no
  cómo se guarda ni a quién se avisa. Las reglas de negocio de entrada viven en
  `core.services.validation`.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.errors import InvalidStatusTransitionError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(str, Enum):
    """Estados del ciclo de vida de un pedido."""

    NEW = "new"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


# Transiciones válidas: origen -> destinos permitidos.
_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.NEW: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.CANCELLED}),
    OrderStatus.CANCELLED: frozenset(),
}


class Order(BaseModel):
    """Agregado principal: un pedido de un usuario.

    Por qué un agregado:
    - Centraliza el estado y sus transiciones; nadie fuera del modelo asigna
      `status` directamente.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Identificador único del pedido.",
    )
    user_id: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="Usuario que realiza el pedido.",
    )
    email: str = Field(
        ...,
        min_length=3,
        max_length=320,
        description="Correo de contacto para las notificaciones.",
    )
    amount: Decimal = Field(
        ...,
        gt=0,
        description="Importe total del pedido.",
    )
    currency: str = Field(
        default="USD",
        pattern=r"^[A-Z]{3}$",
        description="Código de moneda (tres letras mayúsculas).",
    )
    status: OrderStatus = Field(
        default=OrderStatus.NEW,
        description="Estado actual en el ciclo de vida.",
    )
    created_at: datetime = Field(
        default_factory=_utcnow,
        description="Momento de creación (UTC).",
    )
    updated_at: datetime = Field(
        default_factory=_utcnow,
        description="Último cambio de estado (UTC).",
    )

    @classmethod
    def create(
        cls,
        *,
        user_id: str,
        email: str,
        amount: Decimal,
        currency: str,
    ) -> "Order":
        """Fabrica un pedido nuevo con id fresco y estado `new`."""

        now = _utcnow()
        return cls(
            id=uuid.uuid4().hex,
            user_id=user_id,
            email=email,
            amount=amount,
            currency=currency,
            status=OrderStatus.NEW,
            created_at=now,
            updated_at=now,
        )

    def can_transition_to(self, target: OrderStatus) -> bool:
        return target in _TRANSITIONS[self.status]

    def confirm(self) -> None:
        self._transition(OrderStatus.CONFIRMED)

    def cancel(self) -> None:
        self._transition(OrderStatus.CANCELLED)

    def _transition(self, target: OrderStatus) -> None:
        if not self.can_transition_to(target):
            raise InvalidStatusTransitionError(self.id, self.status.value, target.value)
        self.status = target
        self.updated_at = _utcnow()


class OrderEventKind(str, Enum):
    CREATED = "order.created"
    CONFIRMED = "order.confirmed"
    CANCELLED = "order.cancelled"


class OrderEvent(BaseModel):
    """Hecho del dominio que se entrega a los notificadores.

    Por qué es un modelo separado:
    - Los notificadores reciben una instantánea inmutable del pedido, no el
      agregado vivo que el caso de uso puede seguir modificando.
    """

    model_config = ConfigDict(frozen=True)

    kind: OrderEventKind = Field(
        ...,
        description="Tipo de evento.",
    )
    order: Order = Field(
        ...,
        description="Instantánea del pedido en el momento del evento.",
    )
    occurred_at: datetime = Field(
        default_factory=_utcnow,
        description="Momento del evento (UTC).",
    )

    @classmethod
    def for_order(cls, kind: OrderEventKind, order: Order) -> "OrderEvent":
        return cls(kind=kind, order=order.model_copy(deep=True))
