"""Order use cases.

`OrderService` is the application layer of the order flow. It receives its
collaborators (repository, notifiers, validator) through the constructor and
never instantiates an adapter itself; `bootstrap` decides which concrete
adapters get bound. Side-effects other than the ports (printing, progress)
stay out of here and are surfaced through `OrderHooks` and
`OrderResult.warnings`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Sequence

from core.config import AppSettings
from core.domain.errors import NotificationError, OrderNotFoundError
from core.domain.models import Order, OrderEvent, OrderEventKind
from core.interfaces.notifier import OrderNotifier
from core.interfaces.repository import OrderRepository
from core.log import get_logger
from core.services.validation import CreateOrderCommand, OrderValidator

logger = get_logger(__name__)


@dataclass
class OrderHooks:
    """Optional callbacks for outer layers."""

    warning: Callable[[str], None] | None = None


@dataclass
class OrderResult:
    """Output of a state-changing use case."""

    order: Order
    delivered: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class OrderService:
    """Create, confirm, cancel and query orders."""

    def __init__(
        self,
        repository: OrderRepository,
        notifiers: Sequence[OrderNotifier] = (),
        *,
        validator: OrderValidator | None = None,
        settings: AppSettings | None = None,
        hooks: OrderHooks | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._repository = repository
        self._notifiers = list(notifiers)
        self._validator = validator or OrderValidator(self._settings)
        self._hooks = hooks or OrderHooks()

    def create_order(self, command: CreateOrderCommand) -> OrderResult:
        """Validate, persist and announce a new order.

        Validation and persistence errors propagate and nothing is notified.
        Notification failures only produce warnings.
        """

        valid = self._validator.validate(command)
        order = Order.create(
            user_id=valid.user_id,
            email=valid.email,
            amount=valid.amount,
            currency=valid.currency,
        )
        self._repository.add(order)
        logger.info(
            "order_created",
            order_id=order.id,
            user_id=order.user_id,
            amount=str(order.amount),
            currency=order.currency,
        )
        return self._publish(OrderEvent.for_order(OrderEventKind.CREATED, order))

    def confirm_order(self, order_id: str) -> OrderResult:
        order = self.get_order(order_id)
        order.confirm()
        return self._store_transition(order, OrderEventKind.CONFIRMED)

    def cancel_order(self, order_id: str) -> OrderResult:
        order = self.get_order(order_id)
        order.cancel()
        return self._store_transition(order, OrderEventKind.CANCELLED)

    def get_order(self, order_id: str) -> Order:
        order_id = order_id.strip()
        order = self._repository.get(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    def list_orders(self, user_id: str) -> list[Order]:
        return self._repository.list_by_user(user_id.strip())

    def _store_transition(self, order: Order, kind: OrderEventKind) -> OrderResult:
        self._repository.save(order)
        logger.info("order_status_changed", order_id=order.id, status=order.status.value)
        return self._publish(OrderEvent.for_order(kind, order))

    def _publish(self, event: OrderEvent) -> OrderResult:
        result = OrderResult(order=event.order)
        for notifier in self._notifiers:
            try:
                notifier.notify(event)
            except NotificationError as exc:
                message = f"Notification via {notifier.name} failed for order {event.order.id}: {exc.message}"
                logger.warning(
                    "notification_failed",
                    notifier=notifier.name,
                    order_id=event.order.id,
                    event_kind=event.kind.value,
                    error=exc.message,
                )
                result.warnings.append(message)
                if self._hooks.warning:
                    self._hooks.warning(message)
                continue
            result.delivered.append(notifier.name)
        return result
