"""Shared fixtures for the orderflow test suite."""

from decimal import Decimal

import pytest

from adapters.notifiers import RecordingNotifier
from adapters.repositories import InMemoryOrderRepository
from core.config import AppSettings
from core.domain.errors import NotificationError
from core.domain.models import Order, OrderEvent
from core.services.orders import OrderService
from core.services.validation import CreateOrderCommand


class FailingNotifier:
    """Notifier whose channel is always down."""

    name = "flaky"

    def __init__(self):
        self.calls = 0

    def notify(self, event: OrderEvent) -> None:
        self.calls += 1
        raise NotificationError(self.name, "channel unavailable")


@pytest.fixture
def settings():
    return AppSettings(_env_file=None)


@pytest.fixture
def repository():
    return InMemoryOrderRepository()


@pytest.fixture
def recorder():
    return RecordingNotifier()


@pytest.fixture
def service(repository, recorder, settings):
    return OrderService(repository, [recorder], settings=settings)


@pytest.fixture
def command():
    return CreateOrderCommand(
        user_id="user-42",
        email="alice@example.com",
        amount=Decimal("19.99"),
        currency="EUR",
    )


@pytest.fixture
def order():
    return Order.create(
        user_id="user-42",
        email="alice@example.com",
        amount=Decimal("19.99"),
        currency="EUR",
    )


@pytest.fixture
def failing_notifier():
    return FailingNotifier()
