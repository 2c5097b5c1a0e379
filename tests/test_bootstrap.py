"""
Tests for the composition root: adapters are bound from settings only.
"""

import pytest

import bootstrap.container as container
from adapters.notifiers import ConsoleNotifier, EmailOutboxNotifier, RecordingNotifier, WebhookNotifier
from adapters.repositories import InMemoryOrderRepository, JsonFileOrderRepository
from bootstrap import (
    available_notifiers,
    available_repositories,
    build_notifiers,
    build_order_service,
    build_repository,
    register_notifier,
    register_repository,
)
from core.config import AppSettings
from core.domain.errors import ConfigurationError, OrderError
from core.services.orders import OrderService
from core.services.validation import CreateOrderCommand


def make_settings(**kwargs):
    return AppSettings(_env_file=None, **kwargs)


@pytest.fixture
def isolated_registries(monkeypatch):
    monkeypatch.setattr(container, "_REPOSITORIES", dict(container._REPOSITORIES))
    monkeypatch.setattr(container, "_NOTIFIERS", dict(container._NOTIFIERS))


class TestBuildRepository:
    def test_default_is_memory(self):
        assert isinstance(build_repository(make_settings()), InMemoryOrderRepository)

    def test_json_backend(self, tmp_path):
        repo = build_repository(
            make_settings(repository_backend="JSON", orders_path=tmp_path / "orders.json")
        )
        assert isinstance(repo, JsonFileOrderRepository)
        assert repo.path == tmp_path / "orders.json"

    def test_json_requires_path(self):
        with pytest.raises(ConfigurationError, match="ORDERS_PATH"):
            build_repository(make_settings(repository_backend="json"))

    def test_unknown_backend(self):
        with pytest.raises(ConfigurationError, match="unknown repository backend"):
            build_repository(make_settings(repository_backend="postgres"))


class TestBuildNotifiers:
    def test_default_is_console(self):
        notifiers = build_notifiers(make_settings())
        assert len(notifiers) == 1
        assert isinstance(notifiers[0], ConsoleNotifier)

    def test_order_is_preserved(self, tmp_path):
        notifiers = build_notifiers(
            make_settings(
                notifiers=["recording", "Email", "webhook"],
                outbox_dir=tmp_path,
                webhook_url="https://hooks.example.test/orders",
            )
        )
        assert [type(n) for n in notifiers] == [RecordingNotifier, EmailOutboxNotifier, WebhookNotifier]

    def test_webhook_requires_url(self):
        with pytest.raises(ConfigurationError, match="WEBHOOK_URL"):
            build_notifiers(make_settings(notifiers=["webhook"]))

    @pytest.mark.parametrize("url", ["http://[::1/x", "ftp://hooks.example.test/orders"])
    def test_webhook_rejects_bad_url(self, url):
        with pytest.raises(ConfigurationError, match="WEBHOOK_URL"):
            build_notifiers(make_settings(notifiers=["webhook"], webhook_url=url))

    def test_unknown_notifier(self):
        with pytest.raises(ConfigurationError, match="unknown notifier 'sms'"):
            build_notifiers(make_settings(notifiers=["sms"]))

    def test_no_notifiers(self):
        assert build_notifiers(make_settings(notifiers=[])) == []


class TestRegistries:
    def test_available_names(self):
        assert available_repositories() == ["json", "memory"]
        assert available_notifiers() == ["console", "email", "recording", "webhook"]

    def test_register_custom_adapters(self, isolated_registries):
        shared = InMemoryOrderRepository()
        recorder = RecordingNotifier()
        register_repository("Shared", lambda settings: shared)
        register_notifier("audit", lambda settings: recorder)

        service = build_order_service(make_settings(repository_backend="shared", notifiers=["audit"]))
        result = service.create_order(
            CreateOrderCommand(user_id="u1", email="u1@example.com", amount="3.50")
        )

        assert len(shared) == 1
        assert recorder.events[0].order.id == result.order.id
        assert "shared" in available_repositories()


class TestBuildOrderService:
    def test_returns_service(self):
        assert isinstance(build_order_service(make_settings(notifiers=["recording"])), OrderService)

    def test_malformed_webhook_cannot_strand_an_order(self):
        """A bad endpoint fails at composition time, before any order is stored"""
        with pytest.raises(OrderError):
            build_order_service(make_settings(notifiers=["webhook"], webhook_url="http://[::1/x"))

    def test_end_to_end_with_file_adapters(self, tmp_path):
        settings = make_settings(
            repository_backend="json",
            orders_path=tmp_path / "orders.json",
            notifiers=["email", "recording"],
            outbox_dir=tmp_path / "outbox",
        )
        service = build_order_service(settings, setup_logging=True)

        created = service.create_order(
            CreateOrderCommand(user_id="dana", email="dana@example.com", amount="120", currency="usd")
        )
        confirmed = service.confirm_order(created.order.id)

        assert created.delivered == ["email", "recording"]
        assert confirmed.order.status.value == "confirmed"
        assert (tmp_path / "orders.json").exists()
        assert (tmp_path / "outbox" / f"{created.order.id}-created.eml").exists()
        assert (tmp_path / "outbox" / f"{created.order.id}-confirmed.eml").exists()

        reopened = build_order_service(settings)
        assert reopened.get_order(created.order.id).status.value == "confirmed"
