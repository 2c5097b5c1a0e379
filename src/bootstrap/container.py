"""Composition root.

This is the only module that knows both the core and the concrete adapters.
Adapters are looked up by name in two registries and bound from
`AppSettings`, so swapping persistence or notification channels is a
configuration change, not a code change in `core`.
"""

from __future__ import annotations

from typing import Callable

import httpx

from adapters.notifiers import (
    ConsoleNotifier,
    EmailOutboxNotifier,
    RecordingNotifier,
    WebhookNotifier,
)
from adapters.repositories import InMemoryOrderRepository, JsonFileOrderRepository
from core.config import AppSettings
from core.domain.errors import ConfigurationError
from core.interfaces.notifier import OrderNotifier
from core.interfaces.repository import OrderRepository
from core.log import configure_logging, get_logger
from core.services.orders import OrderHooks, OrderService
from core.services.validation import OrderValidator

RepositoryFactory = Callable[[AppSettings], OrderRepository]
NotifierFactory = Callable[[AppSettings], OrderNotifier]

logger = get_logger(__name__)


def _json_repository(settings: AppSettings) -> OrderRepository:
    if settings.orders_path is None:
        raise ConfigurationError("repository 'json' requires ORDERFLOW_ORDERS_PATH")
    return JsonFileOrderRepository(settings.orders_path)


def _webhook_notifier(settings: AppSettings) -> OrderNotifier:
    if not settings.webhook_url:
        raise ConfigurationError("notifier 'webhook' requires ORDERFLOW_WEBHOOK_URL")
    try:
        url = httpx.URL(settings.webhook_url)
    except httpx.InvalidURL as exc:
        raise ConfigurationError(f"invalid ORDERFLOW_WEBHOOK_URL {settings.webhook_url!r}: {exc}") from exc
    if url.scheme not in ("http", "https"):
        raise ConfigurationError(f"ORDERFLOW_WEBHOOK_URL must be http(s), got {settings.webhook_url!r}")
    return WebhookNotifier(settings.webhook_url, settings)


def _email_notifier(settings: AppSettings) -> OrderNotifier:
    return EmailOutboxNotifier(settings.outbox_dir, sender=settings.email_sender)


_REPOSITORIES: dict[str, RepositoryFactory] = {
    "memory": lambda settings: InMemoryOrderRepository(),
    "json": _json_repository,
}

_NOTIFIERS: dict[str, NotifierFactory] = {
    "console": lambda settings: ConsoleNotifier(),
    "webhook": _webhook_notifier,
    "email": _email_notifier,
    "recording": lambda settings: RecordingNotifier(),
}


def register_repository(name: str, factory: RepositoryFactory) -> None:
    """Plug an additional persistence adapter under `name`."""

    _REPOSITORIES[name.strip().lower()] = factory


def register_notifier(name: str, factory: NotifierFactory) -> None:
    """Plug an additional notification adapter under `name`."""

    _NOTIFIERS[name.strip().lower()] = factory


def available_repositories() -> list[str]:
    return sorted(_REPOSITORIES)


def available_notifiers() -> list[str]:
    return sorted(_NOTIFIERS)


def build_repository(settings: AppSettings) -> OrderRepository:
    factory = _REPOSITORIES.get(settings.repository_backend)
    if factory is None:
        raise ConfigurationError(
            f"unknown repository backend {settings.repository_backend!r} "
            f"(available: {', '.join(available_repositories())})"
        )
    return factory(settings)


def build_notifiers(settings: AppSettings) -> list[OrderNotifier]:
    notifiers: list[OrderNotifier] = []
    for name in settings.notifiers:
        factory = _NOTIFIERS.get(name)
        if factory is None:
            raise ConfigurationError(
                f"unknown notifier {name!r} (available: {', '.join(available_notifiers())})"
            )
        notifiers.append(factory(settings))
    return notifiers


def build_order_service(
    settings: AppSettings | None = None,
    *,
    hooks: OrderHooks | None = None,
    setup_logging: bool = False,
) -> OrderService:
    """Bind adapters from settings and return a ready `OrderService`."""

    settings = settings or AppSettings()
    if setup_logging:
        configure_logging(settings.log_level, settings.json_logs)

    repository = build_repository(settings)
    notifiers = build_notifiers(settings)
    logger.debug(
        "order_service_built",
        repository=settings.repository_backend,
        notifiers=[n.name for n in notifiers],
    )
    return OrderService(
        repository,
        notifiers,
        validator=OrderValidator(settings),
        settings=settings,
        hooks=hooks,
    )
