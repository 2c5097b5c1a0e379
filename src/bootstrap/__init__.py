"""Composition root: binds adapters to the core ports."""

from bootstrap.container import (
    available_notifiers,
    available_repositories,
    build_notifiers,
    build_order_service,
    build_repository,
    register_notifier,
    register_repository,
)

__all__ = [
    "available_notifiers",
    "available_repositories",
    "build_notifiers",
    "build_order_service",
    "build_repository",
    "register_notifier",
    "register_repository",
]
