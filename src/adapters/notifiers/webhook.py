"""Notificación por webhook HTTP.

POST de un JSON por evento:
    {"event": "order.created", "occurred_at": "...", "order": {...}}

Cualquier error de transporte o respuesta no-2xx se eleva como
`NotificationError`; el caso de uso decide si es un aviso o un fallo.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.errors import NotificationError
from core.domain.models import OrderEvent
from core.interfaces.notifier import OrderNotifier


def build_payload(event: OrderEvent) -> dict[str, Any]:
    return {
        "event": event.kind.value,
        "occurred_at": event.occurred_at.isoformat(),
        "order": event.order.model_dump(mode="json"),
    }


class WebhookNotifier(OrderNotifier):
    """Envía eventos a un endpoint HTTP configurado."""

    name = "webhook"

    def __init__(
        self,
        url: str,
        settings: AppSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._settings = settings or AppSettings()
        self._client = client

    def notify(self, event: OrderEvent) -> None:
        client = self._client or build_client(self._settings)
        try:
            response = client.post(self._url, json=build_payload(event))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NotificationError(self.name, f"POST {self._url} failed: {exc}") from exc
        finally:
            if self._client is None:
                client.close()

        if not response.is_success:
            raise NotificationError(
                self.name,
                f"POST {self._url} returned HTTP {response.status_code}",
            )
