"""Adaptadores de notificación.

Por qué un paquete:
- Agrupa módulos por canal (consola, webhook, outbox de correo...).
- Cada módulo implementa `core.interfaces.notifier.OrderNotifier`.
"""

from adapters.notifiers.console import ConsoleNotifier
from adapters.notifiers.email_outbox import EmailOutboxNotifier
from adapters.notifiers.recording import RecordingNotifier
from adapters.notifiers.webhook import WebhookNotifier

__all__ = [
	"ConsoleNotifier",
	"EmailOutboxNotifier",
	"RecordingNotifier",
	"WebhookNotifier",
]
