"""Adaptadores concretos de los puertos del Core (persistencia, notificación, HTTP)."""
