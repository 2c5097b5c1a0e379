"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar los casos de uso.
- Permite que adaptadores (HTTP/ficheros) y el composition root lean config de
  forma consistente.
"""

from __future__ import annotations

import os
import sys
from decimal import Decimal
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "orderflow"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "orderflow"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "orderflow"
    return Path.home() / ".config" / "orderflow"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para casos de uso, adapters y bootstrap.
    """

    model_config = SettingsConfigDict(
        env_prefix="ORDERFLOW_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    # Adapters (se resuelven por nombre en `bootstrap`)
    repository_backend: str = Field(
        default="memory",
        min_length=1,
        description="Adaptador de persistencia ('memory' o 'json').",
    )
    orders_path: Path | None = Field(
        default=None,
        description="Fichero JSON para el repositorio 'json'.",
    )
    notifiers: list[str] = Field(
        default_factory=lambda: ["console"],
        description="Notificadores activos, en orden de entrega.",
    )

    webhook_url: str | None = Field(
        default=None,
        description="Endpoint HTTP que recibe los eventos de pedidos.",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="orderflow/0.1",
        min_length=1,
        description="User-Agent para el webhook.",
    )

    outbox_dir: Path = Field(
        default=Path("outbox"),
        description="Directorio donde el notificador 'email' deja los mensajes.",
    )
    email_sender: str = Field(
        default="orders@orderflow.local",
        min_length=3,
        description="Remitente de los mensajes del outbox.",
    )

    # Reglas de negocio configurables
    default_currency: str = Field(
        default="USD",
        min_length=3,
        max_length=3,
        description="Moneda aplicada cuando el comando no indica una.",
    )
    allowed_currencies: list[str] = Field(
        default_factory=list,
        description="Monedas aceptadas (vacío = cualquiera con formato válido).",
    )
    min_order_amount: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Importe mínimo (exclusivo) de un pedido.",
    )
    max_order_amount: Decimal = Field(
        default=Decimal("1000000"),
        gt=0,
        description="Importe máximo (inclusivo) de un pedido.",
    )

    log_level: str = Field(
        default="INFO",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
    json_logs: bool = Field(
        default=False,
        description="Emitir logs en JSON en vez del renderer de consola.",
    )

    @field_validator("repository_backend", "log_level")
    @classmethod
    def _strip_lower(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("notifiers")
    @classmethod
    def _normalize_notifiers(cls, value: list[str]) -> list[str]:
        return [v.strip().lower() for v in value if v.strip()]

    @field_validator("default_currency")
    @classmethod
    def _upper_currency(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("allowed_currencies")
    @classmethod
    def _upper_currencies(cls, value: list[str]) -> list[str]:
        return [v.strip().upper() for v in value if v.strip()]
