# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_payments.py

Configuración de pagos MercadoPago para Personal Fit.

Descripción:
    Centraliza credenciales de la pasarela, el secreto compartido del
    webhook, URLs públicas/backend, tiempos de espera y el barrido de
    pagos pendientes. Se construye UNA vez al arrancar la app y se
    inyecta en el cliente de la pasarela y en los endpoints.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://personalfitsantafe.com"


class PaymentsSettings(BaseSettings):
    """Configuración del subsistema de pagos."""

    # =========================================================================
    # MERCADOPAGO
    # =========================================================================

    mp_access_token: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("MP_ACCESS_TOKEN", "MERCADOPAGO_ACCESS_TOKEN"),
        description="Access token de MercadoPago (solo servidor)",
    )

    mp_api_base_url: str = Field(
        default="https://api.mercadopago.com",
        validation_alias=AliasChoices("MP_API_BASE_URL"),
        description="URL base de la API de MercadoPago",
    )

    gateway_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        validation_alias=AliasChoices("MP_TIMEOUT_SECONDS", "GATEWAY_TIMEOUT_SECONDS"),
        description="Timeout de las llamadas a MercadoPago",
    )

    currency_id: str = Field(
        default="ARS",
        validation_alias=AliasChoices("MP_CURRENCY_ID"),
        description="Moneda de las preferencias de pago",
    )

    statement_descriptor: str = Field(
        default="Personal Fit",
        validation_alias=AliasChoices("MP_STATEMENT_DESCRIPTOR"),
        description="Texto que aparece en el resumen de la tarjeta",
    )

    # =========================================================================
    # WEBHOOK
    # =========================================================================

    webhook_secret: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("WEBHOOK_SECRET", "MP_WEBHOOK_SECRET"),
        description="Secreto compartido que debe llegar en X-Signature",
    )

    # =========================================================================
    # URLS
    # =========================================================================

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        validation_alias=AliasChoices("NEXT_PUBLIC_BASE_URL", "BASE_URL"),
        description="URL pública para back_urls y notification_url",
    )

    backend_base_url: str = Field(
        default="http://localhost:8080",
        validation_alias=AliasChoices("BACKEND_URL", "BACKEND_BASE_URL"),
        description="URL base del backend de Personal Fit",
    )

    backend_api_token: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("BACKEND_API_TOKEN"),
        description="Bearer token opcional para el backend",
    )

    backend_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        validation_alias=AliasChoices("BACKEND_TIMEOUT_SECONDS"),
        description="Timeout de las llamadas al backend",
    )

    # =========================================================================
    # MEMBRESÍA
    # =========================================================================

    membership_period_days: int = Field(
        default=30,
        gt=0,
        validation_alias=AliasChoices("MEMBERSHIP_PERIOD_DAYS"),
        description="Vigencia de la cuota pagada (expiresAt = createdAt + N días)",
    )

    # =========================================================================
    # BARRIDO DE PENDIENTES Y CICLO DE VIDA
    # =========================================================================

    sweeper_enabled: bool = Field(
        default=False,
        validation_alias=AliasChoices("SWEEPER_ENABLED"),
        description="Programa el barrido periódico de pagos pendientes",
    )

    sweeper_interval_minutes: int = Field(
        default=30,
        gt=0,
        validation_alias=AliasChoices("SWEEPER_INTERVAL_MINUTES"),
        description="Intervalo del barrido periódico",
    )

    shutdown_drain_seconds: float = Field(
        default=10.0,
        ge=0,
        validation_alias=AliasChoices("SHUTDOWN_DRAIN_SECONDS"),
        description="Espera máxima por reconciliaciones en curso al apagar",
    )

    # =========================================================================
    # LOGGING
    # =========================================================================

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL"),
    )

    log_format: Literal["plain", "pretty", "json"] = Field(
        default="plain",
        validation_alias=AliasChoices("LOG_FORMAT"),
    )

    @field_validator("base_url", "backend_base_url", "mp_api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v: Optional[str]) -> Optional[str]:
        return v.upper() if isinstance(v, str) else v

    # =========================================================================
    # HELPERS
    # =========================================================================

    def access_token(self) -> Optional[str]:
        """Access token en claro, o None si no está configurado."""
        if self.mp_access_token is None:
            return None
        return self.mp_access_token.get_secret_value() or None

    def shared_secret(self) -> Optional[str]:
        """Secreto del webhook en claro, o None si no está configurado."""
        if self.webhook_secret is None:
            return None
        return self.webhook_secret.get_secret_value() or None

    def backend_token(self) -> Optional[str]:
        if self.backend_api_token is None:
            return None
        return self.backend_api_token.get_secret_value() or None

    @property
    def webhook_url(self) -> str:
        return f"{self.base_url}/payments/mercadopago/webhook"

    def back_urls(self) -> dict[str, str]:
        """URLs de retorno del checkout (success/failure/pending)."""
        return {
            outcome: f"{self.base_url}/payments/result/{outcome}"
            for outcome in ("success", "failure", "pending")
        }

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_payments_settings() -> PaymentsSettings:
    """
    Obtiene la instancia global de configuración de pagos.

    Returns:
        PaymentsSettings: Configuración de pagos (singleton)
    """
    return PaymentsSettings()


__all__ = [
    "DEFAULT_BASE_URL",
    "PaymentsSettings",
    "get_payments_settings",
]

# Fin del archivo backend/app/shared/config/settings_payments.py
