# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/schemas/webhook_schemas.py

Esquemas de las notificaciones que envía MercadoPago.

Payload típico:
    {
        "action": "payment.created",
        "api_version": "v1",
        "data": {"id": "123"},
        "date_created": "...",
        "id": 987,
        "live_mode": true,
        "type": "payment",
        "user_id": "..."
    }

Solo se usan `type` y `data.id`; el resto se conserva por trazabilidad.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common_schemas import coerce_optional_str


class NotificationEnvelope(BaseModel):
    """Notificación normalizada: qué tipo de recurso y cuál."""

    model_config = ConfigDict(frozen=True)

    kind: str = Field(description="Tipo de notificación (p. ej. 'payment').")
    resource_id: str = Field(description="ID del recurso en MercadoPago.")


class WebhookNotificationData(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v):
        return coerce_optional_str(v)


class WebhookNotification(BaseModel):
    """Cuerpo del webhook tal como lo envía MercadoPago."""

    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None
    topic: Optional[str] = None
    action: Optional[str] = None
    data: Optional[WebhookNotificationData] = None
    live_mode: Optional[bool] = None

    @property
    def kind(self) -> Optional[str]:
        # Notificaciones IPN legacy usan `topic` en lugar de `type`
        return self.type or self.topic

    @property
    def resource_id(self) -> Optional[str]:
        return self.data.id if self.data else None

    def to_envelope(self) -> NotificationEnvelope:
        """
        Normaliza el payload.

        Raises:
            ValueError: si falta el tipo o el ID del recurso.
        """
        if not self.kind or not self.resource_id:
            raise ValueError("Notificación sin 'type' o sin 'data.id'")
        return NotificationEnvelope(kind=self.kind, resource_id=self.resource_id)


__all__ = [
    "NotificationEnvelope",
    "WebhookNotificationData",
    "WebhookNotification",
]

# Fin del archivo backend/app/modules/payments/schemas/webhook_schemas.py
