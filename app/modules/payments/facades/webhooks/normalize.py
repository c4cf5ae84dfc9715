# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/webhooks/normalize.py

Normalización del cuerpo crudo del webhook a NotificationEnvelope.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

import json

from pydantic import ValidationError

from app.modules.payments.schemas.webhook_schemas import (
    NotificationEnvelope,
    WebhookNotification,
)


def parse_notification(raw_body: bytes) -> NotificationEnvelope:
    """
    Convierte el body del webhook en (kind, resource_id).

    Raises:
        ValueError: JSON inválido, estructura inesperada o faltan
            `type`/`data.id`.
    """
    try:
        payload = json.loads(raw_body or b"")
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValueError(f"Body del webhook no es JSON válido: {e}") from e

    if not isinstance(payload, dict):
        raise ValueError("Body del webhook no es un objeto JSON")

    try:
        notification = WebhookNotification.model_validate(payload)
    except ValidationError as e:
        raise ValueError(f"Notificación con formato inesperado: {e.error_count()} errores") from e

    return notification.to_envelope()


__all__ = ["parse_notification"]

# Fin del archivo backend/app/modules/payments/facades/webhooks/normalize.py
