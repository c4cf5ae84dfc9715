# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/webhooks/__init__.py

Fachadas del webhook de MercadoPago.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from .handler import (
    authenticate_webhook,
    process_webhook_body,
    schedule_webhook_reconciliation,
)
from .normalize import parse_notification

__all__ = [
    "authenticate_webhook",
    "process_webhook_body",
    "schedule_webhook_reconciliation",
    "parse_notification",
]

# Fin del archivo backend/app/modules/payments/facades/webhooks/__init__.py
