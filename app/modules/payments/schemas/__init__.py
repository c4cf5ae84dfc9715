# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/schemas/__init__.py

Punto de entrada para los esquemas Pydantic del módulo Payments.

Incluye los contratos de:
- Notificaciones de MercadoPago (webhook)
- Pagos y preferencias de MercadoPago
- Registros del backend de Personal Fit
- Reconciliación y barrido de pendientes
- Checkout

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

from .common_schemas import CamelModel
from .webhook_schemas import NotificationEnvelope, WebhookNotification
from .gateway_schemas import BackUrls, GatewayPayment, PreferenceInfo, PreferenceItem
from .record_schemas import InternalPaymentRecord, OutstandingPayment
from .reconciliation_schemas import (
    REASON_BAD_REFERENCE,
    REASON_DUPLICATE,
    REASON_NOT_APPROVED,
    REASON_UNSUPPORTED_KIND,
    ReconciliationResult,
    SweepItemOutcome,
    SweepReport,
    VerifyPaymentRequest,
)
from .checkout_schemas import CheckoutRequest, CheckoutResponse

__all__ = [
    "CamelModel",
    "NotificationEnvelope",
    "WebhookNotification",
    "BackUrls",
    "GatewayPayment",
    "PreferenceInfo",
    "PreferenceItem",
    "InternalPaymentRecord",
    "OutstandingPayment",
    "REASON_BAD_REFERENCE",
    "REASON_DUPLICATE",
    "REASON_NOT_APPROVED",
    "REASON_UNSUPPORTED_KIND",
    "ReconciliationResult",
    "SweepItemOutcome",
    "SweepReport",
    "VerifyPaymentRequest",
    "CheckoutRequest",
    "CheckoutResponse",
]

# Fin del archivo backend/app/modules/payments/schemas/__init__.py
