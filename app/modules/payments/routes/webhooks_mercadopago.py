# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/routes/webhooks_mercadopago.py

Webhook endpoint para MercadoPago.

Endpoints:
- POST /payments/mercadopago/webhook   → notificación (requiere X-Signature)
- GET  /payments/mercadopago/webhook   → liveness, sin autenticación

El POST confirma con 200 en cuanto la firma es válida; la reconciliación
corre después, en segundo plano. MercadoPago reintenta ante cualquier
respuesta no-2xx, así que los errores de la pasarela o del backend nunca
se reflejan aquí.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from app.modules.payments.dependencies import PaymentsContainer, get_payments_container
from app.modules.payments.errors import AuthenticationError, ConfigurationError
from app.modules.payments.facades.webhooks import (
    authenticate_webhook,
    schedule_webhook_reconciliation,
)
from app.modules.payments.metrics import (
    observe_webhook_acknowledged,
    observe_webhook_received,
    observe_webhook_rejected,
)
from app.shared.utils.json_response import error_response, success_response

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/mercadopago",
    tags=["payments:webhooks"],
)

WEBHOOK_ACK_MESSAGE = "Webhook recibido correctamente"
INVALID_SIGNATURE_ERROR = "Firma inválida"
MISSING_SECRET_ERROR = "Webhook de MercadoPago no configurado"


@router.post("/webhook")
async def mercadopago_webhook(
    request: Request,
    container: PaymentsContainer = Depends(get_payments_container),
):
    """Recibe la notificación, la autentica y la confirma de inmediato."""
    observe_webhook_received()

    try:
        authenticate_webhook(request.headers, container.settings)
    except ConfigurationError:
        observe_webhook_rejected("missing_secret")
        return error_response(MISSING_SECRET_ERROR, status_code=500)
    except AuthenticationError:
        observe_webhook_rejected("invalid_signature")
        return error_response(INVALID_SIGNATURE_ERROR, status_code=401)

    raw_body = await request.body()
    schedule_webhook_reconciliation(container.jobs, container.reconciler, raw_body)

    observe_webhook_acknowledged()
    return success_response(message=WEBHOOK_ACK_MESSAGE)


@router.get("/webhook")
async def mercadopago_webhook_status():
    """Liveness del webhook (no toca la pasarela ni el backend)."""
    return success_response(
        message="Webhook de MercadoPago funcionando correctamente",
        endpoints={
            "webhook": "/payments/mercadopago/webhook",
            "checkout": "/payments/mercadopago/checkout",
        },
    )


# Fin del archivo backend/app/modules/payments/routes/webhooks_mercadopago.py
