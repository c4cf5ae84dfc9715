# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/routes/verify.py

Verificación manual de un pago (reconciliación síncrona).

Endpoint:
- POST /payments/mercadopago/verify  {paymentId?, externalReference?}

Lo usa la página de resultado del checkout para forzar el registro sin
esperar al webhook. No requiere firma.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from app.modules.payments.dependencies import get_reconciler
from app.modules.payments.enums import NotificationKind
from app.modules.payments.errors import PaymentsError
from app.modules.payments.facades.reconciliation import Reconciler
from app.modules.payments.schemas.reconciliation_schemas import VerifyPaymentRequest
from app.modules.payments.schemas.webhook_schemas import NotificationEnvelope
from app.shared.utils.json_response import UTF8JSONResponse, error_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mercadopago", tags=["payments:verify"])

MISSING_PARAMS_ERROR = "Faltan parámetros: paymentId o externalReference"


@router.post("/verify")
async def verify_payment(
    payload: Optional[VerifyPaymentRequest] = None,
    reconciler: Reconciler = Depends(get_reconciler),
):
    resource_id = payload.resource_id() if payload else None
    if not resource_id:
        return error_response(MISSING_PARAMS_ERROR, status_code=400)

    envelope = NotificationEnvelope(kind=NotificationKind.PAYMENT.value, resource_id=resource_id)
    try:
        result = await reconciler.reconcile(envelope, source="verify")
    except PaymentsError as e:
        logger.warning("Verificación del pago %s falló: %s", resource_id, e)
        return error_response(str(e), status_code=500, code=e.error_code)

    return UTF8JSONResponse(content=result.to_json_dict(), status_code=200)


# Fin del archivo backend/app/modules/payments/routes/verify.py
