# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/routes/pending.py

Barrido manual de pagos pendientes.

Endpoints:
- POST /payments/mercadopago/pending  → ejecuta el barrido y devuelve el reporte
- GET  /payments/mercadopago/pending  → vista previa de los pendientes

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from app.modules.payments.dependencies import get_sweeper
from app.modules.payments.errors import PaymentsError
from app.modules.payments.facades.reconciliation import PendingPaymentsSweeper
from app.shared.utils.json_response import error_response, success_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mercadopago", tags=["payments:pending"])


@router.post("/pending")
async def process_pending_payments(
    sweeper: PendingPaymentsSweeper = Depends(get_sweeper),
):
    logger.info("🔄 Procesamiento manual de pagos pendientes")
    try:
        report = await sweeper.sweep()
    except PaymentsError as e:
        logger.error("❌ Error procesando pagos pendientes: %s", e)
        return error_response(str(e), status_code=500, code=e.error_code)

    return success_response(
        message="Pagos pendientes procesados",
        result=report.to_json_dict(),
    )


@router.get("/pending")
async def pending_payments_info(
    sweeper: PendingPaymentsSweeper = Depends(get_sweeper),
):
    try:
        pending = await sweeper.list_pending()
    except PaymentsError as e:
        logger.error("❌ Error obteniendo pagos pendientes: %s", e)
        return error_response(str(e), status_code=500, code=e.error_code)

    with_reference = [p for p in pending if p.has_gateway_reference]
    return success_response(
        message="Información de pagos pendientes",
        info={
            "total": len(pending),
            "withConfNumber": len(with_reference),
            "withoutConfNumber": len(pending) - len(with_reference),
            "payments": [p.to_json_dict() for p in pending],
        },
    )


# Fin del archivo backend/app/modules/payments/routes/pending.py
