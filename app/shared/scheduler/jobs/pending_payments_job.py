# -*- coding: utf-8 -*-
"""
backend/app/shared/scheduler/jobs/pending_payments_job.py

Job programado que re-reconcilia los pagos MercadoPago pendientes.

Complementa al webhook: si una notificación se perdió o su
reconciliación falló, el barrido periódico vuelve a consultar la
pasarela por cada pago PENDING del backend.

Autor: Personal Fit
Fecha: 2026-10-16
"""

import logging
from typing import Any, Dict

from app.modules.payments.errors import PaymentsError

logger = logging.getLogger(__name__)

PENDING_PAYMENTS_JOB_ID = "pending_payments_sweep"


async def run_pending_payments_sweep(sweeper) -> Dict[str, Any]:
    """
    Ejecuta un barrido. Los errores se registran y no detienen el scheduler.

    Returns:
        Dict con el resumen del barrido (o el error).
    """
    try:
        report = await sweeper.sweep()
    except PaymentsError as e:
        logger.error("[pending_sweep] barrido abortado: %s", e)
        return {"error": str(e)}

    logger.info(
        "[pending_sweep] total=%d reconciled=%d skipped=%d failed=%d",
        report.total,
        report.reconciled,
        report.skipped,
        report.failed,
    )
    return report.to_json_dict()


def register_pending_payments_job(scheduler, sweeper, interval_minutes: int) -> str:
    """
    Registra el barrido de pendientes en el scheduler.

    Args:
        scheduler: Instancia de SchedulerService
        sweeper: PendingPaymentsSweeper
        interval_minutes: Minutos entre barridos

    Returns:
        ID del job registrado
    """
    scheduler.add_interval_job(
        func=run_pending_payments_sweep,
        job_id=PENDING_PAYMENTS_JOB_ID,
        minutes=interval_minutes,
        sweeper=sweeper,
    )
    logger.info(
        "[pending_sweep] Job '%s' registrado: cada %d minutos",
        PENDING_PAYMENTS_JOB_ID,
        interval_minutes,
    )
    return PENDING_PAYMENTS_JOB_ID


# Fin del archivo backend/app/shared/scheduler/jobs/pending_payments_job.py
