# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/reconciliation/sweeper.py

Barrido de pagos pendientes.

Lista los pagos MercadoPago que el backend todavía tiene como PENDING y
vuelve a reconciliar cada uno usando su confNumber (ID del pago en la
pasarela). La falla de un elemento se registra en el reporte y no corta
el barrido; si no se puede obtener el listado, el error se propaga.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from app.modules.payments.enums import NotificationKind
from app.modules.payments.errors import PaymentsError
from app.modules.payments.metrics import observe_sweeper_run
from app.modules.payments.schemas.record_schemas import OutstandingPayment
from app.modules.payments.schemas.reconciliation_schemas import (
    SweepItemOutcome,
    SweepReport,
)
from app.modules.payments.schemas.webhook_schemas import NotificationEnvelope
from app.modules.payments.utils.datetime_helpers import utcnow
from .core import Reconciler

logger = logging.getLogger(__name__)

SKIP_MISSING_CONF_NUMBER = "missing-conf-number"


class PendingPaymentsSweeper:
    """Re-reconcilia los pagos pendientes del backend."""

    def __init__(self, backend, reconciler: Reconciler, *, clock: Optional[Callable] = None) -> None:
        self._backend = backend
        self._reconciler = reconciler
        self._clock = clock or utcnow

    async def list_pending(self) -> List[OutstandingPayment]:
        return await self._backend.list_outstanding_payments()

    async def sweep(self) -> SweepReport:
        """
        Raises:
            BackendUnavailable: no se pudo listar los pagos pendientes.
        """
        report = SweepReport(started_at=self._clock())
        try:
            outstanding = await self.list_pending()
        except PaymentsError:
            observe_sweeper_run("aborted")
            raise

        logger.info("🔄 Barrido de pendientes: %d pagos", len(outstanding))

        for item in outstanding:
            report.items.append(await self._sweep_one(item))

        report.finished_at = self._clock()
        observe_sweeper_run("completed")
        logger.info(
            "✅ Barrido completado: total=%d reconciled=%d skipped=%d failed=%d",
            report.total,
            report.reconciled,
            report.skipped,
            report.failed,
        )
        return report

    async def _sweep_one(self, item: OutstandingPayment) -> SweepItemOutcome:
        if not item.has_gateway_reference:
            return SweepItemOutcome(
                payment_id=item.id,
                outcome="skipped",
                reason=SKIP_MISSING_CONF_NUMBER,
            )

        envelope = NotificationEnvelope(
            kind=NotificationKind.PAYMENT.value,
            resource_id=item.conf_number,
        )
        try:
            result = await self._reconciler.reconcile(envelope, source="sweep")
        except PaymentsError as e:
            logger.warning("Barrido: pago %s (conf=%s) falló: %s", item.id, item.conf_number, e)
            return SweepItemOutcome(
                payment_id=item.id,
                conf_number=item.conf_number,
                outcome="failed",
                error=str(e),
            )
        except Exception as e:
            logger.exception("Barrido: error inesperado en pago %s (conf=%s)", item.id, item.conf_number)
            return SweepItemOutcome(
                payment_id=item.id,
                conf_number=item.conf_number,
                outcome="failed",
                error=repr(e),
            )

        return SweepItemOutcome(
            payment_id=item.id,
            conf_number=item.conf_number,
            outcome="processed" if result.processed else "not-processed",
            reason=result.reason,
        )


__all__ = ["PendingPaymentsSweeper", "SKIP_MISSING_CONF_NUMBER"]

# Fin del archivo backend/app/modules/payments/facades/reconciliation/sweeper.py
