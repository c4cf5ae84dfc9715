# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/reconciliation/core.py

Lógica principal de reconciliación: notificación → registro de pago.

Flujo de Reconciler.reconcile():
    1. Solo se procesan notificaciones de tipo "payment".
    2. Se consulta el pago en MercadoPago (fuente de verdad; el cuerpo
       del webhook nunca se usa como estado).
    3. Si el estado mapeado no es PAID, no se escribe nada.
    4. Se decodifica external_reference ({dni}-{producto}-...).
    5. Se construye el registro (expiresAt = createdAt + período) y se
       envía al backend.

Es seguro llamarlo varias veces con el mismo recurso: un 409 del backend
(confNumber ya registrado) se trata como no-op exitoso.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from app.modules.payments.enums import NotificationKind, PaymentStatus
from app.modules.payments.errors import DuplicatePayment, MalformedReference, PaymentsError
from app.modules.payments.metrics import observe_backend_write, observe_reconciliation
from app.modules.payments.schemas.gateway_schemas import GatewayPayment
from app.modules.payments.schemas.record_schemas import InternalPaymentRecord
from app.modules.payments.schemas.reconciliation_schemas import (
    REASON_BAD_REFERENCE,
    REASON_DUPLICATE,
    REASON_NOT_APPROVED,
    REASON_UNSUPPORTED_KIND,
    ReconciliationResult,
)
from app.modules.payments.schemas.webhook_schemas import NotificationEnvelope
from app.modules.payments.services.status_mapper import map_method, map_status
from app.modules.payments.utils.datetime_helpers import add_days, utcnow
from app.modules.payments.utils.external_reference import ExternalReference, decode_reference

logger = logging.getLogger(__name__)


class Reconciler:
    """
    Convierte notificaciones de MercadoPago en registros de pago.

    Args:
        gateway: cliente de MercadoPago (get_payment_by_id)
        backend: cliente del backend (post_payment)
        membership_period_days: vigencia de la cuota
        clock: fuente de "ahora" en UTC (inyectable en tests)
    """

    def __init__(
        self,
        gateway,
        backend,
        *,
        membership_period_days: int = 30,
        clock: Optional[Callable] = None,
    ) -> None:
        self._gateway = gateway
        self._backend = backend
        self._period_days = membership_period_days
        self._clock = clock or utcnow

    async def reconcile(
        self,
        notification: NotificationEnvelope,
        *,
        source: str = "webhook",
    ) -> ReconciliationResult:
        """
        Reconcilia una notificación.

        Raises:
            GatewayUnavailable / PaymentNotFound: fallas al consultar la pasarela.
            BackendWriteFailed: el backend no aceptó el registro.
        """
        started = time.perf_counter()
        outcome = "error"
        try:
            result = await self._reconcile(notification)
            outcome = result.reason or "processed"
            return result
        finally:
            observe_reconciliation(source, outcome, time.perf_counter() - started)

    async def _reconcile(self, notification: NotificationEnvelope) -> ReconciliationResult:
        if notification.kind != NotificationKind.PAYMENT:
            logger.info(
                "Notificación ignorada: type=%s id=%s",
                notification.kind,
                notification.resource_id,
            )
            return ReconciliationResult.skipped(REASON_UNSUPPORTED_KIND)

        payment = await self._gateway.get_payment_by_id(notification.resource_id)
        status = map_status(payment.status)

        if status != PaymentStatus.PAID:
            logger.info(
                "Pago %s no aprobado (status=%s → %s); sin cambios",
                payment.id,
                payment.status,
                status,
            )
            return ReconciliationResult.skipped(
                REASON_NOT_APPROVED,
                payment_id=payment.id,
                gateway_status=payment.status,
            )

        try:
            reference = decode_reference(payment.external_reference)
        except MalformedReference as e:
            logger.warning("Pago %s aprobado con referencia inválida: %s", payment.id, e.reason)
            return ReconciliationResult.skipped(
                REASON_BAD_REFERENCE,
                payment_id=payment.id,
                gateway_status=payment.status,
            )

        record = self.build_record(payment, reference, status)

        try:
            await self._backend.post_payment(record)
        except DuplicatePayment:
            observe_backend_write("duplicate")
            logger.info("Pago %s ya registrado en backend; no-op", payment.id)
            return ReconciliationResult(
                processed=True,
                duplicate=True,
                reason=REASON_DUPLICATE,
                payment_id=payment.id,
                gateway_status=payment.status,
                record=record,
            )
        except PaymentsError:
            observe_backend_write("failed")
            raise

        observe_backend_write("created")
        logger.info(
            "✅ Pago %s reconciliado: dni=%s producto=%s monto=%s",
            payment.id,
            reference.subject_id,
            reference.product_id,
            record.amount,
        )
        return ReconciliationResult(
            processed=True,
            payment_id=payment.id,
            gateway_status=payment.status,
            record=record,
        )

    def build_record(
        self,
        payment: GatewayPayment,
        reference: ExternalReference,
        status: PaymentStatus,
    ) -> InternalPaymentRecord:
        """Registro interno; expires_at siempre se deriva de created_at."""
        created_at = self._clock()
        return InternalPaymentRecord(
            client_dni=reference.subject_id,
            amount=payment.transaction_amount or 0.0,
            created_at=created_at,
            expires_at=add_days(created_at, self._period_days),
            payment_status=status,
            conf_number=payment.id,
            method_type=map_method(payment.payment_method_type),
        )


__all__ = ["Reconciler"]

# Fin del archivo backend/app/modules/payments/facades/reconciliation/core.py
