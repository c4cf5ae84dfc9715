# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/webhooks/handler.py

Manejo del webhook de MercadoPago: autenticar, confirmar y reconciliar
en segundo plano.

La ruta responde 200 en cuanto la firma es válida; la reconciliación
corre como asyncio.Task registrada en el AsyncJobRegistry. Ningún error
de la pasarela o del backend llega a la respuesta del webhook: se
registran aquí, en el borde de la task.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from app.modules.payments.errors import AuthenticationError, PaymentsError
from app.modules.payments.schemas.reconciliation_schemas import ReconciliationResult
from app.modules.payments.services.webhooks.signature_verification import verify_webhook_headers
from app.shared.config.settings_payments import PaymentsSettings
from app.shared.utils.async_job_registry import AsyncJobRegistry
from ..reconciliation.core import Reconciler
from .normalize import parse_notification

logger = logging.getLogger(__name__)


def authenticate_webhook(headers: Mapping[str, str], settings: PaymentsSettings) -> None:
    """
    Exige que X-Signature coincida con el secreto configurado.

    Raises:
        ConfigurationError: WEBHOOK_SECRET no configurado.
        AuthenticationError: header ausente o distinto.
    """
    if not verify_webhook_headers(headers, settings.shared_secret()):
        raise AuthenticationError("X-Signature ausente o inválida")


async def process_webhook_body(
    reconciler: Reconciler,
    raw_body: bytes,
) -> Optional[ReconciliationResult]:
    """
    Cuerpo de la task en segundo plano. Nunca propaga excepciones.

    Returns:
        El resultado de la reconciliación, o None si el cuerpo era
        inválido o la reconciliación falló.
    """
    try:
        envelope = parse_notification(raw_body)
    except ValueError as e:
        logger.warning("Webhook MercadoPago descartado: %s", e)
        return None

    try:
        result = await reconciler.reconcile(envelope, source="webhook")
    except PaymentsError as e:
        logger.error(
            "❌ Reconciliación de webhook falló: type=%s id=%s error=%s",
            envelope.kind,
            envelope.resource_id,
            e,
        )
        return None
    except Exception:
        logger.exception(
            "❌ Error inesperado reconciliando webhook: type=%s id=%s",
            envelope.kind,
            envelope.resource_id,
        )
        return None

    logger.info(
        "Webhook reconciliado: id=%s processed=%s reason=%s",
        envelope.resource_id,
        result.processed,
        result.reason,
    )
    return result


def schedule_webhook_reconciliation(
    jobs: AsyncJobRegistry,
    reconciler: Reconciler,
    raw_body: bytes,
):
    """Lanza la reconciliación desacoplada del request. Retorna la task."""
    return jobs.spawn(process_webhook_body(reconciler, raw_body), job_id="mp-webhook")


__all__ = [
    "authenticate_webhook",
    "process_webhook_body",
    "schedule_webhook_reconciliation",
]

# Fin del archivo backend/app/modules/payments/facades/webhooks/handler.py
