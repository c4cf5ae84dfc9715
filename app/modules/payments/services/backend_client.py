# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/services/backend_client.py

Cliente HTTP del backend de Personal Fit (/api/payments).

- post_payment: POST /api/payments/webhook/mercadopago
    2xx → ok; 409 → DuplicatePayment; otro status o error de red →
    BackendWriteFailed.
- list_outstanding_payments: GET /api/payments/getAll
    Filtra pagos PENDING con método MERCADOPAGO; red/no-2xx →
    BackendUnavailable.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

import httpx
from pydantic import ValidationError

from app.modules.payments.enums import MethodType, PaymentStatus
from app.modules.payments.errors import (
    BackendUnavailable,
    BackendWriteFailed,
    DuplicatePayment,
)
from app.modules.payments.schemas.record_schemas import (
    InternalPaymentRecord,
    OutstandingPayment,
)
from app.shared.config.settings_payments import PaymentsSettings

logger = logging.getLogger(__name__)

WEBHOOK_PAYMENT_PATH = "/api/payments/webhook/mercadopago"
LIST_PAYMENTS_PATH = "/api/payments/getAll"


class BackendPaymentsClient:
    """Escritura y consulta de pagos contra el backend."""

    def __init__(
        self,
        settings: PaymentsSettings,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._settings = settings
        self._client = http_client or httpx.AsyncClient(
            base_url=settings.backend_base_url,
            timeout=httpx.Timeout(settings.backend_timeout_seconds),
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        token = self._settings.backend_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def post_payment(self, record: InternalPaymentRecord) -> None:
        """
        Registra un pago aprobado.

        Raises:
            DuplicatePayment: el backend ya tiene ese confNumber (409).
            BackendWriteFailed: cualquier otra respuesta no-2xx o error de red.
        """
        payload = record.to_backend_payload()
        try:
            response = await self._client.post(
                WEBHOOK_PAYMENT_PATH,
                json=payload,
                headers=self._headers(),
            )
        except httpx.HTTPError as e:
            logger.error(
                "Backend POST pago conf=%s falló: %s",
                record.conf_number,
                type(e).__name__,
            )
            raise BackendWriteFailed(
                f"No se pudo registrar el pago {record.conf_number}: {type(e).__name__}"
            ) from e

        if response.status_code == 409:
            raise DuplicatePayment(
                f"El pago {record.conf_number} ya estaba registrado",
                status_code=409,
                body_snippet=response.text,
            )

        if not response.is_success:
            logger.error(
                "Backend rechazó el pago conf=%s status=%s body=%s",
                record.conf_number,
                response.status_code,
                response.text[:300],
            )
            raise BackendWriteFailed(
                f"El backend respondió {response.status_code} al registrar el pago {record.conf_number}",
                status_code=response.status_code,
                body_snippet=response.text,
            )

        logger.info(
            "Pago registrado en backend: conf=%s dni=%s",
            record.conf_number,
            record.client_dni,
        )

    async def list_outstanding_payments(self) -> List[OutstandingPayment]:
        """
        Pagos MercadoPago que el backend todavía tiene como PENDING.

        Raises:
            BackendUnavailable: error de red, no-2xx o cuerpo ilegible.
        """
        try:
            response = await self._client.get(LIST_PAYMENTS_PATH, headers=self._headers())
        except httpx.HTTPError as e:
            raise BackendUnavailable(
                f"No se pudo listar pagos del backend: {type(e).__name__}"
            ) from e

        if not response.is_success:
            raise BackendUnavailable(
                f"El backend respondió {response.status_code} al listar pagos",
                status_code=response.status_code,
                body_snippet=response.text,
            )

        try:
            raw_items = response.json()
            if not isinstance(raw_items, list):
                raise ValueError("se esperaba una lista de pagos")
            payments = [OutstandingPayment.model_validate(item) for item in raw_items]
        except (ValueError, ValidationError) as e:
            raise BackendUnavailable(
                "Respuesta inválida del backend al listar pagos",
                status_code=response.status_code,
            ) from e

        return [
            p
            for p in payments
            if (p.status or "").upper() == PaymentStatus.PENDING
            and (p.method or "").upper() == MethodType.MERCADOPAGO
        ]


__all__ = [
    "WEBHOOK_PAYMENT_PATH",
    "LIST_PAYMENTS_PATH",
    "BackendPaymentsClient",
]

# Fin del archivo backend/app/modules/payments/services/backend_client.py
