# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/services/gateway_client.py

Cliente HTTP de la API de MercadoPago.

Operaciones:
- create_preference: POST /checkout/preferences
- get_payment_by_id: GET /v1/payments/{id}

Reglas:
- Bearer token tomado de PaymentsSettings; si falta → ConfigurationError
  antes de tocar la red.
- Timeout explícito (gateway_timeout_seconds). Sin reintentos automáticos.
- Red/timeout/5xx → GatewayUnavailable. 404 en lecturas → PaymentNotFound.
  4xx al crear preferencia → GatewayRejected (con status_code).
- El token nunca aparece en logs ni en mensajes de error.

El httpx.AsyncClient se crea una vez y se reutiliza (keep-alive); cerrar
con aclose() en el shutdown de la app.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from app.modules.payments.errors import (
    ConfigurationError,
    GatewayRejected,
    GatewayUnavailable,
    PaymentNotFound,
)
from app.modules.payments.schemas.gateway_schemas import (
    BackUrls,
    GatewayPayment,
    PreferenceInfo,
    PreferenceItem,
)
from app.shared.config.settings_payments import PaymentsSettings

logger = logging.getLogger(__name__)

# Medios offline excluidos: la cuota debe acreditarse en el momento
EXCLUDED_PAYMENT_METHODS = ("rapipago", "pagofacil")
EXCLUDED_PAYMENT_TYPES = ("ticket", "atm")

GATEWAY_HTTP_LIMITS = httpx.Limits(
    max_keepalive_connections=10,
    max_connections=20,
    keepalive_expiry=30.0,
)


class MercadoPagoClient:
    """Acceso autenticado a MercadoPago."""

    def __init__(
        self,
        settings: PaymentsSettings,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._settings = settings
        self._client = http_client or httpx.AsyncClient(
            base_url=settings.mp_api_base_url,
            timeout=httpx.Timeout(settings.gateway_timeout_seconds),
            limits=GATEWAY_HTTP_LIMITS,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    def _auth_headers(self) -> Dict[str, str]:
        token = self._settings.access_token()
        if not token:
            raise ConfigurationError("MP_ACCESS_TOKEN no configurado")
        return {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }

    # ------------------------------------------------------------------
    # Lecturas
    # ------------------------------------------------------------------

    async def get_payment_by_id(self, payment_id: str) -> GatewayPayment:
        """
        Consulta el estado autoritativo de un pago.

        Raises:
            ConfigurationError: falta el access token.
            PaymentNotFound: MercadoPago responde 404.
            GatewayUnavailable: error de red, timeout o cualquier otra falla.
        """
        headers = self._auth_headers()
        path = f"/v1/payments/{quote(str(payment_id), safe='')}"

        try:
            response = await self._client.get(path, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("MercadoPago GET payment %s falló: %s", payment_id, type(e).__name__)
            raise GatewayUnavailable(
                f"No se pudo consultar el pago {payment_id}: {type(e).__name__}"
            ) from e

        if response.status_code == 404:
            raise PaymentNotFound(str(payment_id))

        if response.status_code >= 400:
            logger.warning(
                "MercadoPago GET payment %s respondió %s",
                payment_id,
                response.status_code,
            )
            raise GatewayUnavailable(
                f"MercadoPago respondió {response.status_code} al consultar el pago {payment_id}",
                status_code=response.status_code,
            )

        try:
            return GatewayPayment.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise GatewayUnavailable(
                f"Respuesta inválida de MercadoPago para el pago {payment_id}",
                status_code=response.status_code,
            ) from e

    # ------------------------------------------------------------------
    # Preferencias
    # ------------------------------------------------------------------

    def build_preference_body(
        self,
        items: Sequence[PreferenceItem],
        back_urls: BackUrls,
        notification_url: str,
        external_reference: str,
        *,
        payer_email: Optional[str] = None,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "items": [item.model_dump(exclude_none=True) for item in items],
            "back_urls": back_urls.model_dump(),
            "notification_url": notification_url,
            "external_reference": external_reference,
            "statement_descriptor": self._settings.statement_descriptor,
            "payment_methods": {
                "excluded_payment_methods": [{"id": m} for m in EXCLUDED_PAYMENT_METHODS],
                "excluded_payment_types": [{"id": t} for t in EXCLUDED_PAYMENT_TYPES],
                "installments": 1,
            },
        }
        if payer_email:
            body["payer"] = {"email": payer_email}
        return body

    async def create_preference(
        self,
        items: Sequence[PreferenceItem],
        back_urls: BackUrls,
        notification_url: str,
        external_reference: str,
        *,
        payer_email: Optional[str] = None,
    ) -> PreferenceInfo:
        """
        Crea una preferencia de pago (Checkout Pro).

        Raises:
            ConfigurationError: falta el access token.
            GatewayRejected: MercadoPago responde 4xx.
            GatewayUnavailable: error de red, timeout o 5xx.
        """
        headers = self._auth_headers()
        body = self.build_preference_body(
            items,
            back_urls,
            notification_url,
            external_reference,
            payer_email=payer_email,
        )

        try:
            response = await self._client.post(
                "/checkout/preferences",
                json=body,
                headers=headers,
            )
        except httpx.HTTPError as e:
            logger.warning("MercadoPago POST preference falló: %s", type(e).__name__)
            raise GatewayUnavailable(
                f"No se pudo crear la preferencia: {type(e).__name__}"
            ) from e

        if 400 <= response.status_code < 500:
            logger.warning(
                "MercadoPago rechazó la preferencia (%s) ref=%s",
                response.status_code,
                external_reference,
            )
            raise GatewayRejected(
                f"MercadoPago rechazó la preferencia ({response.status_code})",
                status_code=response.status_code,
            )
        if response.status_code >= 500:
            raise GatewayUnavailable(
                f"MercadoPago respondió {response.status_code} al crear la preferencia",
                status_code=response.status_code,
            )

        try:
            data = response.json()
            return PreferenceInfo(
                preference_id=str(data["id"]),
                init_point=data.get("init_point"),
                sandbox_init_point=data.get("sandbox_init_point"),
            )
        except (ValueError, KeyError, TypeError) as e:
            raise GatewayUnavailable(
                "Respuesta inválida de MercadoPago al crear la preferencia",
                status_code=response.status_code,
            ) from e


__all__ = [
    "EXCLUDED_PAYMENT_METHODS",
    "EXCLUDED_PAYMENT_TYPES",
    "MercadoPagoClient",
]

# Fin del archivo backend/app/modules/payments/services/gateway_client.py
