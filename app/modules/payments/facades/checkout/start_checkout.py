# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/checkout/start_checkout.py

Fachada de alto nivel para iniciar un checkout de cuota en MercadoPago.

Orquesta:
- Validación de payload (CheckoutRequest)
- Generación del external_reference ({dni}-{producto}-{millis}-{nonce})
- Creación de la preferencia en MercadoPago
- Construcción de CheckoutResponse para el frontend

El external_reference es lo único que vincula el pago con el socio:
el Reconciler lo decodifica cuando llega la notificación.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

import logging

from app.modules.payments.schemas.checkout_schemas import CheckoutRequest, CheckoutResponse
from app.modules.payments.schemas.gateway_schemas import BackUrls, PreferenceItem
from app.modules.payments.utils.external_reference import encode_reference
from app.shared.config.settings_payments import PaymentsSettings
from .validators import validate_checkout_request

logger = logging.getLogger(__name__)

ITEM_DESCRIPTION = "Cuota mensual gimnasio Personal Fit"


async def start_checkout(
    payload: CheckoutRequest,
    *,
    gateway,
    settings: PaymentsSettings,
) -> CheckoutResponse:
    """
    Crea la preferencia de pago y devuelve los datos de redirección.

    Raises:
        CheckoutValidationError: datos faltantes o inválidos.
        ConfigurationError / GatewayRejected / GatewayUnavailable: del
            cliente de MercadoPago.
    """
    # 1) Validaciones de negocio
    validate_checkout_request(payload)

    # 2) Referencia que MercadoPago devolverá intacta
    transaction_id = encode_reference(int(payload.user_dni), payload.product_id)

    # 3) Preferencia
    item = PreferenceItem(
        id=payload.product_id,
        title=payload.product_name,
        description=ITEM_DESCRIPTION,
        quantity=1,
        currency_id=settings.currency_id,
        unit_price=payload.product_price,
    )
    preference = await gateway.create_preference(
        [item],
        BackUrls(**settings.back_urls()),
        settings.webhook_url,
        transaction_id,
        payer_email=payload.user_email,
    )

    logger.info(
        "Checkout creado: preference=%s ref=%s",
        preference.preference_id,
        transaction_id,
    )

    # 4) Respuesta al frontend
    return CheckoutResponse(
        preference_id=preference.preference_id,
        init_point=preference.init_point,
        sandbox_init_point=preference.sandbox_init_point,
        transaction_id=transaction_id,
    )


__all__ = ["ITEM_DESCRIPTION", "start_checkout"]

# Fin del archivo backend/app/modules/payments/facades/checkout/start_checkout.py
