# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/routes/checkout.py

Endpoint de checkout MercadoPago.

- POST /payments/mercadopago/checkout
    {productId, productName, productPrice, userEmail, userDni}
    → {preferenceId, initPoint, sandboxInitPoint, transactionId}

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, status

from app.modules.payments.dependencies import PaymentsContainer, get_payments_container
from app.modules.payments.errors import ConfigurationError, GatewayRejected, GatewayUnavailable
from app.modules.payments.facades.checkout import CheckoutValidationError, start_checkout
from app.modules.payments.metrics import observe_checkout
from app.modules.payments.schemas.checkout_schemas import CheckoutRequest
from app.shared.utils.json_response import UTF8JSONResponse, error_response

router = APIRouter(prefix="/mercadopago", tags=["payments:checkout"])


@router.post("/checkout")
async def create_checkout(
    payload: Optional[CheckoutRequest] = None,
    container: PaymentsContainer = Depends(get_payments_container),
):
    """Crea la preferencia de pago para la cuota seleccionada."""
    try:
        response = await start_checkout(
            payload or CheckoutRequest(),
            gateway=container.gateway,
            settings=container.settings,
        )
    except CheckoutValidationError as e:
        observe_checkout("invalid")
        return error_response(str(e), status_code=status.HTTP_400_BAD_REQUEST)
    except ConfigurationError:
        observe_checkout("error")
        return error_response(
            "Configuración de MercadoPago incompleta",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    except GatewayRejected as e:
        observe_checkout("rejected")
        if e.status_code == status.HTTP_401_UNAUTHORIZED:
            return error_response(
                "Token de MercadoPago inválido",
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        return error_response("Datos de pago inválidos", status_code=status.HTTP_400_BAD_REQUEST)
    except GatewayUnavailable:
        observe_checkout("error")
        return error_response(
            "Error de conexión con MercadoPago",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    observe_checkout("created")
    return UTF8JSONResponse(content=response.to_json_dict())


# Fin del archivo backend/app/modules/payments/routes/checkout.py
