# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/checkout/validators.py

Validadores de negocio para el flujo de checkout.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

import re

from app.modules.payments.schemas.checkout_schemas import CheckoutRequest
from app.modules.payments.utils.external_reference import REFERENCE_DELIMITER

# Solo dígitos ASCII: int() rechaza superíndices y otros dígitos Unicode
_DNI_PATTERN = re.compile(r"[0-9]+")

MISSING_FIELDS_MESSAGE = (
    "Faltan datos requeridos: productId, productName, productPrice, userEmail y userDni"
)


class CheckoutValidationError(ValueError):
    """Error de validación de negocio en el flujo de checkout (400)."""


def validate_checkout_request(data: CheckoutRequest) -> None:
    """Validaciones adicionales a las de Pydantic."""

    if data.missing_fields():
        raise CheckoutValidationError(MISSING_FIELDS_MESSAGE)

    if not _DNI_PATTERN.fullmatch(data.user_dni):
        raise CheckoutValidationError("userDni debe ser numérico")

    # El productId viaja dentro de external_reference
    if REFERENCE_DELIMITER in data.product_id:
        raise CheckoutValidationError(
            f"productId no puede contener '{REFERENCE_DELIMITER}'"
        )

    if data.product_price <= 0:
        raise CheckoutValidationError("productPrice debe ser mayor a 0")


__all__ = [
    "MISSING_FIELDS_MESSAGE",
    "CheckoutValidationError",
    "validate_checkout_request",
]

# Fin del archivo backend/app/modules/payments/facades/checkout/validators.py
