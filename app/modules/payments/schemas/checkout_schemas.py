# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/schemas/checkout_schemas.py

Esquemas del checkout MercadoPago (creación de preferencia).

Los campos del request son opcionales a propósito: la ruta responde 400
con un mensaje explícito cuando falta alguno, igual que el frontend
espera, en lugar del 422 genérico de validación.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

from typing import Optional

from pydantic import field_validator

from .common_schemas import CamelModel, coerce_optional_str

REQUIRED_CHECKOUT_FIELDS = (
    "product_id",
    "product_name",
    "product_price",
    "user_email",
    "user_dni",
)


class CheckoutRequest(CamelModel):
    """Cuerpo de POST /payments/mercadopago/checkout."""

    product_id: Optional[str] = None
    product_name: Optional[str] = None
    product_price: Optional[float] = None
    user_email: Optional[str] = None
    user_dni: Optional[str] = None

    @field_validator("product_id", "user_dni", mode="before")
    @classmethod
    def _coerce_ids(cls, v):
        return coerce_optional_str(v)

    def missing_fields(self) -> list[str]:
        """Campos requeridos ausentes o vacíos (en camelCase)."""
        missing = []
        for name in REQUIRED_CHECKOUT_FIELDS:
            if not getattr(self, name):
                missing.append(type(self).model_fields[name].alias or name)
        return missing


class CheckoutResponse(CamelModel):
    """Respuesta del checkout: datos para redirigir a MercadoPago."""

    preference_id: str
    init_point: Optional[str] = None
    sandbox_init_point: Optional[str] = None
    transaction_id: str


__all__ = [
    "REQUIRED_CHECKOUT_FIELDS",
    "CheckoutRequest",
    "CheckoutResponse",
]

# Fin del archivo backend/app/modules/payments/schemas/checkout_schemas.py
