# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/schemas/gateway_schemas.py

Contratos con la API de MercadoPago.

- GatewayPayment: snapshot de solo lectura de GET /v1/payments/{id}.
- PreferenceItem / BackUrls / PreferenceInfo: creación de preferencias
  (POST /checkout/preferences).

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .common_schemas import coerce_optional_str


class GatewayPayment(BaseModel):
    """Estado autoritativo de un pago según MercadoPago. Nunca se modifica."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    status: Optional[str] = None
    status_detail: Optional[str] = None
    transaction_amount: Optional[float] = None
    currency_id: Optional[str] = None
    payment_type_id: Optional[str] = Field(
        default=None,
        description="Tipo de medio (credit_card, debit_card, bank_transfer, ...).",
    )
    payment_method_id: Optional[str] = Field(
        default=None,
        description="Medio concreto (visa, master, account_money, ...).",
    )
    installments: Optional[int] = None
    external_reference: Optional[str] = None
    date_created: Optional[datetime] = None

    @model_validator(mode="before")
    @classmethod
    def _payment_method_type_fallback(cls, data: Any) -> Any:
        # Respuestas nuevas traen el tipo dentro de payment_method.type
        if isinstance(data, dict) and not data.get("payment_type_id"):
            method = data.get("payment_method")
            if isinstance(method, dict) and method.get("type"):
                data = {**data, "payment_type_id": method["type"]}
        return data

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v):
        return coerce_optional_str(v)

    @property
    def payment_method_type(self) -> Optional[str]:
        return self.payment_type_id


class PreferenceItem(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    quantity: int = Field(default=1, ge=1)
    currency_id: str = "ARS"
    unit_price: float = Field(gt=0)


class BackUrls(BaseModel):
    success: str
    failure: str
    pending: str


class PreferenceInfo(BaseModel):
    """Datos de la preferencia creada que necesita el frontend."""

    preference_id: str
    init_point: Optional[str] = None
    sandbox_init_point: Optional[str] = None


__all__ = [
    "GatewayPayment",
    "PreferenceItem",
    "BackUrls",
    "PreferenceInfo",
]

# Fin del archivo backend/app/modules/payments/schemas/gateway_schemas.py
