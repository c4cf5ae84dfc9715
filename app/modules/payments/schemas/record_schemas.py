# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/schemas/record_schemas.py

Contratos con el backend de Personal Fit (API /api/payments).

- InternalPaymentRecord: cuerpo de POST /api/payments/webhook/mercadopago
  (PaymentRequestDTO del backend).
- OutstandingPayment: elemento de GET /api/payments/getAll usado por el
  barrido de pendientes.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import ConfigDict, field_serializer, field_validator

from app.modules.payments.enums import MethodType, PaymentStatus
from app.modules.payments.utils.datetime_helpers import to_backend_datetime
from .common_schemas import CamelModel, coerce_optional_str


class InternalPaymentRecord(CamelModel):
    """
    Registro de pago que se crea en el backend al aprobarse un pago.

    `expires_at` siempre se deriva de `created_at` (ver Reconciler);
    `conf_number` es el ID del pago en MercadoPago y actúa como clave
    de deduplicación en el backend.
    """

    model_config = ConfigDict(frozen=True)

    client_dni: int
    amount: float
    created_at: datetime
    expires_at: datetime
    payment_status: PaymentStatus
    conf_number: str
    method_type: MethodType

    @field_serializer("created_at", "expires_at")
    def _serialize_dates(self, value: datetime) -> str:
        return to_backend_datetime(value)

    def to_backend_payload(self) -> dict[str, Any]:
        """JSON que espera el backend: {clientDni, amount, ..., confNumber}."""
        return self.to_json_dict()


class OutstandingPayment(CamelModel):
    """Pago que el backend todavía considera pendiente."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = None
    status: Optional[str] = None
    method: Optional[str] = None
    conf_number: Optional[str] = None
    client_dni: Optional[int] = None
    amount: Optional[float] = None
    created_at: Optional[datetime] = None

    @field_validator("conf_number", mode="before")
    @classmethod
    def _coerce_conf_number(cls, v):
        return coerce_optional_str(v)

    @property
    def has_gateway_reference(self) -> bool:
        return bool(self.conf_number)


__all__ = [
    "InternalPaymentRecord",
    "OutstandingPayment",
]

# Fin del archivo backend/app/modules/payments/schemas/record_schemas.py
