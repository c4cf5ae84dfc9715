# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/schemas/reconciliation_schemas.py

Resultados de reconciliación y del barrido de pagos pendientes.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field, computed_field, field_validator

from .common_schemas import CamelModel, coerce_optional_str
from .record_schemas import InternalPaymentRecord

# Razones por las que una reconciliación no crea (o no vuelve a crear) registro
REASON_UNSUPPORTED_KIND = "unsupported-kind"
REASON_NOT_APPROVED = "not-approved"
REASON_BAD_REFERENCE = "bad-reference"
REASON_DUPLICATE = "duplicate"

ReconciliationReason = Literal[
    "unsupported-kind",
    "not-approved",
    "bad-reference",
    "duplicate",
]

SweepOutcome = Literal["processed", "not-processed", "skipped", "failed"]


class ReconciliationResult(CamelModel):
    """
    Resultado de reconciliar una notificación.

    - processed=True: el pago aprobado quedó registrado en el backend
      (o ya lo estaba: duplicate=True).
    - processed=False: no-op; `reason` explica por qué.
    """

    processed: bool
    reason: Optional[ReconciliationReason] = None
    payment_id: Optional[str] = None
    gateway_status: Optional[str] = None
    duplicate: bool = False
    record: Optional[InternalPaymentRecord] = None

    @classmethod
    def skipped(
        cls,
        reason: ReconciliationReason,
        *,
        payment_id: Optional[str] = None,
        gateway_status: Optional[str] = None,
    ) -> "ReconciliationResult":
        return cls(
            processed=False,
            reason=reason,
            payment_id=payment_id,
            gateway_status=gateway_status,
        )


class VerifyPaymentRequest(CamelModel):
    """Cuerpo de POST /payments/mercadopago/verify."""

    payment_id: Optional[str] = None
    external_reference: Optional[str] = None

    @field_validator("payment_id", "external_reference", mode="before")
    @classmethod
    def _coerce_ids(cls, v):
        return coerce_optional_str(v)

    def resource_id(self) -> Optional[str]:
        """Se prefiere paymentId; si no, externalReference."""
        return self.payment_id or self.external_reference or None


class SweepItemOutcome(CamelModel):
    payment_id: Optional[int] = None
    conf_number: Optional[str] = None
    outcome: SweepOutcome
    reason: Optional[str] = None
    error: Optional[str] = None


class SweepReport(CamelModel):
    """Resumen de un barrido de pagos pendientes."""

    started_at: datetime
    finished_at: Optional[datetime] = None
    items: List[SweepItemOutcome] = Field(default_factory=list)

    def count(self, outcome: SweepOutcome) -> int:
        return sum(1 for item in self.items if item.outcome == outcome)

    @computed_field
    @property
    def total(self) -> int:
        return len(self.items)

    @computed_field
    @property
    def reconciled(self) -> int:
        return self.count("processed")

    @computed_field
    @property
    def not_processed(self) -> int:
        return self.count("not-processed")

    @computed_field
    @property
    def skipped(self) -> int:
        return self.count("skipped")

    @computed_field
    @property
    def failed(self) -> int:
        return self.count("failed")


__all__ = [
    "REASON_UNSUPPORTED_KIND",
    "REASON_NOT_APPROVED",
    "REASON_BAD_REFERENCE",
    "REASON_DUPLICATE",
    "ReconciliationReason",
    "ReconciliationResult",
    "VerifyPaymentRequest",
    "SweepOutcome",
    "SweepItemOutcome",
    "SweepReport",
]

# Fin del archivo backend/app/modules/payments/schemas/reconciliation_schemas.py
