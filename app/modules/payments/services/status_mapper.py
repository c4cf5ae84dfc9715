# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/services/status_mapper.py

Traducción del vocabulario de MercadoPago a los enums internos.

Funciones puras y totales: cualquier valor desconocido (o None) cae en
el valor por defecto en lugar de lanzar una excepción.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

from typing import Mapping, Optional

from app.modules.payments.enums import MethodType, PaymentStatus

_STATUS_MAP: Mapping[str, PaymentStatus] = {
    "approved": PaymentStatus.PAID,
    "rejected": PaymentStatus.REJECTED,
    "cancelled": PaymentStatus.REJECTED,
}

_METHOD_MAP: Mapping[str, MethodType] = {
    "credit_card": MethodType.CARD,
    "debit_card": MethodType.CARD,
    "prepaid_card": MethodType.CARD,
    "bank_transfer": MethodType.TRANSFER,
}


def _normalize(value: Optional[str]) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip().lower()


def map_status(gateway_status: Optional[str]) -> PaymentStatus:
    """approved → PAID; rejected/cancelled → REJECTED; el resto → PENDING."""
    return _STATUS_MAP.get(_normalize(gateway_status), PaymentStatus.PENDING)


def map_method(payment_type: Optional[str]) -> MethodType:
    """Tarjetas → CARD; bank_transfer → TRANSFER; el resto → MERCADOPAGO."""
    return _METHOD_MAP.get(_normalize(payment_type), MethodType.gateway())


__all__ = ["map_status", "map_method"]

# Fin del archivo backend/app/modules/payments/services/status_mapper.py
