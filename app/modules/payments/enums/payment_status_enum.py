# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/enums/payment_status_enum.py

Enum de estados internos del pago.
Sincronizado con el enum PaymentStatus del backend de Personal Fit.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from enum import StrEnum


class PaymentStatus(StrEnum):
    """Estado interno de un pago registrado en el backend."""

    PENDING = "PENDING"
    PAID = "PAID"
    REJECTED = "REJECTED"
    EXPIRED = "EXPIRED"


__all__ = ["PaymentStatus"]

# Fin del archivo backend/app/modules/payments/enums/payment_status_enum.py
