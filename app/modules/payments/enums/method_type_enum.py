# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/enums/method_type_enum.py

Enum de métodos de pago internos.
Sincronizado con el enum MethodType del backend de Personal Fit.

MERCADOPAGO es el método genérico de pasarela: todo medio de pago
que la pasarela reporte y no tenga equivalente directo cae aquí.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from enum import StrEnum


class MethodType(StrEnum):
    """Método con el que se abonó la cuota."""

    CASH = "CASH"
    CARD = "CARD"
    TRANSFER = "TRANSFER"
    MERCADOPAGO = "MERCADOPAGO"

    @classmethod
    def gateway(cls) -> "MethodType":
        """Método genérico usado para medios de pasarela no reconocidos."""
        return cls.MERCADOPAGO


__all__ = ["MethodType"]

# Fin del archivo backend/app/modules/payments/enums/method_type_enum.py
