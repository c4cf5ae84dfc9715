# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/utils/__init__.py

Utilidades puras del módulo Payments (fechas y external_reference).

Autor: Personal Fit
Fecha: 2026-10-16
"""

from .external_reference import (
    ExternalReference,
    REFERENCE_DELIMITER,
    REFERENCE_VERSION,
    encode_reference,
    decode_reference,
    try_decode_reference,
)

__all__ = [
    "ExternalReference",
    "REFERENCE_DELIMITER",
    "REFERENCE_VERSION",
    "encode_reference",
    "decode_reference",
    "try_decode_reference",
]
