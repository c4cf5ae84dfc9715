# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/services/webhooks/__init__.py

Servicios relacionados con el webhook de MercadoPago.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from .signature_verification import (
    SIGNATURE_HEADER,
    extract_signature,
    verify_shared_secret,
    verify_webhook_headers,
)

__all__ = [
    "SIGNATURE_HEADER",
    "extract_signature",
    "verify_shared_secret",
    "verify_webhook_headers",
]

# Fin del archivo backend/app/modules/payments/services/webhooks/__init__.py
