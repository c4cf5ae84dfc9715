# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/checkout/__init__.py

Punto de entrada del submódulo de checkout del módulo Payments.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from .start_checkout import start_checkout
from .validators import CheckoutValidationError, validate_checkout_request

__all__ = [
    "CheckoutValidationError",
    "start_checkout",
    "validate_checkout_request",
]

# Fin del archivo backend/app/modules/payments/facades/checkout/__init__.py
