# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/reconciliation/__init__.py

Submódulo de reconciliación: notificaciones y pagos pendientes.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from .core import Reconciler
from .sweeper import SKIP_MISSING_CONF_NUMBER, PendingPaymentsSweeper

__all__ = [
    "Reconciler",
    "PendingPaymentsSweeper",
    "SKIP_MISSING_CONF_NUMBER",
]

# Fin del archivo backend/app/modules/payments/facades/reconciliation/__init__.py
