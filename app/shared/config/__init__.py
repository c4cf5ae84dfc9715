# -*- coding: utf-8 -*-
"""
backend/app/shared/config/__init__.py

Punto único de acceso a la configuración:
    from app.shared.config import get_payments_settings, setup_logging

Autor: Personal Fit
Fecha: 2026-10-16
"""

from .logging_config import setup_logging
from .settings_payments import PaymentsSettings, get_payments_settings

__all__ = [
    "PaymentsSettings",
    "get_payments_settings",
    "setup_logging",
]

# Fin del archivo backend/app/shared/config/__init__.py
