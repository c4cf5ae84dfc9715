# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/services/__init__.py

Superficie de exportación de servicios del módulo Payments.

Incluye:
- MercadoPagoClient (API de la pasarela)
- BackendPaymentsClient (API del backend de Personal Fit)
- map_status / map_method (vocabulario de la pasarela → enums internos)

Autor: Personal Fit
Fecha: 2026-10-16
"""

from .gateway_client import MercadoPagoClient
from .backend_client import BackendPaymentsClient
from .status_mapper import map_method, map_status

__all__ = [
    "MercadoPagoClient",
    "BackendPaymentsClient",
    "map_method",
    "map_status",
]

# Fin del archivo backend/app/modules/payments/services/__init__.py
