# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/__init__.py

Módulo de pagos de Personal Fit (MercadoPago).

Este módulo gestiona:
- Checkout: creación de preferencias de pago
- Webhook: autenticación y confirmación inmediata de notificaciones
- Reconciliación: consulta del pago en la pasarela y registro en el backend
- Barrido de pagos pendientes

Estructura:
- enums: PaymentStatus, MethodType, NotificationKind
- errors: jerarquía de excepciones (PaymentsError)
- schemas: contratos Pydantic (pasarela, backend, webhook, checkout)
- services: clientes HTTP y mapeo de estados
- facades: flujos de alto nivel (checkout, reconciliación, webhook)
- routes: endpoints FastAPI
- utils: codec de external_reference y helpers de fechas

Para evitar imports circulares este __init__ solo expone los enums y
errores; el resto se importa desde su subpaquete.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from .enums import MethodType, NotificationKind, PaymentStatus
from .errors import PaymentsError

__all__ = [
    "MethodType",
    "NotificationKind",
    "PaymentStatus",
    "PaymentsError",
]

# Fin del archivo backend/app/modules/payments/__init__.py
