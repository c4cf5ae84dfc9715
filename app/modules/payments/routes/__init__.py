# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/routes/__init__.py

Ensamblador de rutas REST del módulo Payments.

Incluye:
- /payments/mercadopago/webhook   (POST, GET)
- /payments/mercadopago/verify    (POST)
- /payments/mercadopago/checkout  (POST)
- /payments/mercadopago/pending   (POST, GET)

Autor: Personal Fit
Fecha: 2026-10-16
"""

from fastapi import APIRouter

from .checkout import router as checkout_router
from .pending import router as pending_router
from .verify import router as verify_router
from .webhooks_mercadopago import router as webhooks_mercadopago_router

router = APIRouter()

# Prefijo común /payments para todas las rutas del módulo
router.include_router(webhooks_mercadopago_router, prefix="/payments")
router.include_router(verify_router, prefix="/payments")
router.include_router(checkout_router, prefix="/payments")
router.include_router(pending_router, prefix="/payments")

__all__ = ["router"]

# Fin del archivo backend/app/modules/payments/routes/__init__.py
