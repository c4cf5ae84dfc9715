# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/__init__.py

Punto de entrada del paquete de fachadas del módulo Payments.

Diseño:
- Para evitar dependencias circulares, este __init__ NO realiza imports
  automáticos de submódulos. Cada facade se importa desde su paquete:

      from app.modules.payments.facades.checkout import start_checkout
      from app.modules.payments.facades.reconciliation import Reconciler
      from app.modules.payments.facades.webhooks import schedule_webhook_reconciliation

Autor: Personal Fit
Fecha: 2026-10-16
"""

__all__: list[str] = []

# Fin del archivo backend/app/modules/payments/facades/__init__.py
