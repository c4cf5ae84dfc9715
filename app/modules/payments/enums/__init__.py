# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/enums/__init__.py

Superficie de exportación de enums del módulo Payments.

Incluye:
- MethodType
- NotificationKind
- PaymentStatus

Autor: Personal Fit
Fecha: 2026-10-16
"""

from .method_type_enum import MethodType
from .notification_kind_enum import NotificationKind
from .payment_status_enum import PaymentStatus

__all__ = [
    "MethodType",
    "NotificationKind",
    "PaymentStatus",
]

# Fin del archivo backend/app/modules/payments/enums/__init__.py
