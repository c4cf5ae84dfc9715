# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/enums/notification_kind_enum.py

Tipos de notificación que envía MercadoPago en el campo `type`.
Solo PAYMENT se reconcilia; el resto se reconoce como no-op.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from enum import StrEnum


class NotificationKind(StrEnum):
    """Valores conocidos del campo `type` de una notificación."""

    PAYMENT = "payment"
    MERCHANT_ORDER = "merchant_order"
    PLAN = "plan"
    SUBSCRIPTION = "subscription"
    POINT_INTEGRATION = "point_integration_wh"


__all__ = ["NotificationKind"]

# Fin del archivo backend/app/modules/payments/enums/notification_kind_enum.py
