# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/metrics/routes/__init__.py

Router de métricas del módulo de pagos (Prometheus + resumen JSON).
"""

from .routes_prometheus import router_prometheus

__all__ = ["router_prometheus"]

# Fin del archivo backend/app/modules/payments/metrics/routes/__init__.py
