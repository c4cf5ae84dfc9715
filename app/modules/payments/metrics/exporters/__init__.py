# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/metrics/exporters/__init__.py
"""

from .prometheus_exporter import CONTENT_TYPE_LATEST, PROVIDER, registry, render_prometheus_metrics

__all__ = ["CONTENT_TYPE_LATEST", "PROVIDER", "registry", "render_prometheus_metrics"]

# Fin del archivo backend/app/modules/payments/metrics/exporters/__init__.py
