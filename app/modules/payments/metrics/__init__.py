# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/metrics/__init__.py

Métricas Prometheus del subsistema de pagos.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from .exporters.prometheus_exporter import (
    get_sample_value,
    observe_backend_write,
    observe_checkout,
    observe_reconciliation,
    observe_sweeper_run,
    observe_webhook_acknowledged,
    observe_webhook_received,
    observe_webhook_rejected,
    registry,
    render_prometheus_metrics,
)

__all__ = [
    "get_sample_value",
    "observe_backend_write",
    "observe_checkout",
    "observe_reconciliation",
    "observe_sweeper_run",
    "observe_webhook_acknowledged",
    "observe_webhook_received",
    "observe_webhook_rejected",
    "registry",
    "render_prometheus_metrics",
]
