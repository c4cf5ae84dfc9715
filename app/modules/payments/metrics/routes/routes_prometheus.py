# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/metrics/routes/routes_prometheus.py

Rutas de métricas del servicio de pagos:
- /metrics                   → export en formato Prometheus (scraping)
- /metrics/ping              → health simple del exporter
- /metrics/payments/summary  → contadores clave en JSON (soporte/operación)

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter
from starlette.responses import PlainTextResponse

from ..exporters.prometheus_exporter import (
    CONTENT_TYPE_LATEST,
    PROVIDER,
    get_sample_value,
    render_prometheus_metrics,
)

router_prometheus = APIRouter(tags=["payments-metrics"])

SUMMARY_SOURCES = ("webhook", "verify", "sweep")
SUMMARY_OUTCOMES = ("processed", "duplicate", "not-approved", "bad-reference", "unsupported-kind", "error")


@router_prometheus.get("/metrics", response_class=PlainTextResponse)
async def prometheus_metrics() -> PlainTextResponse:
    """Devuelve las métricas en formato Prometheus para scraping."""
    return PlainTextResponse(render_prometheus_metrics(), media_type=CONTENT_TYPE_LATEST)


@router_prometheus.get("/metrics/ping")
async def ping() -> Dict[str, Any]:
    return {"ok": True, "exporter": "prometheus"}


@router_prometheus.get("/metrics/payments/summary")
async def payments_summary() -> Dict[str, Any]:
    """Totales acumulados desde el arranque del proceso."""
    provider = {"provider": PROVIDER}
    return {
        "webhooks": {
            "received": get_sample_value("payments_webhook_received_total", provider),
            "acknowledged": get_sample_value("payments_webhook_acknowledged_total", provider),
            "rejected": {
                reason: get_sample_value(
                    "payments_webhook_rejected_total",
                    {**provider, "reason": reason},
                )
                for reason in ("invalid_signature", "missing_secret")
            },
        },
        "reconciliations": {
            source: {
                outcome: get_sample_value(
                    "payments_reconciliation_outcome_total",
                    {"source": source, "outcome": outcome},
                )
                for outcome in SUMMARY_OUTCOMES
            }
            for source in SUMMARY_SOURCES
        },
        "backend_writes": {
            result: get_sample_value("payments_backend_writes_total", {"result": result})
            for result in ("created", "duplicate", "failed")
        },
    }


# Fin del archivo backend/app/modules/payments/metrics/routes/routes_prometheus.py
