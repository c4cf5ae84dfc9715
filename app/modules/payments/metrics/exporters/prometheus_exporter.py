# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/metrics/exporters/prometheus_exporter.py

Exporter Prometheus para el módulo de pagos.

Registro propio (no el global de prometheus_client) para que los tests
puedan leer contadores sin interferencias del proceso.

Autor: Personal Fit
Fecha: 2026-10-16
"""

import logging

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

logger = logging.getLogger(__name__)

PROVIDER = "mercadopago"

# --------------------------------------------------------------------------
# Registro de Prometheus del módulo
# --------------------------------------------------------------------------
registry = CollectorRegistry()

# --------------------------------------------------------------------------
# Definición de métricas
# --------------------------------------------------------------------------

CHECKOUT_STARTED_TOTAL = Counter(
    "payments_checkout_started_total",
    "Preferencias de pago creadas por resultado",
    ["provider", "result"],
    registry=registry,
)

WEBHOOKS_RECEIVED_TOTAL = Counter(
    "payments_webhook_received_total",
    "Total webhooks recibidos por proveedor",
    ["provider"],
    registry=registry,
)
WEBHOOKS_REJECTED_TOTAL = Counter(
    "payments_webhook_rejected_total",
    "Total webhooks rechazados por proveedor y razón",
    ["provider", "reason"],  # reason: invalid_signature/missing_secret
    registry=registry,
)
WEBHOOKS_ACKNOWLEDGED_TOTAL = Counter(
    "payments_webhook_acknowledged_total",
    "Total webhooks autenticados y confirmados con 200",
    ["provider"],
    registry=registry,
)

RECONCILIATION_OUTCOME_TOTAL = Counter(
    "payments_reconciliation_outcome_total",
    "Reconciliaciones por origen y resultado",
    # source: webhook/verify/sweep
    # outcome: processed/duplicate/unsupported-kind/not-approved/bad-reference/error
    ["source", "outcome"],
    registry=registry,
)
RECONCILIATION_SECONDS = Histogram(
    "payments_reconciliation_seconds",
    "Duración de una reconciliación (segundos)",
    ["source"],
    registry=registry,
)

BACKEND_WRITES_TOTAL = Counter(
    "payments_backend_writes_total",
    "Escrituras de pagos en el backend por resultado",
    ["result"],  # result: created/duplicate/failed
    registry=registry,
)

SWEEPER_RUNS_TOTAL = Counter(
    "payments_sweeper_runs_total",
    "Barridos de pagos pendientes por resultado",
    ["result"],  # result: completed/aborted
    registry=registry,
)


# --------------------------------------------------------------------------
# Funciones auxiliares
# --------------------------------------------------------------------------
def render_prometheus_metrics() -> bytes:
    """Genera la salida actual de las métricas en formato Prometheus."""
    return generate_latest(registry)


def observe_webhook_received(provider: str = PROVIDER):
    WEBHOOKS_RECEIVED_TOTAL.labels(provider=provider).inc()


def observe_webhook_rejected(reason: str, provider: str = PROVIDER):
    """
    Registra webhook rechazado.

    Args:
        reason: invalid_signature/missing_secret
    """
    WEBHOOKS_REJECTED_TOTAL.labels(provider=provider, reason=reason).inc()
    logger.debug("[Prometheus] Webhook %s rejected reason=%s", provider, reason)


def observe_webhook_acknowledged(provider: str = PROVIDER):
    WEBHOOKS_ACKNOWLEDGED_TOTAL.labels(provider=provider).inc()


def observe_reconciliation(source: str, outcome: str, duration: float):
    """Registra el resultado y la duración de una reconciliación."""
    RECONCILIATION_OUTCOME_TOTAL.labels(source=source, outcome=outcome).inc()
    RECONCILIATION_SECONDS.labels(source=source).observe(duration)


def observe_backend_write(result: str):
    BACKEND_WRITES_TOTAL.labels(result=result).inc()


def observe_sweeper_run(result: str):
    SWEEPER_RUNS_TOTAL.labels(result=result).inc()


def observe_checkout(result: str, provider: str = PROVIDER):
    CHECKOUT_STARTED_TOTAL.labels(provider=provider, result=result).inc()


def get_sample_value(name: str, labels: dict) -> float:
    """Valor actual de una serie (0.0 si aún no existe)."""
    return registry.get_sample_value(name, labels) or 0.0


__all__ = [
    "CONTENT_TYPE_LATEST",
    "PROVIDER",
    "registry",
    "render_prometheus_metrics",
    "observe_webhook_received",
    "observe_webhook_rejected",
    "observe_webhook_acknowledged",
    "observe_reconciliation",
    "observe_backend_write",
    "observe_sweeper_run",
    "observe_checkout",
    "get_sample_value",
]

# Fin del archivo backend/app/modules/payments/metrics/exporters/prometheus_exporter.py
