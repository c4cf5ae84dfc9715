# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/dependencies.py

Contenedor de colaboradores del módulo Payments y dependencias FastAPI.

La app construye UN PaymentsContainer en el lifespan (a partir de
PaymentsSettings) y lo guarda en app.state.payments. Las rutas lo
obtienen vía Depends; los tests pueden inyectar un contenedor con
clientes falsos en create_app(container=...).

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from fastapi import Depends, Request

from app.shared.config.settings_payments import PaymentsSettings
from app.shared.scheduler import SchedulerService
from app.shared.utils.async_job_registry import AsyncJobRegistry
from .facades.reconciliation import PendingPaymentsSweeper, Reconciler
from .services.backend_client import BackendPaymentsClient
from .services.gateway_client import MercadoPagoClient

logger = logging.getLogger(__name__)


@dataclass
class PaymentsContainer:
    """Colaboradores con ciclo de vida ligado a la app."""

    settings: PaymentsSettings
    gateway: MercadoPagoClient
    backend: BackendPaymentsClient
    reconciler: Reconciler
    sweeper: PendingPaymentsSweeper
    jobs: AsyncJobRegistry = field(default_factory=lambda: AsyncJobRegistry("mp-webhooks"))
    scheduler: Optional[SchedulerService] = None

    @classmethod
    def build(
        cls,
        settings: PaymentsSettings,
        *,
        gateway=None,
        backend=None,
    ) -> "PaymentsContainer":
        gateway = gateway or MercadoPagoClient(settings)
        backend = backend or BackendPaymentsClient(settings)
        reconciler = Reconciler(
            gateway,
            backend,
            membership_period_days=settings.membership_period_days,
        )
        return cls(
            settings=settings,
            gateway=gateway,
            backend=backend,
            reconciler=reconciler,
            sweeper=PendingPaymentsSweeper(backend, reconciler),
        )

    async def aclose(self) -> None:
        """Espera reconciliaciones en curso y cierra clientes HTTP."""
        if self.scheduler is not None:
            self.scheduler.shutdown(wait=False)
        await self.jobs.drain(timeout=self.settings.shutdown_drain_seconds)
        for client in (self.gateway, self.backend):
            aclose = getattr(client, "aclose", None)
            if aclose is not None:
                await aclose()


def get_payments_container(request: Request) -> PaymentsContainer:
    return request.app.state.payments


def get_reconciler(container: PaymentsContainer = Depends(get_payments_container)) -> Reconciler:
    return container.reconciler


def get_sweeper(container: PaymentsContainer = Depends(get_payments_container)) -> PendingPaymentsSweeper:
    return container.sweeper


__all__ = [
    "PaymentsContainer",
    "get_payments_container",
    "get_reconciler",
    "get_sweeper",
]

# Fin del archivo backend/app/modules/payments/dependencies.py
