# -*- coding: utf-8 -*-
"""
backend/app/routes/health_routes.py

Endpoint básico de health check del servicio de pagos.

No consulta MercadoPago ni el backend: informa qué está configurado y
cuántas reconciliaciones siguen en curso.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.modules.payments.dependencies import PaymentsContainer, get_payments_container

router = APIRouter()


@router.get(
    "/health",
    summary="Health check del servicio",
)
async def health_check(
    container: PaymentsContainer = Depends(get_payments_container),
) -> dict:
    settings = container.settings
    scheduler = container.scheduler
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "mercadopago": {
            "access_token_configured": settings.access_token() is not None,
            "webhook_secret_configured": settings.shared_secret() is not None,
        },
        "background_jobs": container.jobs.get_active_count(),
        "sweeper": {
            "enabled": settings.sweeper_enabled,
            "running": bool(scheduler and scheduler.is_running),
        },
        "service": {
            "name": "personalfit-payments",
            "version": "1.0.0",
        },
    }

# Fin del archivo backend/app/routes/health_routes.py
