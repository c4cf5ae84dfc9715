# -*- coding: utf-8 -*-
"""
backend/app/main.py

Punto de entrada principal del servicio de pagos de Personal Fit.

Ajustes clave:
- create_app(settings=..., container=...) para inyectar configuración y
  colaboradores explícitos (tests, scripts).
- Lifespan: construye clientes HTTP, programa el barrido de pendientes
  (si está habilitado) y, en el shutdown, espera las reconciliaciones
  en curso antes de cerrar los clientes.
- JSONExceptionMiddleware: cualquier error no manejado → 500 JSON.
- Prometheus en /metrics, health en /health.

Autor: Personal Fit
Fecha: 2026-10-16
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

# ---------------------------------------------------------------------------
# Cargar .env ANTES de construir la configuración
# Las variables del entorno (Railway, Docker) tienen prioridad sobre .env
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
load_dotenv(dotenv_path=_ENV_PATH, override=False)

import anyio
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.modules.payments.dependencies import PaymentsContainer
from app.shared.config import PaymentsSettings, get_payments_settings, setup_logging
from app.shared.middleware import JSONExceptionMiddleware, RequestLoggingMiddleware
from app.shared.scheduler import SchedulerService
from app.shared.scheduler.jobs import register_pending_payments_job
from app.shared.utils.json_response import UTF8JSONResponse

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "payments:webhooks", "description": "Notificaciones de MercadoPago"},
    {"name": "payments:verify", "description": "Verificación manual de pagos"},
    {"name": "payments:checkout", "description": "Creación de preferencias de pago"},
    {"name": "payments:pending", "description": "Barrido de pagos pendientes"},
]


def _start_sweeper(payments: PaymentsContainer) -> None:
    settings = payments.settings
    scheduler = SchedulerService()
    register_pending_payments_job(
        scheduler,
        payments.sweeper,
        settings.sweeper_interval_minutes,
    )
    scheduler.start()
    payments.scheduler = scheduler
    logger.info("⏰ Barrido de pendientes cada %d minutos", settings.sweeper_interval_minutes)


def create_app(
    settings: Optional[PaymentsSettings] = None,
    *,
    container: Optional[PaymentsContainer] = None,
) -> FastAPI:
    """
    Construye la app FastAPI.

    Args:
        settings: configuración explícita; por defecto get_payments_settings().
        container: colaboradores ya construidos (tests); por defecto se
            construyen en el lifespan a partir de `settings`.
    """
    if settings is None:
        settings = container.settings if container is not None else get_payments_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # ────────── STARTUP ──────────
        payments = container or PaymentsContainer.build(settings)
        app.state.payments = payments

        if settings.access_token() is None:
            logger.warning("⚠️ MP_ACCESS_TOKEN no configurado: checkout y reconciliación fallarán")
        if settings.shared_secret() is None:
            logger.warning("⚠️ WEBHOOK_SECRET no configurado: el webhook responderá 500")

        if settings.sweeper_enabled:
            _start_sweeper(payments)

        logger.info("🟢 Servicio de pagos Personal Fit iniciado.")
        try:
            yield
        finally:
            # ────────── SHUTDOWN ──────────
            logger.info("🔴 Iniciando shutdown ordenado...")
            with anyio.CancelScope(shield=True):
                await payments.aclose()
            logger.info("🔴 Servicio de pagos apagado.")

    app = FastAPI(
        title="Personal Fit Payments API",
        description="Checkout, webhook y reconciliación de pagos MercadoPago",
        version="1.0.0",
        lifespan=lifespan,
        openapi_tags=openapi_tags,
        default_response_class=UTF8JSONResponse,
    )

    # El orden de ejecución de middlewares es inverso al registro:
    # CORS (outermost) → JSONException → RequestLogging → rutas
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(JSONExceptionMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.base_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    from app.routes import router as main_router

    app.include_router(main_router)
    return app


_settings = get_payments_settings()
setup_logging(_settings.log_level, _settings.log_format)

app = create_app(_settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000)

# Fin del archivo backend/app/main.py
