# -*- coding: utf-8 -*-
"""
backend/app/shared/config/logging_config.py

Configuración centralizada de logging del servicio de pagos.

- plain/pretty: una línea legible por registro (desarrollo).
- json: python-json-logger, con `service` fijo para filtrar en el
  agregador de logs (producción).

Los loggers de httpx y uvicorn.access se silencian a WARNING:
RequestLoggingMiddleware ya registra cada request, y httpx incluiría
URLs con IDs de pago en cada llamada a la pasarela.

Autor: Personal Fit
Fecha: 2026-10-16
"""

import logging.config
from typing import Literal

JSON_FORMATTER_PATH = "pythonjsonlogger.json.JsonFormatter"
SERVICE_NAME = "personalfit-payments"

QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access", "apscheduler")


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    fmt: Literal["plain", "pretty", "json"] = "plain",
) -> None:
    """
    Configura el logging de la aplicación (idempotente).

    Ejemplos:
        >>> setup_logging("INFO", "plain")
        >>> setup_logging("WARNING", "json")
    """
    use_json = fmt == "json"

    formatters = {
        "default": {
            "format": "%(asctime)s - %(levelname)s [%(name)s]: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "json": {
            "()": JSON_FORMATTER_PATH,
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            "rename_fields": {"levelname": "level", "name": "logger"},
            "static_fields": {"service": SERVICE_NAME},
        },
    }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": formatters,
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json" if use_json else "default",
                    "stream": "ext://sys.stdout",
                }
            },
            "root": {
                "handlers": ["console"],
                "level": level.upper(),
            },
            "loggers": {name: {"level": "WARNING"} for name in QUIET_LOGGERS},
        }
    )


__all__ = ["setup_logging", "SERVICE_NAME"]

# Fin del archivo backend/app/shared/config/logging_config.py
