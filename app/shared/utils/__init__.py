# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/__init__.py

Utilidades comunes: respuestas JSON y tasks en segundo plano.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from .async_job_registry import AsyncJobRegistry
from .json_response import UTF8JSONResponse, error_response, success_response, utc_timestamp

__all__ = [
    "AsyncJobRegistry",
    "UTF8JSONResponse",
    "error_response",
    "success_response",
    "utc_timestamp",
]

# Fin del archivo backend/app/shared/utils/__init__.py
