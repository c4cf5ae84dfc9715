# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/json_response.py

Respuestas JSON con charset UTF-8 explícito y sobres estándar.

Los mensajes de la API están en español ("Firma inválida"); sin charset
explícito algunos proxies los muestran con mojibake.

Uso:

    app = FastAPI(default_response_class=UTF8JSONResponse)

    return success_response(message="Webhook recibido correctamente")
    return error_response("Firma inválida", status_code=401)

Autor: Personal Fit
Fecha: 2026-10-16
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """JSONResponse con Content-Type: application/json; charset=utf-8."""

    media_type = "application/json; charset=utf-8"


def utc_timestamp() -> str:
    """Timestamp ISO-8601 en UTC para los sobres de respuesta."""
    return datetime.now(timezone.utc).isoformat()


def success_response(
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
    **fields: Any,
) -> UTF8JSONResponse:
    """{"success": true, ..., "timestamp": ...}"""
    content = {"success": True, **fields, "timestamp": utc_timestamp()}
    return UTF8JSONResponse(content=content, status_code=status_code, headers=headers)


def error_response(
    error: str,
    status_code: int = 500,
    headers: Optional[Dict[str, str]] = None,
    **fields: Any,
) -> UTF8JSONResponse:
    """{"success": false, "error": ..., "timestamp": ...}"""
    content = {"success": False, "error": error, **fields, "timestamp": utc_timestamp()}
    return UTF8JSONResponse(content=content, status_code=status_code, headers=headers)


__all__ = ["UTF8JSONResponse", "utc_timestamp", "success_response", "error_response"]

# Fin del archivo backend/app/shared/utils/json_response.py
