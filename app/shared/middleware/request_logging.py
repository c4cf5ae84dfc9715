# -*- coding: utf-8 -*-
"""
backend/app/shared/middleware/request_logging.py

Middleware de logging de requests del servicio de pagos.

- Una línea por request: request_id, método, path, status y duración.
- Propaga X-Request-ID en la respuesta para correlacionar con los logs
  de la reconciliación en segundo plano.
- Requests lentas (checkout/verify llaman a MercadoPago en línea) se
  registran en WARNING.
- /metrics y /health no se loguean (scraping y probes).

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

import logging
import re
import time
from typing import Callable, Optional, Pattern, Sequence

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .exception_handler import get_request_id

logger = logging.getLogger(__name__)

REQUEST_ID_RESPONSE_HEADER = "X-Request-ID"
DEFAULT_SLOW_REQUEST_MS = 3000.0

DEFAULT_EXCLUDE: Sequence[Pattern] = (
    re.compile(r"^/metrics"),
    re.compile(r"^/health"),
)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Args:
        app: ASGI app
        exclude_patterns: regex de paths a ignorar
        slow_request_ms: umbral a partir del cual se loguea en WARNING
    """

    def __init__(
        self,
        app,
        exclude_patterns: Optional[Sequence[Pattern]] = None,
        slow_request_ms: float = DEFAULT_SLOW_REQUEST_MS,
    ):
        super().__init__(app)
        self.exclude_patterns = tuple(exclude_patterns or DEFAULT_EXCLUDE)
        self.slow_request_ms = slow_request_ms

    def _is_excluded(self, path: str) -> bool:
        return any(pattern.match(path) for pattern in self.exclude_patterns)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        if self._is_excluded(path):
            return await call_next(request)

        request_id = getattr(request.state, "request_id", None) or get_request_id(request)
        request.state.request_id = request_id

        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        response.headers.setdefault(REQUEST_ID_RESPONSE_HEADER, request_id)
        level = logging.WARNING if elapsed_ms >= self.slow_request_ms else logging.INFO
        logger.log(
            level,
            "request_completed request_id=%s method=%s path=%s status=%d duration_ms=%.2f",
            request_id,
            request.method,
            path,
            response.status_code,
            elapsed_ms,
        )
        return response


__all__ = ["RequestLoggingMiddleware", "REQUEST_ID_RESPONSE_HEADER"]

# Fin del archivo backend/app/shared/middleware/request_logging.py
