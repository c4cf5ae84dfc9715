# backend/tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests del servicio de pagos.

- Backend de anyio fijo en asyncio.
- Variables de entorno de MercadoPago/backend vaciadas para que ningún
  test dependa del .env local.
"""

import pytest

_ENV_VARS = (
    "MP_ACCESS_TOKEN",
    "MERCADOPAGO_ACCESS_TOKEN",
    "WEBHOOK_SECRET",
    "MP_WEBHOOK_SECRET",
    "BACKEND_URL",
    "BACKEND_BASE_URL",
    "BACKEND_API_TOKEN",
    "SWEEPER_ENABLED",
    "NEXT_PUBLIC_BASE_URL",
    "BASE_URL",
)


@pytest.fixture(scope="session")
def anyio_backend():
    """Permite a pytest-anyio usar asyncio en el scope de sesión."""
    return "asyncio"


@pytest.fixture(autouse=True)
def _clean_payments_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
