# backend/tests/modules/payments/conftest.py
# -*- coding: utf-8 -*-
"""
Fixtures del módulo Payments.

- `payments_settings`: configuración explícita (sin .env).
- `gateway` / `backend`: AsyncMock de los clientes HTTP.
- `make_gateway_payment`: fábrica de GatewayPayment.
- `container` / `payments_app` / `async_client`: app completa con los
  clientes falsos inyectados, usando ASGITransport + asgi-lifespan.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from unittest.mock import AsyncMock

import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

from app.modules.payments.schemas.gateway_schemas import GatewayPayment
from app.shared.config.settings_payments import PaymentsSettings

TEST_SECRET = "testsecret"
TEST_TOKEN = "TEST-0000-token"


@pytest.fixture
def payments_settings() -> PaymentsSettings:
    return PaymentsSettings(
        _env_file=None,
        mp_access_token=TEST_TOKEN,
        webhook_secret=TEST_SECRET,
        base_url="https://personalfit.test",
        backend_base_url="http://backend.test",
        shutdown_drain_seconds=2.0,
        sweeper_enabled=False,
    )


@pytest.fixture
def make_gateway_payment():
    def _make(**overrides) -> GatewayPayment:
        data = {
            "id": 123,
            "status": "approved",
            "transaction_amount": 25000,
            "currency_id": "ARS",
            "payment_type_id": "credit_card",
            "payment_method_id": "visa",
            "external_reference": "55-123-1700000000-ab12",
        }
        data.update(overrides)
        return GatewayPayment.model_validate(data)

    return _make


@pytest.fixture
def gateway(make_gateway_payment) -> AsyncMock:
    mock = AsyncMock()
    mock.get_payment_by_id.return_value = make_gateway_payment()
    return mock


@pytest.fixture
def backend() -> AsyncMock:
    mock = AsyncMock()
    mock.post_payment.return_value = None
    mock.list_outstanding_payments.return_value = []
    return mock


@pytest.fixture
def container(payments_settings, gateway, backend):
    from app.modules.payments.dependencies import PaymentsContainer

    return PaymentsContainer.build(payments_settings, gateway=gateway, backend=backend)


@pytest.fixture
def payments_app(container):
    from app.main import create_app

    return create_app(container=container)


@pytest.fixture
async def async_client(payments_app) -> AsyncIterator[AsyncClient]:
    async with LifespanManager(payments_app):
        transport = ASGITransport(app=payments_app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client
