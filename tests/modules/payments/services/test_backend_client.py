# -*- coding: utf-8 -*-
"""
backend/tests/modules/payments/services/test_backend_client.py

Tests del cliente del backend de Personal Fit.

Autor: Personal Fit
Fecha: 2026-10-16
"""

import json
from datetime import datetime, timezone

import httpx
import pytest

from app.modules.payments.enums import MethodType, PaymentStatus
from app.modules.payments.errors import (
    BackendUnavailable,
    BackendWriteFailed,
    DuplicatePayment,
)
from app.modules.payments.schemas.record_schemas import InternalPaymentRecord
from app.modules.payments.services.backend_client import (
    LIST_PAYMENTS_PATH,
    WEBHOOK_PAYMENT_PATH,
    BackendPaymentsClient,
)


def _client(settings, handler) -> BackendPaymentsClient:
    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler),
        base_url=settings.backend_base_url,
    )
    return BackendPaymentsClient(settings, http_client=http_client)


@pytest.fixture
def record() -> InternalPaymentRecord:
    return InternalPaymentRecord(
        client_dni=55,
        amount=25000.0,
        created_at=datetime(2026, 1, 1, 12, 30, 15, 999, tzinfo=timezone.utc),
        expires_at=datetime(2026, 1, 31, 12, 30, 15, 999, tzinfo=timezone.utc),
        payment_status=PaymentStatus.PAID,
        conf_number="123",
        method_type=MethodType.CARD,
    )


@pytest.mark.anyio
class TestPostPayment:

    async def test_posts_camel_case_payload(self, payments_settings, record):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json={"id": 1})

        client = _client(payments_settings, handler)
        await client.post_payment(record)
        await client.aclose()

        assert seen["path"] == WEBHOOK_PAYMENT_PATH
        assert seen["body"] == {
            "clientDni": 55,
            "amount": 25000.0,
            "createdAt": "2026-01-01T12:30:15",
            "expiresAt": "2026-01-31T12:30:15",
            "paymentStatus": "PAID",
            "confNumber": "123",
            "methodType": "CARD",
        }

    async def test_409_raises_duplicate(self, payments_settings, record):
        client = _client(payments_settings, lambda request: httpx.Response(409, text="dup"))
        with pytest.raises(DuplicatePayment) as exc_info:
            await client.post_payment(record)
        assert exc_info.value.status_code == 409

    async def test_500_raises_write_failed(self, payments_settings, record):
        client = _client(payments_settings, lambda request: httpx.Response(500, text="error"))
        with pytest.raises(BackendWriteFailed) as exc_info:
            await client.post_payment(record)
        assert exc_info.value.status_code == 500
        assert exc_info.value.body_snippet == "error"

    async def test_network_error_raises_write_failed(self, payments_settings, record):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        client = _client(payments_settings, handler)
        with pytest.raises(BackendWriteFailed):
            await client.post_payment(record)

    async def test_backend_token_is_sent(self, payments_settings, record):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers.get("authorization")
            return httpx.Response(200)

        settings = payments_settings.model_copy(
            update={"backend_api_token": payments_settings.webhook_secret}
        )
        client = _client(settings, handler)
        await client.post_payment(record)
        assert seen["auth"] == "Bearer testsecret"


@pytest.mark.anyio
class TestListOutstandingPayments:

    async def test_filters_pending_mercadopago(self, payments_settings):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == LIST_PAYMENTS_PATH
            return httpx.Response(
                200,
                json=[
                    {"id": 1, "status": "PENDING", "method": "MERCADOPAGO", "confNumber": 111},
                    {"id": 2, "status": "PAID", "method": "MERCADOPAGO", "confNumber": "222"},
                    {"id": 3, "status": "PENDING", "method": "CASH"},
                    {"id": 4, "status": "pending", "method": "mercadopago", "confNumber": None},
                ],
            )

        client = _client(payments_settings, handler)
        pending = await client.list_outstanding_payments()

        assert [p.id for p in pending] == [1, 4]
        assert pending[0].conf_number == "111"
        assert pending[0].has_gateway_reference is True
        assert pending[1].has_gateway_reference is False

    async def test_non_2xx_raises_unavailable(self, payments_settings):
        client = _client(payments_settings, lambda request: httpx.Response(503))
        with pytest.raises(BackendUnavailable):
            await client.list_outstanding_payments()

    async def test_non_list_body_raises_unavailable(self, payments_settings):
        client = _client(payments_settings, lambda request: httpx.Response(200, json={"items": []}))
        with pytest.raises(BackendUnavailable):
            await client.list_outstanding_payments()

    async def test_network_error_raises_unavailable(self, payments_settings):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        client = _client(payments_settings, handler)
        with pytest.raises(BackendUnavailable):
            await client.list_outstanding_payments()
