# -*- coding: utf-8 -*-
"""
backend/tests/modules/payments/routes/test_pending_routes.py

Tests de /payments/mercadopago/pending.

Autor: Personal Fit
Fecha: 2026-10-16
"""

import pytest

from app.modules.payments.errors import BackendUnavailable
from app.modules.payments.schemas.record_schemas import OutstandingPayment

PENDING_URL = "/payments/mercadopago/pending"


def _pending(id_, conf_number):
    return OutstandingPayment(id=id_, status="PENDING", method="MERCADOPAGO", conf_number=conf_number)


@pytest.mark.anyio
class TestPendingRoutes:

    async def test_post_runs_sweep(self, async_client, backend):
        backend.list_outstanding_payments.return_value = [_pending(1, "123"), _pending(2, None)]

        response = await async_client.post(PENDING_URL)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Pagos pendientes procesados"
        assert body["result"]["total"] == 2
        assert body["result"]["reconciled"] == 1
        assert body["result"]["skipped"] == 1
        backend.post_payment.assert_awaited_once()

    async def test_get_returns_summary(self, async_client, backend, gateway):
        backend.list_outstanding_payments.return_value = [_pending(1, "123"), _pending(2, None)]

        response = await async_client.get(PENDING_URL)

        assert response.status_code == 200
        info = response.json()["info"]
        assert info["total"] == 2
        assert info["withConfNumber"] == 1
        assert info["withoutConfNumber"] == 1
        assert info["payments"][0]["confNumber"] == "123"
        gateway.get_payment_by_id.assert_not_awaited()

    async def test_backend_unavailable_returns_500(self, async_client, backend):
        backend.list_outstanding_payments.side_effect = BackendUnavailable("caído")

        response = await async_client.post(PENDING_URL)

        assert response.status_code == 500
        assert response.json()["success"] is False
        assert response.json()["code"] == "backend_unavailable"

    async def test_get_backend_unavailable_returns_500(self, async_client, backend):
        backend.list_outstanding_payments.side_effect = BackendUnavailable("caído")

        response = await async_client.get(PENDING_URL)

        assert response.status_code == 500
        assert response.json()["error"] == "caído"
        assert response.json()["code"] == "backend_unavailable"
