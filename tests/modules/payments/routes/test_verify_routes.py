# -*- coding: utf-8 -*-
"""
backend/tests/modules/payments/routes/test_verify_routes.py

Tests de POST /payments/mercadopago/verify.

Autor: Personal Fit
Fecha: 2026-10-16
"""

import pytest

from app.modules.payments.errors import GatewayUnavailable

VERIFY_URL = "/payments/mercadopago/verify"


@pytest.mark.anyio
class TestVerifyPayment:

    async def test_missing_ids_returns_400(self, async_client, gateway):
        response = await async_client.post(VERIFY_URL, json={})

        assert response.status_code == 400
        assert response.json()["error"] == "Faltan parámetros: paymentId o externalReference"
        gateway.get_payment_by_id.assert_not_awaited()

    async def test_empty_body_returns_400(self, async_client):
        response = await async_client.post(VERIFY_URL)
        assert response.status_code == 400

    async def test_approved_payment_is_reconciled(self, async_client, gateway, backend):
        response = await async_client.post(VERIFY_URL, json={"paymentId": 123})

        assert response.status_code == 200
        body = response.json()
        assert body["processed"] is True
        assert body["paymentId"] == "123"
        assert body["record"]["confNumber"] == "123"
        assert body["record"]["paymentStatus"] == "PAID"
        gateway.get_payment_by_id.assert_awaited_once_with("123")
        backend.post_payment.assert_awaited_once()

    async def test_external_reference_used_as_fallback(self, async_client, gateway):
        response = await async_client.post(VERIFY_URL, json={"externalReference": "456"})

        assert response.status_code == 200
        gateway.get_payment_by_id.assert_awaited_once_with("456")

    async def test_pending_payment_is_not_processed(
        self, async_client, gateway, backend, make_gateway_payment
    ):
        gateway.get_payment_by_id.return_value = make_gateway_payment(status="pending")

        response = await async_client.post(VERIFY_URL, json={"paymentId": "123"})

        assert response.status_code == 200
        assert response.json()["processed"] is False
        assert response.json()["reason"] == "not-approved"
        backend.post_payment.assert_not_awaited()

    async def test_gateway_failure_returns_500(self, async_client, gateway):
        gateway.get_payment_by_id.side_effect = GatewayUnavailable("MercadoPago caído")

        response = await async_client.post(VERIFY_URL, json={"paymentId": "123"})

        assert response.status_code == 500
        assert response.json()["error"] == "MercadoPago caído"
        assert response.json()["code"] == "gateway_unavailable"
