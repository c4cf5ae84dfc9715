# -*- coding: utf-8 -*-
"""
backend/tests/modules/payments/routes/test_checkout_routes.py

Tests de POST /payments/mercadopago/checkout.

Autor: Personal Fit
Fecha: 2026-10-16
"""

import pytest

from app.modules.payments.errors import (
    ConfigurationError,
    GatewayRejected,
    GatewayUnavailable,
)
from app.modules.payments.schemas.gateway_schemas import PreferenceInfo

CHECKOUT_URL = "/payments/mercadopago/checkout"

CHECKOUT_BODY = {
    "productId": "123",
    "productName": "Plan mensual",
    "productPrice": 25000,
    "userEmail": "socio@personalfit.test",
    "userDni": 40123456,
}


@pytest.mark.anyio
class TestCheckout:

    async def test_creates_preference(self, async_client, gateway):
        gateway.create_preference.return_value = PreferenceInfo(
            preference_id="pref-1",
            init_point="https://mp.test/init",
        )

        response = await async_client.post(CHECKOUT_URL, json=CHECKOUT_BODY)

        assert response.status_code == 200
        body = response.json()
        assert body["preferenceId"] == "pref-1"
        assert body["initPoint"] == "https://mp.test/init"
        assert body["transactionId"].startswith("40123456-123-")

    async def test_missing_fields_returns_400(self, async_client, gateway):
        response = await async_client.post(CHECKOUT_URL, json={"productId": "123"})

        assert response.status_code == 400
        assert response.json()["error"] == (
            "Faltan datos requeridos: productId, productName, productPrice, userEmail y userDni"
        )
        gateway.create_preference.assert_not_awaited()

    @pytest.mark.parametrize("user_dni", ["12³", "٤٥٦", "40.123.456"])
    async def test_non_ascii_digit_dni_returns_400(self, async_client, gateway, user_dni):
        response = await async_client.post(
            CHECKOUT_URL, json={**CHECKOUT_BODY, "userDni": user_dni}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "userDni debe ser numérico"
        gateway.create_preference.assert_not_awaited()

    @pytest.mark.parametrize(
        "error, status_code, message",
        [
            (ConfigurationError("sin token"), 500, "Configuración de MercadoPago incompleta"),
            (GatewayRejected("401", status_code=401), 401, "Token de MercadoPago inválido"),
            (GatewayRejected("400", status_code=400), 400, "Datos de pago inválidos"),
            (GatewayUnavailable("timeout"), 503, "Error de conexión con MercadoPago"),
        ],
    )
    async def test_gateway_errors(self, async_client, gateway, error, status_code, message):
        gateway.create_preference.side_effect = error

        response = await async_client.post(CHECKOUT_URL, json=CHECKOUT_BODY)

        assert response.status_code == status_code
        assert response.json()["error"] == message
