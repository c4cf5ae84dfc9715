# -*- coding: utf-8 -*-
"""
backend/tests/modules/payments/facades/checkout/test_start_checkout.py

Tests del flujo de checkout (validación + preferencia).

Autor: Personal Fit
Fecha: 2026-10-16
"""

import pytest

from app.modules.payments.errors import GatewayUnavailable
from app.modules.payments.facades.checkout import (
    CheckoutValidationError,
    start_checkout,
    validate_checkout_request,
)
from app.modules.payments.facades.checkout.start_checkout import ITEM_DESCRIPTION
from app.modules.payments.facades.checkout.validators import MISSING_FIELDS_MESSAGE
from app.modules.payments.schemas.checkout_schemas import CheckoutRequest
from app.modules.payments.schemas.gateway_schemas import PreferenceInfo
from app.modules.payments.utils.external_reference import decode_reference


def _request(**overrides) -> CheckoutRequest:
    data = {
        "productId": 123,
        "productName": "Plan mensual",
        "productPrice": 25000,
        "userEmail": "socio@personalfit.test",
        "userDni": "40123456",
    }
    data.update(overrides)
    return CheckoutRequest.model_validate(data)


class TestValidateCheckoutRequest:

    def test_valid_request(self):
        validate_checkout_request(_request())

    @pytest.mark.parametrize(
        "field", ["productId", "productName", "productPrice", "userEmail", "userDni"]
    )
    def test_missing_field(self, field):
        with pytest.raises(CheckoutValidationError) as exc_info:
            validate_checkout_request(_request(**{field: None}))
        assert str(exc_info.value) == MISSING_FIELDS_MESSAGE

    def test_missing_fields_lists_aliases(self):
        assert CheckoutRequest().missing_fields() == [
            "productId",
            "productName",
            "productPrice",
            "userEmail",
            "userDni",
        ]

    @pytest.mark.parametrize(
        "overrides",
        [
            {"userDni": "40.123.456"},
            {"userDni": "12³"},
            {"userDni": " 40123456"},
            {"productId": "plan-mensual"},
            {"productPrice": -10},
        ],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(CheckoutValidationError):
            validate_checkout_request(_request(**overrides))


@pytest.mark.anyio
class TestStartCheckout:

    async def test_creates_preference_with_reference(self, gateway, payments_settings):
        gateway.create_preference.return_value = PreferenceInfo(
            preference_id="pref-1",
            init_point="https://mp.test/init",
            sandbox_init_point="https://mp.test/sandbox",
        )

        response = await start_checkout(_request(), gateway=gateway, settings=payments_settings)

        args = gateway.create_preference.await_args.args
        items, back_urls, notification_url, reference = args
        assert items[0].id == "123"
        assert items[0].unit_price == 25000
        assert items[0].description == ITEM_DESCRIPTION
        assert back_urls.success == "https://personalfit.test/payments/result/success"
        assert notification_url == "https://personalfit.test/payments/mercadopago/webhook"
        assert gateway.create_preference.await_args.kwargs == {
            "payer_email": "socio@personalfit.test"
        }

        decoded = decode_reference(reference)
        assert decoded.subject_id == 40123456
        assert decoded.product_id == "123"
        assert response.preference_id == "pref-1"
        assert response.transaction_id == reference
        assert response.to_json_dict()["initPoint"] == "https://mp.test/init"

    async def test_invalid_request_never_calls_gateway(self, gateway, payments_settings):
        with pytest.raises(CheckoutValidationError):
            await start_checkout(
                _request(userDni="abc"), gateway=gateway, settings=payments_settings
            )
        gateway.create_preference.assert_not_awaited()

    async def test_gateway_errors_propagate(self, gateway, payments_settings):
        gateway.create_preference.side_effect = GatewayUnavailable("down")
        with pytest.raises(GatewayUnavailable):
            await start_checkout(_request(), gateway=gateway, settings=payments_settings)
