# -*- coding: utf-8 -*-
"""
backend/tests/modules/payments/facades/webhooks/test_webhook_handler.py

Tests de normalización y procesamiento en segundo plano del webhook.

Autor: Personal Fit
Fecha: 2026-10-16
"""

import json
from unittest.mock import AsyncMock

import pytest

from app.modules.payments.errors import (
    AuthenticationError,
    BackendWriteFailed,
    ConfigurationError,
)
from app.modules.payments.facades.webhooks import (
    authenticate_webhook,
    parse_notification,
    process_webhook_body,
    schedule_webhook_reconciliation,
)
from app.modules.payments.schemas.reconciliation_schemas import ReconciliationResult
from app.shared.utils.async_job_registry import AsyncJobRegistry


def _body(payload) -> bytes:
    return json.dumps(payload).encode("utf-8")


class TestParseNotification:

    def test_payment_notification(self):
        envelope = parse_notification(
            _body({"action": "payment.created", "type": "payment", "data": {"id": 123}})
        )
        assert envelope.kind == "payment"
        assert envelope.resource_id == "123"

    def test_legacy_topic(self):
        envelope = parse_notification(_body({"topic": "payment", "data": {"id": "9"}}))
        assert envelope.kind == "payment"

    @pytest.mark.parametrize(
        "raw",
        [
            b"",
            b"not json",
            b"[1, 2]",
            _body({"type": "payment"}),
            _body({"data": {"id": "1"}}),
            _body({"type": "payment", "data": "oops"}),
        ],
    )
    def test_invalid_bodies_raise_value_error(self, raw):
        with pytest.raises(ValueError):
            parse_notification(raw)


class TestAuthenticateWebhook:

    def test_valid_signature(self, payments_settings):
        authenticate_webhook({"x-signature": "testsecret"}, payments_settings)

    @pytest.mark.parametrize("headers", [{"x-signature": "nope"}, {}])
    def test_invalid_or_missing_signature_raises(self, payments_settings, headers):
        with pytest.raises(AuthenticationError):
            authenticate_webhook(headers, payments_settings)

    def test_missing_secret(self, payments_settings):
        settings = payments_settings.model_copy(update={"webhook_secret": None})
        with pytest.raises(ConfigurationError):
            authenticate_webhook({"x-signature": "testsecret"}, settings)


@pytest.mark.anyio
class TestProcessWebhookBody:

    async def test_reconciles_payment(self):
        reconciler = AsyncMock()
        reconciler.reconcile.return_value = ReconciliationResult(processed=True, payment_id="1")

        result = await process_webhook_body(
            reconciler, _body({"type": "payment", "data": {"id": "1"}})
        )

        assert result.processed is True
        envelope = reconciler.reconcile.await_args.args[0]
        assert envelope.resource_id == "1"
        assert reconciler.reconcile.await_args.kwargs == {"source": "webhook"}

    async def test_invalid_body_is_dropped(self):
        reconciler = AsyncMock()
        assert await process_webhook_body(reconciler, b"{") is None
        reconciler.reconcile.assert_not_awaited()

    @pytest.mark.parametrize("error", [BackendWriteFailed("boom"), RuntimeError("bug")])
    async def test_failures_are_contained(self, error):
        reconciler = AsyncMock()
        reconciler.reconcile.side_effect = error

        result = await process_webhook_body(
            reconciler, _body({"type": "payment", "data": {"id": "1"}})
        )

        assert result is None

    async def test_schedule_runs_in_registry(self):
        jobs = AsyncJobRegistry("test-webhooks")
        reconciler = AsyncMock()
        reconciler.reconcile.return_value = ReconciliationResult(processed=True)

        task = schedule_webhook_reconciliation(
            jobs, reconciler, _body({"type": "payment", "data": {"id": "5"}})
        )
        pending = await jobs.drain(timeout=1.0)

        assert pending == 0
        assert task.done()
        reconciler.reconcile.assert_awaited_once()
