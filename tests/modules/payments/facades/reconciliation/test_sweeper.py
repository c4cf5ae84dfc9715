# -*- coding: utf-8 -*-
"""
backend/tests/modules/payments/facades/reconciliation/test_sweeper.py

Tests del barrido de pagos pendientes.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from app.modules.payments.errors import BackendUnavailable, GatewayUnavailable
from app.modules.payments.facades.reconciliation import (
    PendingPaymentsSweeper,
    SKIP_MISSING_CONF_NUMBER,
)
from app.modules.payments.metrics import get_sample_value
from app.modules.payments.schemas.reconciliation_schemas import ReconciliationResult
from app.modules.payments.schemas.record_schemas import OutstandingPayment

NOW = datetime(2026, 3, 1, 10, 0, 0, tzinfo=timezone.utc)


def _pending(id_, conf_number):
    return OutstandingPayment(
        id=id_,
        status="PENDING",
        method="MERCADOPAGO",
        conf_number=conf_number,
    )


@pytest.fixture
def reconciler() -> AsyncMock:
    mock = AsyncMock()
    mock.reconcile.return_value = ReconciliationResult(processed=True, payment_id="111")
    return mock


@pytest.fixture
def sweeper(backend, reconciler) -> PendingPaymentsSweeper:
    return PendingPaymentsSweeper(backend, reconciler, clock=lambda: NOW)


@pytest.mark.anyio
class TestSweep:

    async def test_empty_backlog(self, sweeper, reconciler):
        report = await sweeper.sweep()

        assert report.total == 0
        assert report.started_at == NOW
        assert report.finished_at == NOW
        reconciler.reconcile.assert_not_awaited()

    async def test_reconciles_each_pending_payment(self, sweeper, backend, reconciler):
        backend.list_outstanding_payments.return_value = [
            _pending(1, "111"),
            _pending(2, "222"),
        ]
        reconciler.reconcile.side_effect = [
            ReconciliationResult(processed=True, payment_id="111"),
            ReconciliationResult.skipped("not-approved", payment_id="222"),
        ]

        report = await sweeper.sweep()

        assert reconciler.reconcile.await_count == 2
        first_call = reconciler.reconcile.await_args_list[0]
        assert first_call.args[0].kind == "payment"
        assert first_call.args[0].resource_id == "111"
        assert first_call.kwargs == {"source": "sweep"}
        assert [item.outcome for item in report.items] == ["processed", "not-processed"]
        assert report.items[1].reason == "not-approved"
        assert report.reconciled == 1
        assert report.not_processed == 1

    async def test_items_without_conf_number_are_skipped(self, sweeper, backend, reconciler):
        backend.list_outstanding_payments.return_value = [_pending(7, None)]

        report = await sweeper.sweep()

        assert report.skipped == 1
        assert report.items[0].reason == SKIP_MISSING_CONF_NUMBER
        reconciler.reconcile.assert_not_awaited()

    async def test_one_failure_does_not_stop_the_sweep(self, sweeper, backend, reconciler):
        backend.list_outstanding_payments.return_value = [
            _pending(1, "111"),
            _pending(2, "222"),
            _pending(3, "333"),
        ]
        reconciler.reconcile.side_effect = [
            GatewayUnavailable("timeout"),
            RuntimeError("bug"),
            ReconciliationResult(processed=True, payment_id="333"),
        ]

        report = await sweeper.sweep()

        assert report.failed == 2
        assert report.reconciled == 1
        assert report.items[0].error == "timeout"
        assert "bug" in report.items[1].error

    async def test_listing_failure_aborts(self, sweeper, backend):
        backend.list_outstanding_payments.side_effect = BackendUnavailable("down")
        before = get_sample_value("payments_sweeper_runs_total", {"result": "aborted"})

        with pytest.raises(BackendUnavailable):
            await sweeper.sweep()

        assert get_sample_value("payments_sweeper_runs_total", {"result": "aborted"}) == before + 1

    async def test_report_json_includes_totals(self, sweeper, backend):
        backend.list_outstanding_payments.return_value = [_pending(1, "111"), _pending(2, None)]

        data = (await sweeper.sweep()).to_json_dict()

        assert data["total"] == 2
        assert data["reconciled"] == 1
        assert data["skipped"] == 1
        assert data["notProcessed"] == 0
        assert data["items"][0]["confNumber"] == "111"
