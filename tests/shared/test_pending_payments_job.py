# -*- coding: utf-8 -*-
"""
backend/tests/shared/test_pending_payments_job.py

Tests del job programado de barrido de pendientes.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from app.modules.payments.errors import BackendUnavailable
from app.modules.payments.schemas.reconciliation_schemas import SweepReport
from app.shared.scheduler import SchedulerService
from app.shared.scheduler.jobs import (
    PENDING_PAYMENTS_JOB_ID,
    register_pending_payments_job,
    run_pending_payments_sweep,
)


@pytest.mark.anyio
async def test_run_returns_report_summary():
    sweeper = AsyncMock()
    sweeper.sweep.return_value = SweepReport(started_at=datetime(2026, 1, 1, tzinfo=timezone.utc))

    summary = await run_pending_payments_sweep(sweeper)

    assert summary["total"] == 0
    sweeper.sweep.assert_awaited_once()


@pytest.mark.anyio
async def test_run_contains_backend_errors():
    sweeper = AsyncMock()
    sweeper.sweep.side_effect = BackendUnavailable("caído")

    summary = await run_pending_payments_sweep(sweeper)

    assert summary == {"error": "caído"}


def test_register_job():
    scheduler = SchedulerService()
    sweeper = AsyncMock()

    job_id = register_pending_payments_job(scheduler, sweeper, interval_minutes=15)

    assert job_id == PENDING_PAYMENTS_JOB_ID
    status = scheduler.get_job_status(PENDING_PAYMENTS_JOB_ID)
    assert status is not None
    assert "0:15:00" in status["trigger"]
    assert scheduler.remove_job(PENDING_PAYMENTS_JOB_ID) is True
    assert scheduler.remove_job(PENDING_PAYMENTS_JOB_ID) is False
