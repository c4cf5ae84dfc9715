# -*- coding: utf-8 -*-
"""
backend/app/shared/scheduler/jobs/__init__.py

Jobs programados del sistema.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from .pending_payments_job import (
    PENDING_PAYMENTS_JOB_ID,
    register_pending_payments_job,
    run_pending_payments_sweep,
)

__all__ = [
    "PENDING_PAYMENTS_JOB_ID",
    "register_pending_payments_job",
    "run_pending_payments_sweep",
]

# Fin del archivo backend/app/shared/scheduler/jobs/__init__.py
