# -*- coding: utf-8 -*-
"""
backend/app/shared/scheduler/__init__.py

Sistema de jobs programados usando APScheduler.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from .scheduler_service import SchedulerService

__all__ = [
    "SchedulerService",
]

# Fin del archivo backend/app/shared/scheduler/__init__.py
