# -*- coding: utf-8 -*-
"""
backend/app/shared/scheduler/scheduler_service.py

Servicio de programación de tareas periódicas usando APScheduler.

Se instancia una vez por app (lifespan) y se detiene en el shutdown.
Los jobs corren en el mismo event loop que FastAPI (AsyncIOExecutor).

Autor: Personal Fit
Fecha: 2026-10-16
"""

import logging
from typing import Callable, Optional

from apscheduler.executors.asyncio import AsyncIOExecutor
from apscheduler.jobstores.base import JobLookupError
from apscheduler.jobstores.memory import MemoryJobStore
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

logger = logging.getLogger(__name__)


class SchedulerService:
    """
    Servicio de programación de tareas periódicas.

    - Jobs por intervalo, con alta/baja dinámica
    - Una instancia por job (un barrido no se solapa con el siguiente)
    """

    def __init__(self):
        job_defaults = {
            'coalesce': True,  # Combinar ejecuciones perdidas
            'max_instances': 1,
            'misfire_grace_time': 30,
        }
        self._scheduler = AsyncIOScheduler(
            jobstores={'default': MemoryJobStore()},
            executors={'default': AsyncIOExecutor()},
            job_defaults=job_defaults,
            timezone='UTC',
        )
        self._started = False

    def start(self):
        """Inicia el scheduler (requiere un event loop en ejecución)."""
        if not self._started:
            self._scheduler.start()
            self._started = True
            logger.info("SchedulerService iniciado")

    def shutdown(self, wait: bool = False):
        """Detiene el scheduler."""
        if self._started:
            self._scheduler.shutdown(wait=wait)
            self._started = False
            logger.info("SchedulerService detenido")

    def add_interval_job(
        self,
        func: Callable,
        job_id: str,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        **kwargs
    ) -> str:
        """
        Agrega (o reemplaza) un job que se ejecuta a intervalos regulares.

        Args:
            func: Función o corutina a ejecutar
            job_id: ID único del job
            **kwargs: Argumentos para func

        Returns:
            ID del job agregado
        """
        trigger = IntervalTrigger(hours=hours, minutes=minutes, seconds=seconds)
        self._scheduler.add_job(
            func=func,
            trigger=trigger,
            id=job_id,
            name=job_id,
            replace_existing=True,
            kwargs=kwargs,
        )
        logger.info("Job '%s' agregado: cada %sh %sm %ss", job_id, hours, minutes, seconds)
        return job_id

    def remove_job(self, job_id: str) -> bool:
        """Elimina un job programado. False si no existía."""
        try:
            self._scheduler.remove_job(job_id)
        except JobLookupError:
            return False
        logger.info("Job '%s' eliminado", job_id)
        return True

    def get_job_status(self, job_id: str) -> Optional[dict]:
        job = self._scheduler.get_job(job_id)
        if job is None:
            return None
        return {
            'id': job.id,
            'name': job.name,
            'next_run': getattr(job, 'next_run_time', None),
            'trigger': str(job.trigger),
        }

    @property
    def is_running(self) -> bool:
        """Retorna True si el scheduler está activo."""
        return self._started and self._scheduler.running


# Fin del archivo backend/app/shared/scheduler/scheduler_service.py
