# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/async_job_registry.py

Registry de asyncio.Task en segundo plano (fire-and-forget).

- spawn(): crea la task, guarda una referencia fuerte (para que el GC no
  la recolecte a mitad de camino) y la desregistra al terminar.
- Las excepciones de la task se registran en el log en el borde de la
  task; nunca llegan al request que la originó.
- drain(): en el shutdown espera (sin cancelar) a las tasks en curso
  hasta un timeout. Las que no terminen se reportan y se abandonan.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from typing import Awaitable, Dict, Optional

logger = logging.getLogger(__name__)


class AsyncJobRegistry:
    """Mantiene referencias de asyncio.Task activos por job_id."""

    def __init__(self, name: str = "jobs"):
        self.name = name
        self._active_tasks: Dict[str, asyncio.Task] = {}
        self._counter = itertools.count(1)
        self._accepting = True

    def spawn(self, coro: Awaitable, *, job_id: Optional[str] = None) -> asyncio.Task:
        """
        Lanza `coro` como task independiente del request actual.

        Debe llamarse desde un event loop en ejecución.
        """
        if not self._accepting:
            logger.warning("Registry %s cerrado: se lanza job %s igualmente", self.name, job_id)

        job_id = job_id or f"{self.name}-{next(self._counter)}"
        # Dos notificaciones del mismo recurso pueden coincidir en el tiempo
        if job_id in self._active_tasks:
            job_id = f"{job_id}#{next(self._counter)}"

        task = asyncio.create_task(coro, name=job_id)
        self._active_tasks[job_id] = task
        task.add_done_callback(lambda t, key=job_id: self._on_done(key, t))
        logger.debug("📝 Task registrada: job_id=%s", job_id)
        return task

    def _on_done(self, job_id: str, task: asyncio.Task) -> None:
        self._active_tasks.pop(job_id, None)
        if task.cancelled():
            logger.warning("Task cancelada: job_id=%s", job_id)
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                "❌ Task falló: job_id=%s error=%s",
                job_id,
                exc,
                exc_info=(type(exc), exc, exc.__traceback__),
            )

    def get_task(self, job_id: str) -> Optional[asyncio.Task]:
        return self._active_tasks.get(job_id)

    def get_active_count(self) -> int:
        """Retorna el número de tasks activas."""
        return len([t for t in self._active_tasks.values() if not t.done()])

    async def drain(self, timeout: float = 10.0) -> int:
        """
        Espera a que terminen las tasks activas, sin cancelarlas.

        Returns:
            Número de tasks que seguían corriendo al vencer el timeout.
        """
        self._accepting = False
        pending = [t for t in self._active_tasks.values() if not t.done()]
        if not pending:
            logger.info("🟢 No hay tasks activas en %s", self.name)
            return 0

        logger.info("🔄 Esperando %d tasks activas en %s...", len(pending), self.name)
        _, still_running = await asyncio.wait(pending, timeout=timeout)
        if still_running:
            logger.warning(
                "⚠️ Timeout (%ss) esperando tasks: %d siguen en curso",
                timeout,
                len(still_running),
            )
        else:
            logger.info("✅ Todas las tasks de %s terminaron", self.name)
        return len(still_running)


__all__ = ["AsyncJobRegistry"]

# Fin del archivo backend/app/shared/utils/async_job_registry.py
