# -*- coding: utf-8 -*-
"""
backend/app/shared/scheduler/scheduler_service.py

Servicio de tareas periódicas sobre APScheduler (AsyncIOScheduler, UTC).

Autor: Atelier
Fecha: 12/08/2026
"""

import logging
from typing import Any, Callable, Optional

from apscheduler.executors.asyncio import AsyncIOExecutor
from apscheduler.jobstores.base import JobLookupError
from apscheduler.jobstores.memory import MemoryJobStore
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger
from apscheduler.triggers.interval import IntervalTrigger

logger = logging.getLogger(__name__)


class SchedulerService:
    """
    Envoltorio del AsyncIOScheduler con una API mínima:
    jobs por intervalo o cron, baja de jobs e inspección.

    Los jobs se ejecutan con coalesce y una sola instancia simultánea.
    """

    def __init__(self, timezone: str = "UTC"):
        self._scheduler = AsyncIOScheduler(
            jobstores={"default": MemoryJobStore()},
            executors={"default": AsyncIOExecutor()},
            job_defaults={
                "coalesce": True,
                "max_instances": 1,
                "misfire_grace_time": 60,
            },
            timezone=timezone,
        )
        self._started = False
        logger.debug("[Scheduler] inicializado (tz=%s)", timezone)

    def start(self) -> None:
        if not self._started:
            self._scheduler.start()
            self._started = True
            logger.info("[Scheduler] ▶️ iniciado con %d job(s)", len(self._scheduler.get_jobs()))

    def shutdown(self, wait: bool = False) -> None:
        if self._started:
            self._scheduler.shutdown(wait=wait)
            self._started = False
            logger.info("[Scheduler] ⏹️ detenido")

    def _schedule(self, func: Callable[..., Any], job_id: str, trigger: Any, kwargs: dict) -> None:
        # replace_existing no aplica a jobs pendientes (antes de start())
        if self._scheduler.get_job(job_id) is not None:
            self._scheduler.remove_job(job_id)
        self._scheduler.add_job(
            func=func,
            trigger=trigger,
            id=job_id,
            name=job_id,
            replace_existing=True,
            kwargs=kwargs,
        )

    def add_interval_job(
        self,
        func: Callable[..., Any],
        job_id: str,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        **kwargs: Any,
    ) -> str:
        """Registra (o reemplaza) un job que corre cada hours/minutes/seconds."""
        if not (hours or minutes or seconds):
            raise ValueError("El intervalo debe ser mayor que cero")

        self._schedule(func, job_id, IntervalTrigger(hours=hours, minutes=minutes, seconds=seconds), kwargs)
        logger.info("[Scheduler] job '%s' cada %dh %dm %ds", job_id, hours, minutes, seconds)
        return job_id

    def add_cron_job(
        self,
        func: Callable[..., Any],
        job_id: str,
        cron_expression: Optional[str] = None,
        hour: Optional[str] = None,
        minute: Optional[str] = None,
        **kwargs: Any,
    ) -> str:
        """
        Registra (o reemplaza) un job cron.

        Args:
            cron_expression: expresión de 5 campos ("0 8 * * *"). Tiene prioridad.
            hour / minute: alternativa simple cuando no se pasa expresión.

        Raises:
            ValueError: si la expresión no tiene 5 campos.
        """
        if cron_expression:
            if len(cron_expression.split()) != 5:
                raise ValueError("Expresión cron inválida (requiere 5 campos)")
            trigger = CronTrigger.from_crontab(cron_expression, timezone=self._scheduler.timezone)
        else:
            trigger = CronTrigger(hour=hour, minute=minute, timezone=self._scheduler.timezone)

        self._schedule(func, job_id, trigger, kwargs)
        logger.info("[Scheduler] job '%s' cron=%s", job_id, cron_expression or f"{minute} {hour} * * *")
        return job_id

    def remove_job(self, job_id: str) -> bool:
        try:
            self._scheduler.remove_job(job_id)
        except JobLookupError:
            logger.warning("[Scheduler] job '%s' no existe", job_id)
            return False
        logger.info("[Scheduler] job '%s' eliminado", job_id)
        return True

    def get_jobs(self) -> list[dict]:
        return [
            {
                "id": job.id,
                "name": job.name,
                "next_run": getattr(job, "next_run_time", None),
                "trigger": str(job.trigger),
            }
            for job in self._scheduler.get_jobs()
        ]

    def get_job_status(self, job_id: str) -> Optional[dict]:
        job = self._scheduler.get_job(job_id)
        if job is None:
            return None
        return {
            "id": job.id,
            "name": job.name,
            "next_run": getattr(job, "next_run_time", None),
            "trigger": str(job.trigger),
            "pending": job.pending,
        }

    @property
    def is_running(self) -> bool:
        return self._started and self._scheduler.running


# Singleton global del scheduler
_scheduler_instance: Optional[SchedulerService] = None


def get_scheduler() -> SchedulerService:
    """Instancia global (lazy) del scheduler."""
    global _scheduler_instance
    if _scheduler_instance is None:
        _scheduler_instance = SchedulerService()
    return _scheduler_instance


__all__ = ["SchedulerService", "get_scheduler"]

# Fin del archivo backend/app/shared/scheduler/scheduler_service.py
