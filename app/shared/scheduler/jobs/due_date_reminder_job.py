# -*- coding: utf-8 -*-
"""
backend/app/shared/scheduler/jobs/due_date_reminder_job.py

Job programado de recordatorios de fechas de entrega de fases.

Abre su propia sesión (session_scope) y delega en
notifications.facades.send_due_date_reminders. Los errores se registran y
no detienen el scheduler.

Autor: Atelier
Fecha: 12/08/2026
"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

JOB_ID = "due_date_reminders"


async def run_due_date_reminders(window_days: Optional[int] = None) -> Dict[str, Any]:
    """Ejecuta una pasada de recordatorios. Devuelve estadísticas o {"error": ...}."""
    from app.modules.notifications.facades import send_due_date_reminders
    from app.shared.database.database import session_scope

    try:
        async with session_scope() as db:
            return await send_due_date_reminders(db, window_days=window_days)
    except Exception as e:
        logger.error("[due_date_reminders] error: %s", str(e), exc_info=True)
        return {"error": str(e), "created": 0}


def register_due_date_reminder_job(scheduler, settings=None) -> str:
    """
    Registra el job cron en el scheduler.

    Usa DUE_DATE_REMINDER_CRON (por defecto "0 8 * * *", UTC) y
    DUE_DATE_REMINDER_WINDOW_DAYS.

    Returns:
        ID del job registrado
    """
    if settings is None:
        from app.shared.config import get_settings
        settings = get_settings()

    scheduler.add_cron_job(
        func=run_due_date_reminders,
        job_id=JOB_ID,
        cron_expression=settings.due_date_reminder_cron,
        window_days=settings.due_date_reminder_window_days,
    )
    logger.info(
        "[due_date_reminders] Job '%s' registered: cron=%s window_days=%d",
        JOB_ID,
        settings.due_date_reminder_cron,
        settings.due_date_reminder_window_days,
    )
    return JOB_ID


# Fin del archivo backend/app/shared/scheduler/jobs/due_date_reminder_job.py
