# -*- coding: utf-8 -*-
"""
backend/app/shared/scheduler/jobs/__init__.py

Jobs programados del sistema.

Autor: Atelier
Fecha: 12/08/2026
"""

from .due_date_reminder_job import JOB_ID, register_due_date_reminder_job, run_due_date_reminders

__all__ = [
    "JOB_ID",
    "register_due_date_reminder_job",
    "run_due_date_reminders",
]
