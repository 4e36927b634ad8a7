# -*- coding: utf-8 -*-
"""
backend/app/shared/scheduler/__init__.py

Jobs programados (APScheduler).

Autor: Atelier
Fecha: 12/08/2026
"""

from .scheduler_service import SchedulerService, get_scheduler

__all__ = [
    "SchedulerService",
    "get_scheduler",
]
