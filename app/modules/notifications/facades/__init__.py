# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/facades/__init__.py

Facades del módulo de notificaciones.

Autor: Atelier
Fecha: 12/08/2026
"""

from .errors import NotificationNotFound
from .notification_facade import NotificationFacade, create_notification
from .phase_notifications import PhaseNotificationResult, build_phase_ready_texts, handle_phase_completion
from .due_date_reminders import DEFAULT_WINDOW_DAYS, build_reminder_texts, send_due_date_reminders

__all__ = [
    "NotificationNotFound",
    "NotificationFacade",
    "create_notification",
    "PhaseNotificationResult",
    "build_phase_ready_texts",
    "handle_phase_completion",
    "DEFAULT_WINDOW_DAYS",
    "build_reminder_texts",
    "send_due_date_reminders",
]
