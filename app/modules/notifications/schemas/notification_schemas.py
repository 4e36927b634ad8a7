# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/schemas/notification_schemas.py

Esquemas de la bandeja de notificaciones.

Autor: Atelier
Fecha: 12/08/2026
"""

from datetime import datetime
from typing import Optional

from app.modules.notifications.enums import NotificationType
from app.shared.utils.base_models import UTF8SafeModel


class NotificationRead(UTF8SafeModel):
    id: str
    type: NotificationType
    title: str
    message: str
    read: bool
    related_id: Optional[str] = None
    related_type: Optional[str] = None
    created_at: datetime


class NotificationListResponse(UTF8SafeModel):
    items: list[NotificationRead]
    unread_count: int


class MarkAllReadResponse(UTF8SafeModel):
    updated: int


__all__ = ["NotificationRead", "NotificationListResponse", "MarkAllReadResponse"]

# Fin del archivo backend/app/modules/notifications/schemas/notification_schemas.py
