# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/routes/deps.py

Dependencias inyectables de la bandeja de notificaciones.

Autor: Atelier
Fecha: 12/08/2026
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.database import get_db
from app.modules.notifications.services import NotificationService


async def get_notification_service(db: AsyncSession = Depends(get_db)) -> NotificationService:
    return NotificationService(db)
# Fin del archivo backend/app/modules/notifications/routes/deps.py
