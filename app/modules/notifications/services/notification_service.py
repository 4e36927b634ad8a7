# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/services/notification_service.py

Capa de aplicación de la bandeja de notificaciones del usuario actual.
Delegación directa a NotificationFacade.
"""
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.notifications.facades import NotificationFacade


class NotificationService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.facade = NotificationFacade(db)

    async def list_for_user(self, user_id: str, *, unread_only: bool = False, limit: int = 50, offset: int = 0):
        return await self.facade.list_for_user(user_id, unread_only=unread_only, limit=limit, offset=offset)

    async def mark_read(self, user_id: str, notification_id: str):
        return await self.facade.mark_read(user_id, notification_id)

    async def mark_all_read(self, user_id: str) -> int:
        return await self.facade.mark_all_read(user_id)

    async def delete(self, user_id: str, notification_id: str) -> None:
        await self.facade.delete(user_id, notification_id)
