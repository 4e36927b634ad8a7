# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/facades/notification_facade.py

Alta y bandeja de notificaciones in-app.

- create_notification NO hace commit: se usa dentro de transacciones de
  otros módulos (stages, chat) y el llamador persiste todo junto.
- Las operaciones de bandeja solo tocan notificaciones del propio usuario.

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.notifications.enums import NotificationType
from app.modules.notifications.facades.errors import NotificationNotFound
from app.modules.notifications.models import Notification
from app.observability.prom import NOTIFICATIONS_CREATED
from app.shared.database.transactions import commit_or_raise

logger = logging.getLogger(__name__)


async def create_notification(
    db: AsyncSession,
    *,
    user_id: str,
    type: NotificationType,
    title: str,
    message: str,
    related_id: Optional[str] = None,
    related_type: Optional[str] = None,
) -> Notification:
    """Agrega una notificación a la sesión (sin commit) e incrementa la métrica."""
    notification = Notification(
        user_id=user_id,
        type=type,
        title=title,
        message=message,
        read=False,
        related_id=related_id,
        related_type=str(related_type) if related_type is not None else None,
    )
    db.add(notification)
    NOTIFICATIONS_CREATED.labels(type=str(type)).inc()
    logger.debug("[Notifications] %s → user=%s related=%s", type, user_id, related_id)
    return notification


class NotificationFacade:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_for_user(
        self,
        user_id: str,
        *,
        unread_only: bool = False,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[Notification], int]:
        """Notificaciones del usuario (más recientes primero) y conteo de no leídas."""
        stmt = select(Notification).where(Notification.user_id == user_id)
        if unread_only:
            stmt = stmt.where(Notification.read.is_(False))
        stmt = stmt.order_by(Notification.created_at.desc(), Notification.id.desc()).limit(limit).offset(offset)
        items = list((await self.db.execute(stmt)).scalars().all())

        unread = await self.db.scalar(
            select(func.count())
            .select_from(Notification)
            .where(Notification.user_id == user_id, Notification.read.is_(False))
        )
        return items, int(unread or 0)

    async def _get_own(self, user_id: str, notification_id: str) -> Notification:
        notification = await self.db.get(Notification, notification_id)
        if notification is None or notification.user_id != user_id:
            raise NotificationNotFound(notification_id)
        return notification

    async def mark_read(self, user_id: str, notification_id: str) -> Notification:
        notification = await self._get_own(user_id, notification_id)

        async def work() -> Notification:
            notification.read = True
            return notification

        return await commit_or_raise(self.db, work)

    async def mark_all_read(self, user_id: str) -> int:
        async def work() -> int:
            result = await self.db.execute(
                update(Notification)
                .where(Notification.user_id == user_id, Notification.read.is_(False))
                .values(read=True)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount or 0

        updated = await commit_or_raise(self.db, work)
        logger.info("[Notifications] read-all user=%s updated=%d", user_id, updated)
        return updated

    async def delete(self, user_id: str, notification_id: str) -> None:
        await self._get_own(user_id, notification_id)

        async def work() -> None:
            await self.db.execute(delete(Notification).where(Notification.id == notification_id))

        await commit_or_raise(self.db, work)


__all__ = ["create_notification", "NotificationFacade"]

# Fin del archivo backend/app/modules/notifications/facades/notification_facade.py
