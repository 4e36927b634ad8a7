# -*- coding: utf-8 -*-
"""
Servicio in-memory para pruebas de rutas del módulo Notifications.
Autor: Atelier
Fecha: 12/08/2026
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from typing import List, Optional

from app.modules.notifications.facades import NotificationNotFound


def make_notification(**overrides) -> SimpleNamespace:
    data = dict(
        id="n1",
        user_id="u1",
        type="STAGE_ASSIGNED",
        title="Drawings Phase Ready",
        message="Client approval for Kitchen in Villa has been completed.",
        read=False,
        related_id="s1",
        related_type="STAGE",
        created_at=datetime.now(timezone.utc),
    )
    data.update(overrides)
    return SimpleNamespace(**data)


class InMemoryNotificationService:
    def __init__(self, notifications: Optional[List[SimpleNamespace]] = None):
        self.notifications = list(notifications or [])

    def _own(self, user_id: str, notification_id: str) -> SimpleNamespace:
        for n in self.notifications:
            if n.id == notification_id and n.user_id == user_id:
                return n
        raise NotificationNotFound(notification_id)

    async def list_for_user(self, user_id: str, *, unread_only: bool = False, limit: int = 50, offset: int = 0):
        mine = [n for n in self.notifications if n.user_id == user_id]
        unread = sum(1 for n in mine if not n.read)
        if unread_only:
            mine = [n for n in mine if not n.read]
        mine.sort(key=lambda n: n.created_at, reverse=True)
        return mine[offset:offset + limit], unread

    async def mark_read(self, user_id: str, notification_id: str):
        n = self._own(user_id, notification_id)
        n.read = True
        return n

    async def mark_all_read(self, user_id: str) -> int:
        updated = 0
        for n in self.notifications:
            if n.user_id == user_id and not n.read:
                n.read = True
                updated += 1
        return updated

    async def delete(self, user_id: str, notification_id: str) -> None:
        self.notifications.remove(self._own(user_id, notification_id))
