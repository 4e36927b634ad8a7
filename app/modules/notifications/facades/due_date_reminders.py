# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/facades/due_date_reminders.py

Recordatorios de fechas de entrega de fases.

Busca fases asignadas, no completadas ni NOT_APPLICABLE, cuya due_date cae
en [now, now + window_days] y crea una notificación DUE_DATE_REMINDER para
el responsable. Como máximo un recordatorio por fase y día UTC.

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.models import User
from app.modules.notifications.enums import NotificationType, RelatedType
from app.modules.notifications.facades.notification_facade import create_notification
from app.modules.notifications.models import Notification
from app.modules.projects.models import Project
from app.modules.rooms.enums import StageStatus
from app.modules.rooms.facades.phase_utils import format_room_display_name, get_phase_display_name
from app.modules.rooms.models import Room, Stage
from app.shared.database.transactions import commit_or_raise, now_utc

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_DAYS = 2

_SKIPPED_STATUSES = [StageStatus.COMPLETED, StageStatus.NOT_APPLICABLE]


def build_reminder_texts(stage_type: str, room_name: str, project_name: str, due_date: dt.datetime) -> tuple[str, str]:
    display = get_phase_display_name(stage_type)
    title = f"{display} due soon"
    message = f"{display} for {room_name} in {project_name} is due on {due_date.strftime('%Y-%m-%d')}."
    return title, message


async def _already_reminded_today(db: AsyncSession, stage_id: str, day_start: dt.datetime) -> bool:
    existing = await db.scalar(
        select(Notification.id)
        .where(
            Notification.type == NotificationType.DUE_DATE_REMINDER,
            Notification.related_id == stage_id,
            Notification.created_at >= day_start,
        )
        .limit(1)
    )
    return existing is not None


async def send_due_date_reminders(
    db: AsyncSession,
    *,
    now: Optional[dt.datetime] = None,
    window_days: Optional[int] = None,
) -> dict[str, int]:
    """
    Crea los recordatorios pendientes y hace commit.

    Returns:
        {"checked": fases evaluadas, "created": avisos nuevos, "skipped": ya avisadas hoy}
    """
    now = (now or now_utc()).astimezone(dt.timezone.utc)
    window = DEFAULT_WINDOW_DAYS if window_days is None else window_days
    horizon = now + dt.timedelta(days=window)
    day_start = now.replace(hour=0, minute=0, second=0, microsecond=0)

    rows = (
        await db.execute(
            select(Stage, Room, Project)
            .join(Room, Room.id == Stage.room_id)
            .join(Project, Project.id == Room.project_id)
            .join(User, User.id == Stage.assigned_to)
            .where(
                Stage.due_date.is_not(None),
                Stage.due_date >= now,
                Stage.due_date <= horizon,
                Stage.status.not_in(_SKIPPED_STATUSES),
                User.is_active.is_(True),
            )
            .order_by(Stage.due_date.asc())
        )
    ).all()

    stats = {"checked": len(rows), "created": 0, "skipped": 0}

    async def work() -> None:
        for stage, room, project in rows:
            if await _already_reminded_today(db, stage.id, day_start):
                stats["skipped"] += 1
                continue
            title, message = build_reminder_texts(
                str(stage.type),
                format_room_display_name(room.name, room.type),
                project.name,
                stage.due_date,
            )
            await create_notification(
                db,
                user_id=stage.assigned_to,
                type=NotificationType.DUE_DATE_REMINDER,
                title=title,
                message=message,
                related_id=stage.id,
                related_type=RelatedType.STAGE,
            )
            stats["created"] += 1

    await commit_or_raise(db, work)
    logger.info(
        "[DueDateReminders] checked=%d created=%d skipped=%d window_days=%d",
        stats["checked"],
        stats["created"],
        stats["skipped"],
        window,
    )
    return stats


__all__ = ["DEFAULT_WINDOW_DAYS", "build_reminder_texts", "send_due_date_reminders"]

# Fin del archivo backend/app/modules/notifications/facades/due_date_reminders.py
