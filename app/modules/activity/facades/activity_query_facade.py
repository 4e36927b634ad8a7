# -*- coding: utf-8 -*-
"""
backend/app/modules/activity/facades/activity_query_facade.py

Consultas del feed de actividad con filtros y decoración para UI
(descripción legible, etiqueta, icono, color y categoría).

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.activity.enums import ActivityCategory, EntityType
from app.modules.activity.facades.formatting import (
    format_description,
    get_activities_by_category,
    get_type_meta,
)
from app.modules.activity.models import ActivityLog
from app.modules.auth.models import User


def decorate_activity(entry: ActivityLog, actor: Optional[User]) -> dict[str, Any]:
    """Convierte un ActivityLog (+ actor) al dict que consumen las rutas."""
    meta = get_type_meta(entry.action)
    actor_name = actor.name if actor else None
    actor_email = actor.email if actor else None
    return {
        "id": entry.id,
        "action": entry.action,
        "entity": entry.entity,
        "entity_id": entry.entity_id,
        "project_id": entry.project_id,
        "details": entry.details or {},
        "created_at": entry.created_at,
        "actor": (
            {"id": actor.id, "name": actor.name, "email": actor.email, "role": actor.role}
            if actor
            else None
        ),
        "description": format_description(entry.action, entry.details, actor_name, actor_email),
        "label": meta.label,
        "icon": meta.icon,
        "color": meta.color,
        "category": str(meta.category),
    }


class ActivityQueryFacade:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_activities(
        self,
        *,
        project_id: Optional[str] = None,
        entity: Optional[str] = None,
        action: Optional[str] = None,
        actor_id: Optional[str] = None,
        category: Optional[ActivityCategory] = None,
        since: Optional[datetime] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[dict[str, Any]], int]:
        filters = []
        if project_id:
            filters.append(
                or_(
                    ActivityLog.project_id == project_id,
                    (ActivityLog.entity == EntityType.PROJECT.value) & (ActivityLog.entity_id == project_id),
                )
            )
        if entity:
            filters.append(ActivityLog.entity == str(entity))
        if action:
            filters.append(ActivityLog.action == str(action))
        if actor_id:
            filters.append(ActivityLog.actor_id == actor_id)
        if category:
            types = [t.value for t in get_activities_by_category()[ActivityCategory(category)]]
            filters.append(ActivityLog.action.in_(types))
        if since:
            filters.append(ActivityLog.created_at >= since)

        total = await self.db.scalar(select(func.count()).select_from(ActivityLog).where(*filters)) or 0

        stmt = (
            select(ActivityLog, User)
            .outerjoin(User, User.id == ActivityLog.actor_id)
            .where(*filters)
            .order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())
            .limit(limit)
            .offset(offset)
        )
        rows = (await self.db.execute(stmt)).all()
        return [decorate_activity(entry, actor) for entry, actor in rows], int(total)


def list_activity_types() -> list[dict[str, Any]]:
    """Categorías con sus tipos (para filtros en UI)."""
    out = []
    for category, types in get_activities_by_category().items():
        out.append({
            "category": str(category),
            "types": [
                {"type": t.value, **get_type_meta(t)._asdict()} for t in types
            ],
        })
    return out


__all__ = ["ActivityQueryFacade", "decorate_activity", "list_activity_types"]

# Fin del archivo backend/app/modules/activity/facades/activity_query_facade.py
