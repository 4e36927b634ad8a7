# -*- coding: utf-8 -*-
"""
backend/app/modules/activity/services/queries.py

Capa de aplicación (consultas) del registro de actividad.
Orquesta ActivityQueryFacade y NO reimplementa reglas de dominio.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.activity.enums import ActivityCategory
from app.modules.activity.facades import ActivityQueryFacade, list_activity_types


class ActivityQueryService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.facade = ActivityQueryFacade(db)

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
        return await self.facade.list_activities(
            project_id=project_id,
            entity=entity,
            action=action,
            actor_id=actor_id,
            category=category,
            since=since,
            limit=limit,
            offset=offset,
        )

    def list_types(self) -> list[dict[str, Any]]:
        return list_activity_types()
