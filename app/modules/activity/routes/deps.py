# -*- coding: utf-8 -*-
"""
backend/app/modules/activity/routes/deps.py

Dependencias inyectables del registro de actividad.
Tests pueden overridearlas con InMemoryActivityQueryService.

Autor: Atelier
Fecha: 12/08/2026
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.database import get_db
from app.modules.activity.services import ActivityQueryService


async def get_activity_query_service(db: AsyncSession = Depends(get_db)) -> ActivityQueryService:
    return ActivityQueryService(db)
# Fin del archivo backend/app/modules/activity/routes/deps.py
