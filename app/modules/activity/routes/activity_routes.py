# -*- coding: utf-8 -*-
"""
backend/app/modules/activity/routes/activity_routes.py

Feed de actividad:
- GET /activity        (filtros por proyecto, entidad, acción, actor, categoría y fecha)
- GET /activity/types  (categorías y tipos para filtros de UI)

Autor: Atelier
Fecha: 12/08/2026
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.modules.activity.enums import ActivityCategory
from app.modules.activity.routes.deps import get_activity_query_service
from app.modules.activity.schemas import ActivityCategoryRead, ActivityListResponse
from app.modules.activity.services import ActivityQueryService
from app.modules.auth.services import get_current_user

router = APIRouter(prefix="/activity", tags=["activity"])


@router.get("", response_model=ActivityListResponse, summary="Listar actividad")
async def list_activity(
    project_id: Optional[str] = Query(default=None),
    entity: Optional[str] = Query(default=None),
    action: Optional[str] = Query(default=None),
    actor_id: Optional[str] = Query(default=None),
    category: Optional[ActivityCategory] = Query(default=None),
    since: Optional[datetime] = Query(default=None),
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    user=Depends(get_current_user),
    q: ActivityQueryService = Depends(get_activity_query_service),
):
    """Más recientes primero; cada registro trae descripción legible y metadatos de UI."""
    items, total = await q.list_activities(
        project_id=project_id,
        entity=entity,
        action=action,
        actor_id=actor_id,
        category=category,
        since=since,
        limit=limit,
        offset=offset,
    )
    return ActivityListResponse(items=items, total=total)


@router.get("/types", response_model=List[ActivityCategoryRead], summary="Tipos de actividad por categoría")
async def list_activity_types(
    user=Depends(get_current_user),
    q: ActivityQueryService = Depends(get_activity_query_service),
):
    return q.list_types()

# Fin del archivo backend/app/modules/activity/routes/activity_routes.py
