# -*- coding: utf-8 -*-
"""
backend/app/modules/activity/schemas/activity_schemas.py

Esquemas de lectura del feed de actividad.

Autor: Atelier
Fecha: 12/08/2026
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from app.shared.utils.base_models import UTF8SafeModel
from app.modules.auth.schemas import UserSummary


class ActivityRead(UTF8SafeModel):
    id: str
    action: str
    entity: str
    entity_id: str
    project_id: Optional[str] = None
    details: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    actor: Optional[UserSummary] = None
    description: str
    label: str
    icon: str
    color: str
    category: str


class ActivityListResponse(UTF8SafeModel):
    items: list[ActivityRead]
    total: int


class ActivityTypeRead(UTF8SafeModel):
    type: str
    label: str
    icon: str
    color: str
    category: str


class ActivityCategoryRead(UTF8SafeModel):
    category: str
    types: list[ActivityTypeRead]


__all__ = ["ActivityRead", "ActivityListResponse", "ActivityTypeRead", "ActivityCategoryRead"]

# Fin del archivo backend/app/modules/activity/schemas/activity_schemas.py
