# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/schemas/room_schemas.py

Esquemas de rooms, fases, acciones por fase y actualización masiva.

Autor: Atelier
Fecha: 12/08/2026
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.modules.rooms.enums import RoomStatus, RoomType, StageStatus, StageType
from app.shared.utils.base_models import UTF8SafeModel


# ===== ROOMS =====

class RoomCreateIn(UTF8SafeModel):
    type: RoomType
    name: Optional[str] = Field(default=None, max_length=255)
    order: Optional[int] = Field(default=None, ge=0)
    due_date: Optional[datetime] = None


class RoomUpdateIn(UTF8SafeModel):
    name: Optional[str] = Field(default=None, max_length=255)
    type: Optional[RoomType] = None
    order: Optional[int] = Field(default=None, ge=0)
    status: Optional[RoomStatus] = None
    due_date: Optional[datetime] = None


class StageRead(UTF8SafeModel):
    id: str
    room_id: str
    type: StageType
    status: StageStatus
    assigned_to: Optional[str] = None
    due_date: Optional[datetime] = None
    start_date: Optional[datetime] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    completed_by_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RoomRead(UTF8SafeModel):
    id: str
    project_id: str
    type: RoomType
    name: Optional[str] = None
    display_name: str
    order: int = 0
    status: RoomStatus
    current_stage: Optional[StageType] = None
    start_date: Optional[datetime] = None
    due_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    progress: int = 0
    stages: List[StageRead] = Field(default_factory=list)


# ===== STAGES =====

class StageActionIn(UTF8SafeModel):
    # Acción desconocida → 400 (InvalidStageAction), no 422
    action: str = Field(..., min_length=1)
    assigned_to: Optional[str] = None


class StageStatusUpdate(UTF8SafeModel):
    stage_type: StageType
    status: StageStatus


class BulkStageUpdateIn(UTF8SafeModel):
    updates: List[StageStatusUpdate] = Field(..., min_length=1)


class BulkStageUpdateResponse(UTF8SafeModel):
    room_id: str
    updated: List[StageRead]
    progress: int


__all__ = [
    "RoomCreateIn",
    "RoomUpdateIn",
    "RoomRead",
    "StageRead",
    "StageActionIn",
    "StageStatusUpdate",
    "BulkStageUpdateIn",
    "BulkStageUpdateResponse",
]

# Fin del archivo backend/app/modules/rooms/schemas/room_schemas.py
