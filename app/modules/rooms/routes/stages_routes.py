# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/routes/stages_routes.py

Rutas de fases:
- PATCH /stages/{stage_id}          acción (start, complete, reopen, mark_*, assign)
- PUT   /rooms/{room_id}/stages     actualización masiva de estados

Autor: Atelier
Fecha: 12/08/2026
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.modules.auth.services import get_current_user
from app.modules.rooms.facades.errors import (
    AssigneeNotFound,
    DuplicateStageType,
    InvalidStageAction,
    RoomNotFound,
    StageNotFound,
)
from app.modules.rooms.routes.deps import get_rooms_service
from app.modules.rooms.schemas import BulkStageUpdateIn, BulkStageUpdateResponse, StageActionIn, StageRead
from app.modules.rooms.services import RoomsService

router = APIRouter(tags=["stages"])


def _uid(u):
    if isinstance(u, dict):
        return u.get("id")
    return getattr(u, "id", None)


@router.patch("/stages/{stage_id}", response_model=StageRead, summary="Aplicar acción sobre una fase")
async def apply_stage_action(
    stage_id: str,
    payload: StageActionIn,
    user=Depends(get_current_user),
    svc: RoomsService = Depends(get_rooms_service),
):
    try:
        return await svc.apply_stage_action(
            stage_id,
            actor_id=_uid(user),
            action=payload.action,
            assigned_to=payload.assigned_to,
        )
    except StageNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Fase no encontrada")
    except AssigneeNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Usuario no encontrado o inactivo")
    except InvalidStageAction as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/rooms/{room_id}/stages", response_model=BulkStageUpdateResponse, summary="Actualizar fases en bloque")
async def bulk_update_stages(
    room_id: str,
    payload: BulkStageUpdateIn,
    user=Depends(get_current_user),
    svc: RoomsService = Depends(get_rooms_service),
):
    updates = [u.model_dump() for u in payload.updates]
    try:
        return await svc.bulk_update_stages(room_id, updates, actor_id=_uid(user))
    except RoomNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room no encontrado")
    except DuplicateStageType as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

# Fin del archivo backend/app/modules/rooms/routes/stages_routes.py
