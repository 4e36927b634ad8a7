# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/routes/rooms_routes.py

Rutas de rooms:
- POST   /projects/{project_id}/rooms
- GET    /projects/{project_id}/rooms
- GET    /rooms/{room_id}
- PATCH  /rooms/{room_id}
- DELETE /rooms/{room_id}

Autor: Atelier
Fecha: 12/08/2026
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from app.modules.auth.services import get_current_user
from app.modules.rooms.facades.errors import ProjectNotFound, RoomNotFound
from app.modules.rooms.routes.deps import get_rooms_service
from app.modules.rooms.schemas import RoomCreateIn, RoomRead, RoomUpdateIn
from app.modules.rooms.services import RoomsService

router = APIRouter(tags=["rooms"])


def _uid(u):
    if isinstance(u, dict):
        return u.get("id")
    return getattr(u, "id", None)


@router.post(
    "/projects/{project_id}/rooms",
    response_model=RoomRead,
    status_code=status.HTTP_201_CREATED,
    summary="Crear room con sus fases",
)
async def create_room(
    project_id: str,
    payload: RoomCreateIn,
    user=Depends(get_current_user),
    svc: RoomsService = Depends(get_rooms_service),
):
    try:
        return await svc.create_room(project_id, actor_id=_uid(user), **payload.model_dump())
    except ProjectNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Proyecto no encontrado")


@router.get("/projects/{project_id}/rooms", response_model=List[RoomRead], summary="Listar rooms del proyecto")
async def list_rooms(
    project_id: str,
    user=Depends(get_current_user),
    svc: RoomsService = Depends(get_rooms_service),
):
    try:
        return await svc.list_rooms(project_id)
    except ProjectNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Proyecto no encontrado")


@router.get("/rooms/{room_id}", response_model=RoomRead, summary="Obtener room con fases")
async def get_room(
    room_id: str,
    user=Depends(get_current_user),
    svc: RoomsService = Depends(get_rooms_service),
):
    try:
        return await svc.get_room(room_id)
    except RoomNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room no encontrado")


@router.patch("/rooms/{room_id}", response_model=RoomRead, summary="Actualizar room")
async def update_room(
    room_id: str,
    payload: RoomUpdateIn,
    user=Depends(get_current_user),
    svc: RoomsService = Depends(get_rooms_service),
):
    try:
        return await svc.update_room(room_id, actor_id=_uid(user), **payload.model_dump(exclude_unset=True))
    except RoomNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room no encontrado")


@router.delete("/rooms/{room_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Eliminar room")
async def delete_room(
    room_id: str,
    user=Depends(get_current_user),
    svc: RoomsService = Depends(get_rooms_service),
):
    try:
        await svc.delete_room(room_id, actor_id=_uid(user))
    except RoomNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room no encontrado")

# Fin del archivo backend/app/modules/rooms/routes/rooms_routes.py
