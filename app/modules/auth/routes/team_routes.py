# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/routes/team_routes.py

Rutas de gestión del equipo:
- GET    /team               (cualquier miembro; filtro opcional por rol)
- POST   /team               (OWNER/ADMIN)
- GET    /team/{user_id}     (OWNER/ADMIN)
- PATCH  /team/{user_id}     (OWNER/ADMIN)
- DELETE /team/{user_id}     (solo OWNER; baja lógica)

Autor: Atelier
Fecha: 12/08/2026
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.modules.auth.enums import UserRole
from app.modules.auth.facades import (
    CannotDeleteSelf,
    EmailAlreadyExists,
    PermissionDenied,
    UserNotFound,
)
from app.modules.auth.routes.deps import get_team_service
from app.modules.auth.schemas import MessageResponse, TeamMemberCreate, TeamMemberUpdate, UserRead
from app.modules.auth.services import TeamService, get_current_user, require_roles

router = APIRouter(prefix="/team", tags=["team"])

_managers = require_roles(UserRole.OWNER, UserRole.ADMIN)
_owner = require_roles(UserRole.OWNER)


@router.get("", response_model=List[UserRead], summary="Listar miembros activos")
async def list_team(
    role: Optional[UserRole] = Query(default=None),
    user=Depends(get_current_user),
    svc: TeamService = Depends(get_team_service),
):
    members = await svc.list_members(role)
    return [UserRead.model_validate(m) for m in members]


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Crear miembro",
)
async def create_member(
    payload: TeamMemberCreate,
    actor=Depends(_managers),
    svc: TeamService = Depends(get_team_service),
):
    try:
        user = await svc.create_member(actor, **payload.model_dump())
    except PermissionDenied as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except EmailAlreadyExists:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="El email ya está registrado")
    return UserRead.model_validate(user)


@router.get("/{user_id}", response_model=UserRead, summary="Obtener miembro")
async def get_member(
    user_id: str,
    actor=Depends(_managers),
    svc: TeamService = Depends(get_team_service),
):
    try:
        return UserRead.model_validate(await svc.get_member(user_id))
    except UserNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Usuario no encontrado")


@router.patch("/{user_id}", response_model=UserRead, summary="Actualizar miembro")
async def update_member(
    user_id: str,
    payload: TeamMemberUpdate,
    actor=Depends(_managers),
    svc: TeamService = Depends(get_team_service),
):
    """
    Actualiza nombre, email, rol y preferencia de emails.
    Un cambio de rol reasigna las fases pendientes del rol nuevo.
    """
    try:
        user = await svc.update_member(actor, user_id, payload.model_dump(exclude_unset=True))
    except UserNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Usuario no encontrado")
    except PermissionDenied as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except EmailAlreadyExists:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="El email ya está en uso")
    return UserRead.model_validate(user)


@router.delete("/{user_id}", response_model=MessageResponse, summary="Desactivar miembro")
async def delete_member(
    user_id: str,
    actor=Depends(_owner),
    svc: TeamService = Depends(get_team_service),
):
    try:
        await svc.deactivate_member(actor, user_id)
    except UserNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Usuario no encontrado")
    except CannotDeleteSelf as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PermissionDenied as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    return MessageResponse(message="Miembro desactivado")

# Fin del archivo backend/app/modules/auth/routes/team_routes.py
