# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/routes/projects_crud.py

Rutas CRUD de Proyectos:
- Crear (con carpeta de Dropbox opcional)
- Listar con filtros (status, client_id, q) y paginación
- Obtener detalle con rooms y progreso
- Actualizar (lista blanca)
- Eliminar (hard delete en cascada)

Autor: Atelier
Fecha: 12/08/2026
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.modules.auth.services import get_current_user
from app.modules.clients.facades.errors import ClientNotFound
from app.modules.clients.schemas import ClientRead
from app.modules.projects.enums import ProjectStatus
from app.modules.projects.facades import ProjectNotFound
from app.modules.projects.routes.deps import (
    get_projects_command_service,
    get_projects_query_service,
)
from app.modules.projects.schemas import (
    ProjectCreateIn,
    ProjectDetailRead,
    ProjectListResponse,
    ProjectRead,
    ProjectUpdateIn,
)
from app.modules.projects.services import ProjectsCommandService, ProjectsQueryService

router = APIRouter(prefix="/projects", tags=["projects:crud"])


def _uid(u):
    """Extrae el id del usuario autenticado (objeto o dict)."""
    if isinstance(u, dict):
        return u.get("id")
    return getattr(u, "id", None)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Proyecto no encontrado")


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Crear proyecto",
)
async def create_project(
    payload: ProjectCreateIn,
    user=Depends(get_current_user),
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    """
    Crea un proyecto en DRAFT. Si corresponde, crea su estructura de
    carpetas en Dropbox (un fallo de Dropbox no impide el alta).
    """
    data = payload.model_dump()
    try:
        project = await svc.create_project(actor_id=_uid(user), **data)
    except ClientNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cliente no encontrado")
    return ProjectRead.model_validate(project)


@router.get(
    "",
    response_model=ProjectListResponse,
    summary="Listar proyectos",
)
async def list_projects(
    status_filter: Optional[ProjectStatus] = Query(default=None, alias="status"),
    client_id: Optional[str] = Query(default=None),
    q: Optional[str] = Query(default=None, max_length=255),
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    user=Depends(get_current_user),
    qs: ProjectsQueryService = Depends(get_projects_query_service),
):
    items, total = await qs.list_projects(
        status=status_filter, client_id=client_id, q=q, limit=limit, offset=offset
    )
    return ProjectListResponse(items=[ProjectRead.model_validate(p) for p in items], total=total)


@router.get(
    "/{project_id}",
    response_model=ProjectDetailRead,
    summary="Obtener proyecto con rooms",
)
async def get_project(
    project_id: str,
    user=Depends(get_current_user),
    qs: ProjectsQueryService = Depends(get_projects_query_service),
):
    try:
        detail = await qs.get_project_detail(project_id)
    except ProjectNotFound:
        raise _not_found()
    base = ProjectRead.model_validate(detail["project"]).model_dump()
    client = detail.get("client")
    return ProjectDetailRead.model_validate(
        {
            **base,
            "client": ClientRead.model_validate(client) if client is not None else None,
            "rooms": detail.get("rooms", []),
            "progress": detail.get("progress", 0),
        }
    )


@router.patch(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Actualizar proyecto",
)
async def update_project(
    project_id: str,
    payload: ProjectUpdateIn,
    user=Depends(get_current_user),
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    try:
        project = await svc.update_project(
            project_id, actor_id=_uid(user), **payload.model_dump(exclude_unset=True)
        )
    except ProjectNotFound:
        raise _not_found()
    return ProjectRead.model_validate(project)


@router.delete(
    "/{project_id}",
    response_model=dict,
    summary="Eliminar proyecto (hard delete con rooms y fases)",
)
async def delete_project(
    project_id: str,
    user=Depends(get_current_user),
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    try:
        await svc.delete(project_id, actor_id=_uid(user))
    except ProjectNotFound:
        raise _not_found()
    return {"success": True, "message": "Proyecto eliminado"}

# Fin del archivo backend/app/modules/projects/routes/projects_crud.py
