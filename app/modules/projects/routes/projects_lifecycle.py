# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/routes/projects_lifecycle.py

Rutas de ciclo de vida de Proyectos:
- Cambiar status (validado contra VALID_STATUS_TRANSITIONS)
- (Re)crear estructura de carpetas en Dropbox

Autor: Atelier
Fecha: 12/08/2026
"""
from fastapi import APIRouter, Depends, HTTPException, status

from app.modules.auth.services import get_current_user
from app.modules.projects.enums import get_allowed_transitions
from app.modules.projects.facades import InvalidStatusTransition, ProjectNotFound
from app.modules.projects.routes.deps import get_projects_command_service
from app.modules.projects.schemas import ProjectRead, ProjectStatusIn
from app.modules.projects.services import ProjectsCommandService
from app.shared.integrations.dropbox_client import DropboxConfigError, DropboxError

router = APIRouter(prefix="/projects", tags=["projects:lifecycle"])


def _uid(u):
    if isinstance(u, dict):
        return u.get("id")
    return getattr(u, "id", None)


@router.patch(
    "/{project_id}/status",
    response_model=ProjectRead,
    summary="Cambiar status del proyecto",
)
async def change_status(
    project_id: str,
    payload: ProjectStatusIn,
    user=Depends(get_current_user),
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    """Mismo status → no-op. Transición no permitida → 400 con las opciones válidas."""
    try:
        project = await svc.change_status(project_id, actor_id=_uid(user), new_status=payload.status)
    except ProjectNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Proyecto no encontrado")
    except InvalidStatusTransition as e:
        allowed = sorted(s.value for s in get_allowed_transitions(e.from_status))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": str(e), "allowed": allowed},
        )
    return ProjectRead.model_validate(project)


@router.post(
    "/{project_id}/dropbox-folder",
    response_model=ProjectRead,
    summary="Crear carpeta del proyecto en Dropbox",
)
async def create_dropbox_folder(
    project_id: str,
    user=Depends(get_current_user),
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    try:
        project = await svc.create_dropbox_folder(project_id, actor_id=_uid(user))
    except ProjectNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Proyecto no encontrado")
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DropboxConfigError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    except DropboxError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    return ProjectRead.model_validate(project)

# Fin del archivo backend/app/modules/projects/routes/projects_lifecycle.py
