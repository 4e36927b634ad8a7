# -*- coding: utf-8 -*-
"""
backend/app/modules/files/routes/dropbox_routes.py

Rutas de archivos en Dropbox (autenticadas):
- GET    /files/dropbox/browse?path&cursor&member_id
- GET    /files/dropbox/metadata?path
- GET    /files/dropbox/temporary-link?path
- GET    /files/dropbox/search-cad?q&max_results
- POST   /files/dropbox/upload            (multipart: project_id, path, file)
- DELETE /files/dropbox?path&project_id
- GET    /files/dropbox/team-members
- GET    /files/dropbox/test-connection   (OWNER / ADMIN)

DropboxError → 502, DropboxConfigError → 503.

Autor: Atelier
Fecha: 12/08/2026
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile, status

from app.modules.auth.enums import UserRole
from app.modules.auth.services import get_current_user, require_roles
from app.modules.files.facades import InvalidFilePath, ProjectFolderMissing, ProjectNotFound
from app.modules.files.routes.deps import get_files_service
from app.modules.files.schemas import (
    ConnectionTestResponse,
    DeleteFileResponse,
    DropboxEntryRead,
    DropboxFolderRead,
    TeamMemberRead,
    TemporaryLinkResponse,
    UploadedFileRead,
)
from app.modules.files.services import FilesService
from app.shared.integrations.dropbox_client import DropboxConfigError, DropboxError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/files/dropbox", tags=["files"])


def _uid(u):
    if isinstance(u, dict):
        return u.get("id")
    return getattr(u, "id", None)


def _provider_error(e: Exception) -> HTTPException:
    if isinstance(e, DropboxConfigError):
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=f"Dropbox no configurado: {e}")
    logger.warning("[Files] error de Dropbox: %s", e)
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))


@router.get("/browse", response_model=DropboxFolderRead, summary="Listar carpeta")
async def browse(
    path: Optional[str] = Query(default=None),
    cursor: Optional[str] = Query(default=None),
    member_id: Optional[str] = Query(default=None),
    user=Depends(get_current_user),
    svc: FilesService = Depends(get_files_service),
):
    try:
        return await svc.browse(path, cursor=cursor, member_id=member_id)
    except (DropboxError, DropboxConfigError) as e:
        raise _provider_error(e)


@router.get("/metadata", response_model=DropboxEntryRead, summary="Metadatos de archivo")
async def metadata(
    path: str = Query(...),
    user=Depends(get_current_user),
    svc: FilesService = Depends(get_files_service),
):
    try:
        entry = await svc.metadata(path)
    except (DropboxError, DropboxConfigError) as e:
        raise _provider_error(e)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Archivo no encontrado")
    return entry


@router.get("/temporary-link", response_model=TemporaryLinkResponse, summary="Link temporal de descarga")
async def temporary_link(
    path: str = Query(...),
    user=Depends(get_current_user),
    svc: FilesService = Depends(get_files_service),
):
    try:
        link = await svc.temporary_link(path)
    except (DropboxError, DropboxConfigError) as e:
        raise _provider_error(e)
    if not link:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Archivo no encontrado")
    return TemporaryLinkResponse(path=path, link=link)


@router.get("/search-cad", response_model=list[DropboxEntryRead], summary="Buscar archivos CAD")
async def search_cad(
    q: str = Query(..., min_length=1),
    max_results: int = Query(default=50, ge=1, le=1000),
    user=Depends(get_current_user),
    svc: FilesService = Depends(get_files_service),
):
    try:
        return await svc.search_cad(q, max_results=max_results)
    except DropboxConfigError as e:
        raise _provider_error(e)


@router.post(
    "/upload",
    response_model=UploadedFileRead,
    status_code=status.HTTP_201_CREATED,
    summary="Subir archivo a la carpeta del proyecto",
)
async def upload(
    project_id: str = Form(...),
    path: Optional[str] = Form(default=None),
    file: UploadFile = File(...),
    user=Depends(get_current_user),
    svc: FilesService = Depends(get_files_service),
):
    content = await file.read()
    try:
        return await svc.upload(
            project_id,
            actor_id=_uid(user),
            filename=file.filename,
            content=content,
            path=path,
        )
    except ProjectNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Proyecto no encontrado")
    except ProjectFolderMissing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="El proyecto no tiene carpeta de Dropbox",
        )
    except InvalidFilePath as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except (DropboxError, DropboxConfigError) as e:
        raise _provider_error(e)


@router.delete("", response_model=DeleteFileResponse, summary="Borrar archivo o carpeta")
async def delete_path(
    path: str = Query(...),
    project_id: Optional[str] = Query(default=None),
    user=Depends(get_current_user),
    svc: FilesService = Depends(get_files_service),
):
    try:
        return await svc.delete(path, actor_id=_uid(user), project_id=project_id)
    except InvalidFilePath as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except (DropboxError, DropboxConfigError) as e:
        raise _provider_error(e)


@router.get("/team-members", response_model=list[TeamMemberRead], summary="Miembros del equipo Dropbox")
async def team_members(
    user=Depends(get_current_user),
    svc: FilesService = Depends(get_files_service),
):
    return [m.to_dict() for m in svc.team_members()]


@router.get(
    "/test-connection",
    response_model=ConnectionTestResponse,
    summary="Probar conexión con Dropbox",
    dependencies=[Depends(require_roles(UserRole.OWNER, UserRole.ADMIN))],
)
async def test_connection(
    member_id: Optional[str] = Query(default=None),
    svc: FilesService = Depends(get_files_service),
):
    return await svc.test_connection(member_id)

# Fin del archivo backend/app/modules/files/routes/dropbox_routes.py
