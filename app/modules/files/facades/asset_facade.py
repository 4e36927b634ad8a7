# -*- coding: utf-8 -*-
"""
backend/app/modules/files/facades/asset_facade.py

Operaciones de escritura sobre archivos del proyecto en Dropbox.

- upload: <project.dropbox_folder>/<path>/<filename>; registra ASSET_UPLOADED
- delete: borra en Dropbox; registra ASSET_DELETED si se indica proyecto

La subida/borrado en Dropbox es la operación principal. El registro de
actividad se confirma después y un fallo ahí solo se loguea.

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import logging
import posixpath
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.activity.enums import ActivityType
from app.modules.activity.facades import log_asset_activity
from app.modules.files.facades.errors import InvalidFilePath, ProjectFolderMissing, ProjectNotFound
from app.modules.projects.models import Project
from app.shared.integrations.dropbox_client import DropboxClient
from app.shared.integrations.dropbox_paths import join_path

logger = logging.getLogger(__name__)


def clean_filename(filename: Optional[str]) -> str:
    """Nombre base del archivo subido (sin directorios del cliente)."""
    name = posixpath.basename((filename or "").replace("\\", "/")).strip()
    if not name or name in {".", ".."}:
        raise InvalidFilePath("Nombre de archivo vacío")
    return name


def upload_target(folder: str, path: Optional[str], filename: str) -> str:
    parts = [p for p in (path or "").replace("\\", "/").split("/") if p]
    if any(p == ".." for p in parts):
        raise InvalidFilePath("La ruta no puede contener '..'")
    return join_path(folder, *parts, filename)


class AssetFacade:
    def __init__(self, db: AsyncSession, dropbox: DropboxClient):
        self.db = db
        self.dropbox = dropbox

    async def upload(
        self,
        project_id: str,
        *,
        actor_id: Optional[str],
        filename: Optional[str],
        content: bytes,
        path: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Sube un archivo dentro de la carpeta Dropbox del proyecto.

        Raises:
            ProjectNotFound: el proyecto no existe
            ProjectFolderMissing: el proyecto no tiene dropbox_folder
            InvalidFilePath: nombre o ruta inválidos
            DropboxError / DropboxConfigError: fallo del proveedor
        """
        project = await self.db.get(Project, project_id)
        if project is None:
            raise ProjectNotFound(project_id)
        if not project.dropbox_folder:
            raise ProjectFolderMissing(project_id)
        project_name = project.name

        name = clean_filename(filename)
        target = upload_target(project.dropbox_folder, path, name)
        result = await self.dropbox.upload_file(target, content)

        uploaded = {
            "id": result.get("id") or target,
            "name": result.get("name") or name,
            "path": result.get("path_display") or result.get("path_lower") or target,
            "size": result.get("size", len(content)),
            "revision": result.get("rev", ""),
        }
        await self._record(
            actor_id=actor_id,
            action=ActivityType.ASSET_UPLOADED,
            asset_id=uploaded["path"],
            projectId=project_id,
            projectName=project_name,
            fileName=uploaded["name"],
            filePath=uploaded["path"],
            fileSize=uploaded["size"],
        )
        return uploaded

    async def delete(
        self,
        path: str,
        *,
        actor_id: Optional[str],
        project_id: Optional[str] = None,
    ) -> dict[str, Any]:
        if not path or not path.strip("/"):
            raise InvalidFilePath("No se puede borrar la raíz")
        result = await self.dropbox.delete_path(path)
        not_found = bool(result.get("not_found"))

        if project_id:
            await self._record(
                actor_id=actor_id,
                action=ActivityType.ASSET_DELETED,
                asset_id=path,
                projectId=project_id,
                fileName=posixpath.basename(path.rstrip("/")),
                filePath=path,
            )
        return {"path": path, "deleted": True, "not_found": not_found}

    async def _record(self, *, actor_id: Optional[str], action: str, asset_id: str, **context: Any) -> None:
        try:
            await log_asset_activity(self.db, actor_id=actor_id, action=action, asset_id=asset_id, **context)
            await self.db.commit()
        except Exception:
            logger.exception("[Files] no se pudo registrar %s para %s", action, asset_id)
            await self.db.rollback()


__all__ = ["AssetFacade", "clean_filename", "upload_target"]

# Fin del archivo backend/app/modules/files/facades/asset_facade.py
