# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/services/commands.py

Capa de aplicación (comandos/mutaciones) del módulo Projects.
Orquesta ProjectFacade y NO reimplementa reglas de dominio.
"""
from __future__ import annotations

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.projects.enums import ProjectStatus
from app.modules.projects.facades import ProjectFacade
from app.shared.integrations.dropbox_client import DropboxClient


class ProjectsCommandService:
    """Comandos: crear, actualizar, cambiar status, eliminar, carpeta Dropbox."""

    def __init__(self, db: AsyncSession, dropbox: Optional[DropboxClient] = None):
        self.db = db
        self.facade = ProjectFacade(db, dropbox=dropbox)

    # ---- Crear / actualizar ----
    async def create_project(self, *, actor_id: Optional[str], **data: Any):
        return await self.facade.create(actor_id=actor_id, **data)

    async def update_project(self, project_id: str, *, actor_id: Optional[str], **changes: Any):
        return await self.facade.update(project_id, actor_id=actor_id, **changes)

    # ---- Status ----
    async def change_status(self, project_id: str, *, actor_id: Optional[str], new_status: ProjectStatus):
        return await self.facade.change_status(project_id, actor_id=actor_id, new_status=new_status)

    # ---- Eliminación ----
    async def delete(self, project_id: str, *, actor_id: Optional[str]) -> None:
        await self.facade.delete(project_id, actor_id=actor_id)

    # ---- Dropbox ----
    async def create_dropbox_folder(self, project_id: str, *, actor_id: Optional[str]):
        return await self.facade.ensure_dropbox_folder(project_id, actor_id=actor_id)
