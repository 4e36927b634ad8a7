# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/services/queries.py

Capa de aplicación (consultas) del módulo Projects.
Orquesta ProjectQueryFacade.
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.projects.enums import ProjectStatus
from app.modules.projects.facades import ProjectQueryFacade


class ProjectsQueryService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.facade = ProjectQueryFacade(db)

    async def list_projects(
        self,
        *,
        status: Optional[ProjectStatus] = None,
        client_id: Optional[str] = None,
        q: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ):
        return await self.facade.list_projects(status=status, client_id=client_id, q=q, limit=limit, offset=offset)

    async def get_project(self, project_id: str):
        return await self.facade.get(project_id)

    async def get_project_detail(self, project_id: str):
        return await self.facade.get_detail(project_id)
