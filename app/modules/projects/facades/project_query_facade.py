# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/facades/project_query_facade.py

Facade de consultas de proyectos: listado con filtros y detalle con rooms.

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.clients.models import Client
from app.modules.projects.enums import ProjectStatus
from app.modules.projects.facades.errors import ProjectNotFound
from app.modules.projects.models import Project
from app.modules.rooms.facades.room_facade import RoomFacade


class ProjectQueryFacade:
    """
    Consultas de solo lectura sobre proyectos.

    - list_projects: filtros status / client_id / q (nombre, descripción, ciudad),
      paginación limit/offset, más recientes primero
    - get_detail: proyecto + cliente + rooms con su progreso
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, project_id: str) -> Project:
        project = await self.db.get(Project, project_id)
        if project is None:
            raise ProjectNotFound(project_id)
        return project

    async def list_projects(
        self,
        *,
        status: Optional[ProjectStatus] = None,
        client_id: Optional[str] = None,
        q: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[Project], int]:
        conditions = []
        if status is not None:
            conditions.append(Project.status == status)
        if client_id:
            conditions.append(Project.client_id == client_id)
        if q and q.strip():
            pattern = f"%{q.strip().lower()}%"
            conditions.append(
                or_(
                    func.lower(Project.name).like(pattern),
                    func.lower(func.coalesce(Project.description, "")).like(pattern),
                    func.lower(func.coalesce(Project.city, "")).like(pattern),
                )
            )

        total = await self.db.scalar(select(func.count()).select_from(Project).where(*conditions))
        stmt = (
            select(Project)
            .where(*conditions)
            .order_by(Project.created_at.desc(), Project.id.desc())
            .limit(limit)
            .offset(offset)
        )
        items = list((await self.db.execute(stmt)).scalars().all())
        return items, int(total or 0)

    async def get_detail(self, project_id: str) -> dict[str, Any]:
        project = await self.get(project_id)
        client = await self.db.get(Client, project.client_id) if project.client_id else None
        rooms = await RoomFacade(self.db).list_rooms(project_id)
        progress = round(sum(r["progress"] for r in rooms) / len(rooms)) if rooms else 0
        return {
            "project": project,
            "client": client,
            "rooms": rooms,
            "progress": progress,
        }


__all__ = ["ProjectQueryFacade"]

# Fin del archivo backend/app/modules/projects/facades/project_query_facade.py
