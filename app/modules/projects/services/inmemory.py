# -*- coding: utf-8 -*-
"""
Servicio in-memory para pruebas de rutas del módulo Projects.
No toca DB ni Dropbox. Una misma instancia cubre comandos y consultas,
así los tests pueden overridear ambas dependencias con ella.
Autor: Atelier
Fecha: 12/08/2026
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Set
from uuid import uuid4

from app.modules.clients.facades.errors import ClientNotFound
from app.modules.projects.enums import ProjectStatus, ProjectType, is_valid_status_transition
from app.modules.projects.facades.errors import InvalidStatusTransition, ProjectNotFound
from app.modules.projects.facades.project_facade import ALLOWED_UPDATE_FIELDS


class InMemoryProjectsService:
    """Implementa solo lo que las rutas usan en tests."""

    def __init__(self, client_ids: Optional[Set[str]] = None, dropbox_root: str = "/Atelier Team Folder"):
        self.client_ids = set(client_ids or {"c1"})
        self.dropbox_root = dropbox_root
        self.projects: Dict[str, SimpleNamespace] = {}
        self.deleted: List[str] = []

    @staticmethod
    def _now():
        return datetime.now(timezone.utc)

    def _get(self, project_id: str) -> SimpleNamespace:
        if project_id not in self.projects:
            raise ProjectNotFound(project_id)
        return self.projects[project_id]

    # ---- Comandos ----
    async def create_project(self, *, actor_id: Optional[str], create_dropbox_folder: Optional[bool] = None, **data: Any):
        if data.get("client_id") not in self.client_ids:
            raise ClientNotFound(data.get("client_id"))
        now = self._now()
        project = SimpleNamespace(
            id=uuid4().hex,
            name=data["name"],
            description=data.get("description"),
            type=data.get("type") or ProjectType.RESIDENTIAL,
            status=ProjectStatus.DRAFT,
            client_id=data["client_id"],
            due_date=data.get("due_date"),
            budget=data.get("budget"),
            dropbox_folder=f"{self.dropbox_root}/{data['name']}" if create_dropbox_folder else None,
            street_address=data.get("street_address"),
            city=data.get("city"),
            postal_code=data.get("postal_code"),
            created_by_id=actor_id,
            updated_by_id=actor_id,
            created_at=now,
            updated_at=now,
        )
        self.projects[project.id] = project
        return project

    async def update_project(self, project_id: str, *, actor_id: Optional[str], **changes: Any):
        project = self._get(project_id)
        for k, v in changes.items():
            if k in ALLOWED_UPDATE_FIELDS:
                setattr(project, k, v)
        project.updated_by_id = actor_id
        return project

    async def change_status(self, project_id: str, *, actor_id: Optional[str], new_status: ProjectStatus):
        project = self._get(project_id)
        if project.status == new_status:
            return project
        if not is_valid_status_transition(project.status, new_status):
            raise InvalidStatusTransition(project.status.value, new_status.value)
        project.status = new_status
        return project

    async def delete(self, project_id: str, *, actor_id: Optional[str]) -> None:
        self._get(project_id)
        del self.projects[project_id]
        self.deleted.append(project_id)

    async def create_dropbox_folder(self, project_id: str, *, actor_id: Optional[str]):
        project = self._get(project_id)
        project.dropbox_folder = f"{self.dropbox_root}/{project.name}"
        return project

    # ---- Consultas ----
    async def list_projects(self, *, status=None, client_id=None, q=None, limit: int = 50, offset: int = 0):
        items = list(self.projects.values())
        if status is not None:
            items = [p for p in items if p.status == status]
        if client_id:
            items = [p for p in items if p.client_id == client_id]
        if q:
            items = [p for p in items if q.lower() in p.name.lower()]
        items.sort(key=lambda p: p.created_at, reverse=True)
        return items[offset:offset + limit], len(items)

    async def get_project(self, project_id: str):
        return self._get(project_id)

    async def get_project_detail(self, project_id: str):
        return {"project": self._get(project_id), "client": None, "rooms": [], "progress": 0}
