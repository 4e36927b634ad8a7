# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/facades/project_facade.py

Facade de comandos de proyectos: alta, edición, cambio de status,
borrado y carpeta de Dropbox.

Reglas de dominio implementadas:
1. El cliente debe existir al crear
2. Carpeta de Dropbox opcional al crear; un fallo de Dropbox no bloquea el alta
3. Edición por lista blanca; registra PROJECT_UPDATED con el detalle de cambios
4. Status validado contra VALID_STATUS_TRANSITIONS (mismo status = no-op)
5. Borrado físico en cascada (rooms, fases, chat)

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.activity.enums import ActivityType
from app.modules.activity.facades import log_project_activity
from app.modules.clients.facades.errors import ClientNotFound
from app.modules.clients.models import Client
from app.modules.projects.enums import ProjectStatus, is_valid_status_transition
from app.modules.projects.facades.errors import InvalidStatusTransition, ProjectNotFound
from app.modules.projects.models import Project
from app.modules.rooms.facades.cascade import delete_rooms_cascade
from app.modules.rooms.models import Room
from app.shared.database.transactions import commit_or_raise
from app.shared.integrations.dropbox_client import DropboxClient, DropboxConfigError, DropboxError

logger = logging.getLogger(__name__)

ALLOWED_UPDATE_FIELDS = {
    "name",
    "description",
    "type",
    "due_date",
    "budget",
    "street_address",
    "city",
    "postal_code",
    "dropbox_folder",
}

_NOT_NULL_FIELDS = {"name", "type"}


def _jsonable(value: Any) -> Any:
    """Valores aptos para la columna JSON de actividad."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    return value


class ProjectFacade:
    """
    Facade de comandos para proyectos.

    Args:
        db: sesión async activa
        dropbox: cliente de Dropbox; por defecto el compartido de la app
        dropbox_enabled: si Dropbox está configurado (default de create_dropbox_folder)
    """

    ALLOWED_UPDATE_FIELDS = ALLOWED_UPDATE_FIELDS

    def __init__(
        self,
        db: AsyncSession,
        dropbox: Optional[DropboxClient] = None,
        dropbox_enabled: Optional[bool] = None,
    ):
        self.db = db
        self._dropbox = dropbox
        self._dropbox_enabled = dropbox_enabled

    # ===== HELPERS =====

    def _get_dropbox(self) -> DropboxClient:
        if self._dropbox is None:
            from app.shared.integrations.dropbox_client import get_dropbox_client
            self._dropbox = get_dropbox_client()
        return self._dropbox

    def _dropbox_is_enabled(self) -> bool:
        if self._dropbox_enabled is None:
            from app.shared.config import get_settings
            self._dropbox_enabled = bool(get_settings().dropbox_configured)
        return self._dropbox_enabled

    async def get(self, project_id: str) -> Project:
        project = await self.db.get(Project, project_id)
        if project is None:
            raise ProjectNotFound(project_id)
        return project

    # ===== ALTA =====

    async def create(
        self,
        *,
        actor_id: Optional[str],
        create_dropbox_folder: Optional[bool] = None,
        **data: Any,
    ) -> Project:
        """
        Crea un proyecto (status DRAFT) y, opcionalmente, su carpeta en Dropbox.

        Raises:
            ClientNotFound: client_id no existe
        """
        client_id = data.get("client_id")
        if client_id is None or await self.db.get(Client, client_id) is None:
            raise ClientNotFound(client_id)

        fields = {k: v for k, v in data.items() if k in ALLOWED_UPDATE_FIELDS and v is not None}

        async def work() -> Project:
            project = Project(
                client_id=client_id,
                status=ProjectStatus.DRAFT,
                created_by_id=actor_id,
                updated_by_id=actor_id,
                **fields,
            )
            self.db.add(project)
            await self.db.flush()
            await log_project_activity(
                self.db,
                actor_id=actor_id,
                action=ActivityType.PROJECT_CREATED,
                project_id=project.id,
                projectName=project.name,
            )
            return project

        project = await commit_or_raise(self.db, work)
        logger.info("[Projects] proyecto creado id=%s client=%s", project.id, client_id)

        wants_folder = self._dropbox_is_enabled() if create_dropbox_folder is None else create_dropbox_folder
        if wants_folder and not project.dropbox_folder:
            await self._try_create_folder(project)
        return project

    async def _try_create_folder(self, project: Project) -> None:
        """Crea la carpeta en Dropbox; cualquier fallo se registra y se ignora."""
        project_id = project.id
        try:
            folder = await self._get_dropbox().create_project_folder_structure(project.name)
        except (DropboxError, DropboxConfigError, ValueError) as e:
            logger.warning("[Projects] carpeta Dropbox no creada para %s: %s", project_id, e)
            return

        async def work() -> None:
            project.dropbox_folder = folder

        try:
            await commit_or_raise(self.db, work)
        except Exception:
            logger.exception("[Projects] no se pudo guardar dropbox_folder de %s", project_id)
            await self.db.refresh(project)

    async def ensure_dropbox_folder(self, project_id: str, *, actor_id: Optional[str]) -> Project:
        """
        (Re)crea la estructura de carpetas del proyecto y guarda la ruta.

        Raises:
            ProjectNotFound
            DropboxError / DropboxConfigError: se propagan (502 / 503 en rutas)
        """
        project = await self.get(project_id)
        folder = await self._get_dropbox().create_project_folder_structure(project.name)
        previous = project.dropbox_folder

        async def work() -> Project:
            project.dropbox_folder = folder
            project.updated_by_id = actor_id
            await log_project_activity(
                self.db,
                actor_id=actor_id,
                action=ActivityType.PROJECT_UPDATED,
                project_id=project.id,
                projectName=project.name,
                changes={"dropbox_folder": {"from": previous, "to": folder}},
            )
            return project

        return await commit_or_raise(self.db, work)

    # ===== EDICIÓN =====

    async def update(self, project_id: str, *, actor_id: Optional[str], **changes: Any) -> Project:
        project = await self.get(project_id)
        changes = {
            k: v for k, v in changes.items()
            if k in ALLOWED_UPDATE_FIELDS and not (k in _NOT_NULL_FIELDS and v is None)
        }

        async def work() -> Project:
            diff: dict[str, dict[str, Any]] = {}
            for field, value in changes.items():
                old = getattr(project, field)
                if old != value:
                    diff[field] = {"from": _jsonable(old), "to": _jsonable(value)}
                setattr(project, field, value)
            project.updated_by_id = actor_id
            await log_project_activity(
                self.db,
                actor_id=actor_id,
                action=ActivityType.PROJECT_UPDATED,
                project_id=project.id,
                projectName=project.name,
                changes=diff,
            )
            return project

        return await commit_or_raise(self.db, work)

    async def change_status(
        self,
        project_id: str,
        *,
        actor_id: Optional[str],
        new_status: ProjectStatus,
    ) -> Project:
        """
        Raises:
            ProjectNotFound
            InvalidStatusTransition: transición no permitida
        """
        project = await self.get(project_id)
        current = ProjectStatus(project.status)
        new_status = ProjectStatus(new_status)
        if current == new_status:
            return project
        if not is_valid_status_transition(current, new_status):
            raise InvalidStatusTransition(current.value, new_status.value)

        async def work() -> Project:
            project.status = new_status
            project.updated_by_id = actor_id
            await log_project_activity(
                self.db,
                actor_id=actor_id,
                action=ActivityType.PROJECT_STATUS_CHANGED,
                project_id=project.id,
                projectName=project.name,
                previousStatus=current.value,
                newStatus=new_status.value,
            )
            return project

        project = await commit_or_raise(self.db, work)
        logger.info("[Projects] status %s → %s (%s)", current.value, new_status.value, project_id)
        return project

    # ===== BORRADO =====

    async def delete(self, project_id: str, *, actor_id: Optional[str]) -> None:
        project = await self.get(project_id)
        project_name = project.name

        async def work() -> None:
            await log_project_activity(
                self.db,
                actor_id=actor_id,
                action=ActivityType.PROJECT_DELETED,
                project_id=project_id,
                projectName=project_name,
            )
            room_ids = list((await self.db.execute(select(Room.id).where(Room.project_id == project_id))).scalars().all())
            await delete_rooms_cascade(self.db, room_ids)
            await self.db.delete(project)

        await commit_or_raise(self.db, work)
        logger.info("[Projects] proyecto eliminado id=%s (%s)", project_id, project_name)


__all__ = ["ProjectFacade", "ALLOWED_UPDATE_FIELDS"]

# Fin del archivo backend/app/modules/projects/facades/project_facade.py
