# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/facades/room_facade.py

Facade de rooms (espacios de un proyecto).

Reglas de dominio:
1. Un room se crea con sus 5 fases en orden canónico
2. Cada fase se auto-asigna al primer miembro activo del rol por defecto
3. Listado ordenado por `order` y luego por fecha de alta
4. Cambio de status → ROOM_STATUS_CHANGED; otros cambios → ROOM_UPDATED
5. Borrado en cascada de fases y su chat

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.activity.enums import ActivityType
from app.modules.activity.facades import log_room_activity
from app.modules.projects.models import Project
from app.modules.rooms.enums import PHASE_SEQUENCE, RoomStatus, RoomType, StageStatus
from app.modules.rooms.facades.assignment import find_default_assignees
from app.modules.rooms.facades.cascade import delete_rooms_cascade
from app.modules.rooms.facades.errors import ProjectNotFound, RoomNotFound
from app.modules.rooms.facades.phase_utils import format_room_display_name
from app.modules.rooms.facades.views import room_view
from app.modules.rooms.models import Room, Stage
from app.shared.database.transactions import commit_or_raise

logger = logging.getLogger(__name__)

ALLOWED_UPDATE_FIELDS = {"name", "type", "order", "status", "due_date"}


class RoomFacade:
    def __init__(self, db: AsyncSession):
        self.db = db

    # ===== LECTURA =====

    async def _project(self, project_id: str) -> Project:
        project = await self.db.get(Project, project_id)
        if project is None:
            raise ProjectNotFound(project_id)
        return project

    async def get_room_model(self, room_id: str) -> Room:
        room = await self.db.get(Room, room_id)
        if room is None:
            raise RoomNotFound(room_id)
        return room

    async def stages_by_room(self, room_ids: list[str]) -> dict[str, list[Stage]]:
        grouped: dict[str, list[Stage]] = defaultdict(list)
        if not room_ids:
            return grouped
        rows = (await self.db.execute(select(Stage).where(Stage.room_id.in_(room_ids)))).scalars().all()
        for stage in rows:
            grouped[stage.room_id].append(stage)
        return grouped

    async def list_rooms(self, project_id: str) -> list[dict[str, Any]]:
        await self._project(project_id)
        rooms = (
            await self.db.execute(
                select(Room)
                .where(Room.project_id == project_id)
                .order_by(Room.order.asc(), Room.created_at.asc())
            )
        ).scalars().all()
        stages = await self.stages_by_room([r.id for r in rooms])
        return [room_view(r, stages.get(r.id, [])) for r in rooms]

    async def get_room(self, room_id: str) -> dict[str, Any]:
        room = await self.get_room_model(room_id)
        stages = await self.stages_by_room([room.id])
        return room_view(room, stages.get(room.id, []))

    # ===== ESCRITURA =====

    async def create_room(
        self,
        project_id: str,
        *,
        actor_id: Optional[str],
        type: RoomType,
        name: Optional[str] = None,
        order: Optional[int] = None,
        due_date=None,
    ) -> dict[str, Any]:
        project = await self._project(project_id)
        project_name = project.name
        if order is None:
            order = int(
                await self.db.scalar(
                    select(func.count()).select_from(Room).where(Room.project_id == project_id)
                )
                or 0
            )

        async def work() -> tuple[Room, list[Stage]]:
            assignees = await find_default_assignees(self.db)
            room = Room(
                project_id=project_id,
                type=type,
                name=name,
                order=order,
                status=RoomStatus.NOT_STARTED,
                current_stage=PHASE_SEQUENCE[0],
                due_date=due_date,
            )
            self.db.add(room)
            await self.db.flush()

            stages = [
                Stage(
                    room_id=room.id,
                    type=phase,
                    status=StageStatus.NOT_STARTED,
                    assigned_to=assignees.get(phase),
                )
                for phase in PHASE_SEQUENCE
            ]
            self.db.add_all(stages)
            await self.db.flush()

            await log_room_activity(
                self.db,
                actor_id=actor_id,
                action=ActivityType.ROOM_CREATED,
                room_id=room.id,
                roomName=format_room_display_name(name, type),
                projectName=project_name,
                projectId=project_id,
            )
            return room, stages

        room, stages = await commit_or_raise(self.db, work)
        logger.info(
            "[Rooms] room creado id=%s project=%s asignadas=%d/%d",
            room.id,
            project_id,
            sum(1 for s in stages if s.assigned_to),
            len(stages),
        )
        return room_view(room, stages)

    async def update_room(self, room_id: str, *, actor_id: Optional[str], **changes: Any) -> dict[str, Any]:
        room = await self.get_room_model(room_id)
        changes = {
            k: v for k, v in changes.items()
            if k in ALLOWED_UPDATE_FIELDS and not (k in ("type", "status", "order") and v is None)
        }
        previous_status = room.status

        async def work() -> Room:
            for field, value in changes.items():
                setattr(room, field, value)
            status_changed = "status" in changes and changes["status"] != previous_status
            if status_changed:
                await log_room_activity(
                    self.db,
                    actor_id=actor_id,
                    action=ActivityType.ROOM_STATUS_CHANGED,
                    room_id=room.id,
                    roomName=format_room_display_name(room.name, room.type),
                    previousStatus=str(previous_status),
                    newStatus=str(changes["status"]),
                )
            else:
                await log_room_activity(
                    self.db,
                    actor_id=actor_id,
                    action=ActivityType.ROOM_UPDATED,
                    room_id=room.id,
                    roomName=format_room_display_name(room.name, room.type),
                    fields=sorted(changes),
                )
            return room

        room = await commit_or_raise(self.db, work)
        stages = await self.stages_by_room([room.id])
        return room_view(room, stages.get(room.id, []))

    async def delete_room(self, room_id: str, *, actor_id: Optional[str]) -> None:
        room = await self.get_room_model(room_id)
        project = await self.db.get(Project, room.project_id)
        room_name = format_room_display_name(room.name, room.type)
        details = {
            "roomName": room_name,
            "projectId": room.project_id,
            "projectName": project.name if project else None,
        }

        async def work() -> None:
            await log_room_activity(
                self.db,
                actor_id=actor_id,
                action=ActivityType.ROOM_DELETED,
                room_id=room_id,
                **details,
            )
            await delete_rooms_cascade(self.db, [room_id])

        await commit_or_raise(self.db, work)
        logger.info("[Rooms] room eliminado id=%s (%s)", room_id, room_name)


__all__ = ["RoomFacade", "ALLOWED_UPDATE_FIELDS"]

# Fin del archivo backend/app/modules/rooms/facades/room_facade.py
