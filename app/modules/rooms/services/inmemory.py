# -*- coding: utf-8 -*-
"""
Servicio in-memory para pruebas de rutas del módulo Rooms.
No toca DB: guarda rooms/fases como SimpleNamespace y reutiliza las
utilidades puras de fases para progreso y estado.
Autor: Atelier
Fecha: 12/08/2026
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Sequence, Set
from uuid import uuid4

from app.modules.rooms.enums import PHASE_SEQUENCE, RoomStatus, StageAction, StageStatus
from app.modules.rooms.facades.errors import (
    DuplicateStageType,
    InvalidStageAction,
    ProjectNotFound,
    RoomNotFound,
    StageNotFound,
)
from app.modules.rooms.facades.phase_utils import calculate_room_completion
from app.modules.rooms.facades.room_state import derive_room_status
from app.modules.rooms.facades.views import room_view, stage_view


class InMemoryRoomsService:
    def __init__(self, project_ids: Optional[Set[str]] = None):
        self.project_ids = set(project_ids or {"p1"})
        self.rooms: Dict[str, SimpleNamespace] = {}
        self.stages: Dict[str, SimpleNamespace] = {}
        self.actions: List[Dict[str, Any]] = []

    def _room_stages(self, room_id: str) -> List[SimpleNamespace]:
        return [s for s in self.stages.values() if s.room_id == room_id]

    def _room(self, room_id: str) -> SimpleNamespace:
        if room_id not in self.rooms:
            raise RoomNotFound(room_id)
        return self.rooms[room_id]

    async def list_rooms(self, project_id: str):
        if project_id not in self.project_ids:
            raise ProjectNotFound(project_id)
        rooms = sorted(
            (r for r in self.rooms.values() if r.project_id == project_id),
            key=lambda r: (r.order, r.created_at),
        )
        return [room_view(r, self._room_stages(r.id)) for r in rooms]

    async def get_room(self, room_id: str):
        room = self._room(room_id)
        return room_view(room, self._room_stages(room_id))

    async def create_room(self, project_id: str, *, actor_id: Optional[str], **data: Any):
        if project_id not in self.project_ids:
            raise ProjectNotFound(project_id)
        now = datetime.now(timezone.utc)
        room = SimpleNamespace(
            id=uuid4().hex,
            project_id=project_id,
            type=data["type"],
            name=data.get("name"),
            order=data.get("order") or 0,
            status=RoomStatus.NOT_STARTED,
            current_stage=PHASE_SEQUENCE[0],
            start_date=None,
            due_date=data.get("due_date"),
            created_at=now,
            updated_at=now,
        )
        self.rooms[room.id] = room
        for phase in PHASE_SEQUENCE:
            stage = SimpleNamespace(
                id=uuid4().hex,
                room_id=room.id,
                type=phase,
                status=StageStatus.NOT_STARTED,
                assigned_to=None,
                due_date=None,
                start_date=None,
                started_at=None,
                completed_at=None,
                completed_by_id=None,
                created_at=now,
                updated_at=now,
            )
            self.stages[stage.id] = stage
        return room_view(room, self._room_stages(room.id))

    async def update_room(self, room_id: str, *, actor_id: Optional[str], **changes: Any):
        room = self._room(room_id)
        for k, v in changes.items():
            setattr(room, k, v)
        return room_view(room, self._room_stages(room_id))

    async def delete_room(self, room_id: str, *, actor_id: Optional[str]) -> None:
        self._room(room_id)
        for stage in self._room_stages(room_id):
            del self.stages[stage.id]
        del self.rooms[room_id]

    async def apply_stage_action(
        self,
        stage_id: str,
        *,
        actor_id: Optional[str],
        action: str,
        assigned_to: Optional[str] = None,
    ):
        if stage_id not in self.stages:
            raise StageNotFound(stage_id)
        try:
            action = StageAction(action)
        except ValueError:
            raise InvalidStageAction(action) from None
        stage = self.stages[stage_id]
        self.actions.append({"stage_id": stage_id, "action": action, "actor_id": actor_id})
        if action == StageAction.START:
            if stage.status == StageStatus.COMPLETED:
                raise InvalidStageAction(action, "La fase ya está completada; usa reopen")
            stage.status = StageStatus.IN_PROGRESS
        elif action == StageAction.COMPLETE:
            if stage.status == StageStatus.NOT_APPLICABLE:
                raise InvalidStageAction(action, "No se puede completar una fase que no aplica")
            stage.status = StageStatus.COMPLETED
            stage.completed_by_id = actor_id
        elif action == StageAction.REOPEN:
            stage.status = StageStatus.IN_PROGRESS
            stage.completed_by_id = None
        elif action == StageAction.MARK_NOT_APPLICABLE:
            stage.status = StageStatus.NOT_APPLICABLE
        elif action == StageAction.MARK_APPLICABLE:
            if stage.status != StageStatus.NOT_APPLICABLE:
                raise InvalidStageAction(action, "La fase ya aplica")
            stage.status = StageStatus.NOT_STARTED
        elif action == StageAction.ASSIGN:
            stage.assigned_to = assigned_to
        return stage_view(stage)

    async def bulk_update_stages(self, room_id: str, updates: Sequence[Dict[str, Any]], *, actor_id: Optional[str]):
        room = self._room(room_id)
        types = [str(u["stage_type"]) for u in updates]
        duplicates = sorted({t for t in types if types.count(t) > 1})
        if duplicates:
            raise DuplicateStageType(duplicates)
        by_type = {str(s.type): s for s in self._room_stages(room_id)}
        updated = []
        for u in updates:
            stage = by_type[str(u["stage_type"])]
            stage.status = u["status"]
            updated.append(stage)
        stages = self._room_stages(room_id)
        room.status, room.current_stage = derive_room_status(stages)
        return {
            "room_id": room_id,
            "updated": [stage_view(s) for s in updated],
            "progress": calculate_room_completion(stages),
        }
