# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/facades/stage_facade.py

Facade de fases (stages): acciones individuales y actualización masiva.

Acciones (PATCH /stages/{id}):
- start                → IN_PROGRESS; room IN_PROGRESS con current_stage = fase
- complete             → COMPLETED; dispara avisos de fase siguiente; recalcula room
- reopen               → IN_PROGRESS; limpia completed_*; room COMPLETED → IN_PROGRESS
- mark_not_applicable  → NOT_APPLICABLE
- mark_applicable      → NOT_STARTED (solo desde NOT_APPLICABLE)
- assign               → assigned_to (None desasigna); avisa al nuevo responsable

Los efectos secundarios (notificaciones, emails) nunca hacen fallar la acción.

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.activity.enums import ActivityType
from app.modules.activity.facades import log_stage_activity
from app.modules.auth.models import User
from app.modules.notifications.enums import NotificationType, RelatedType
from app.modules.notifications.facades import create_notification, handle_phase_completion
from app.modules.projects.models import Project
from app.modules.rooms.enums import RoomStatus, StageAction, StageStatus, StageType
from app.modules.rooms.facades.errors import (
    AssigneeNotFound,
    DuplicateStageType,
    InvalidStageAction,
    RoomNotFound,
    StageNotFound,
)
from app.modules.rooms.facades.phase_utils import (
    calculate_room_completion,
    format_room_display_name,
    get_phase_display_name,
)
from app.modules.rooms.facades.room_state import (
    all_applicable_completed,
    derive_room_status,
    first_pending_phase,
    sort_stages,
)
from app.modules.rooms.facades.views import stage_view
from app.modules.rooms.models import Room, Stage
from app.observability.prom import STAGE_TRANSITIONS
from app.shared.database.transactions import commit_or_raise, now_utc
from app.shared.integrations.email_sender import IEmailSender

logger = logging.getLogger(__name__)


def apply_status_timestamps(stage: Stage, new_status: StageStatus, actor_id: Optional[str], now) -> None:
    """Mantiene started_at/completed_at/completed_by_id coherentes con el nuevo estado."""
    if new_status == StageStatus.COMPLETED:
        stage.completed_at = stage.completed_at if stage.status == StageStatus.COMPLETED else now
        stage.completed_by_id = stage.completed_by_id if stage.status == StageStatus.COMPLETED else actor_id
    elif stage.status == StageStatus.COMPLETED:
        stage.completed_at = None
        stage.completed_by_id = None
    if new_status == StageStatus.IN_PROGRESS and stage.started_at is None:
        stage.started_at = now
    stage.status = new_status


class StageFacade:
    def __init__(self, db: AsyncSession, email_sender: Optional[IEmailSender] = None):
        self.db = db
        self.email_sender = email_sender

    async def get_stage(self, stage_id: str) -> Stage:
        stage = await self.db.get(Stage, stage_id)
        if stage is None:
            raise StageNotFound(stage_id)
        return stage

    async def _room_stages(self, room_id: str) -> list[Stage]:
        rows = (await self.db.execute(select(Stage).where(Stage.room_id == room_id))).scalars().all()
        return sort_stages(rows)

    # ===== ACCIONES INDIVIDUALES =====

    async def apply_action(
        self,
        stage_id: str,
        *,
        actor_id: Optional[str],
        action: str,
        assigned_to: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Aplica `action` sobre la fase y devuelve su vista actualizada.

        Raises:
            StageNotFound: la fase no existe
            InvalidStageAction: acción desconocida o no válida en el estado actual
            AssigneeNotFound: assign hacia un usuario inexistente o inactivo
        """
        try:
            action = StageAction(action)
        except ValueError:
            raise InvalidStageAction(action) from None

        stage = await self.get_stage(stage_id)
        room = await self.db.get(Room, stage.room_id)
        handlers = {
            StageAction.START: self._start,
            StageAction.COMPLETE: self._complete,
            StageAction.REOPEN: self._reopen,
            StageAction.MARK_NOT_APPLICABLE: self._mark_not_applicable,
            StageAction.MARK_APPLICABLE: self._mark_applicable,
            StageAction.ASSIGN: self._assign,
        }
        after_commit = await handlers[action](stage, room, actor_id=actor_id, assigned_to=assigned_to)
        STAGE_TRANSITIONS.labels(action=action.value).inc()
        logger.info("[Stages] %s stage=%s type=%s by=%s", action.value, stage.id, stage.type, actor_id)

        view = stage_view(stage)
        if after_commit is not None:
            await self._run_side_effects(after_commit)
        return view

    async def _run_side_effects(self, side_effect) -> None:
        """Notificaciones post-commit: se registran en log y nunca se propagan."""
        try:
            await side_effect()
            await self.db.commit()
        except Exception:
            logger.exception("[Stages] efectos secundarios fallaron")
            await self.db.rollback()

    async def _start(self, stage: Stage, room: Room, *, actor_id, **_):
        if stage.status == StageStatus.COMPLETED:
            raise InvalidStageAction(StageAction.START, "La fase ya está completada; usa reopen")
        if stage.status == StageStatus.NOT_APPLICABLE:
            raise InvalidStageAction(StageAction.START, "La fase no aplica; usa mark_applicable")

        async def work() -> None:
            apply_status_timestamps(stage, StageStatus.IN_PROGRESS, actor_id, now_utc())
            if room is not None:
                room.status = RoomStatus.IN_PROGRESS
                room.current_stage = StageType(str(stage.type))
            await log_stage_activity(
                self.db, actor_id=actor_id, action=ActivityType.STAGE_STARTED, stage_id=stage.id
            )

        await commit_or_raise(self.db, work)
        return None

    async def _complete(self, stage: Stage, room: Room, *, actor_id, **_):
        if stage.status == StageStatus.NOT_APPLICABLE:
            raise InvalidStageAction(StageAction.COMPLETE, "No se puede completar una fase que no aplica")

        async def work() -> None:
            apply_status_timestamps(stage, StageStatus.COMPLETED, actor_id, now_utc())
            await self.db.flush()
            if room is not None:
                stages = await self._room_stages(room.id)
                if all_applicable_completed(stages):
                    room.status = RoomStatus.COMPLETED
                else:
                    room.current_stage = first_pending_phase(stages)
            await log_stage_activity(
                self.db, actor_id=actor_id, action=ActivityType.STAGE_COMPLETED, stage_id=stage.id
            )

        await commit_or_raise(self.db, work)

        async def notify() -> None:
            result = await handle_phase_completion(
                self.db, stage, actor_id, auto_email=True, email_sender=self.email_sender
            )
            if result.errors:
                logger.warning("[Stages] avisos de fase con errores: %s", result.errors)

        return notify

    async def _reopen(self, stage: Stage, room: Room, *, actor_id, **_):
        if stage.status == StageStatus.NOT_APPLICABLE:
            raise InvalidStageAction(StageAction.REOPEN, "La fase no aplica; usa mark_applicable")

        async def work() -> None:
            apply_status_timestamps(stage, StageStatus.IN_PROGRESS, actor_id, now_utc())
            if room is not None and room.status == RoomStatus.COMPLETED:
                room.status = RoomStatus.IN_PROGRESS
                room.current_stage = StageType(str(stage.type))
            await log_stage_activity(
                self.db, actor_id=actor_id, action=ActivityType.STAGE_REOPENED, stage_id=stage.id
            )

        await commit_or_raise(self.db, work)
        return None

    async def _set_applicability(self, stage: Stage, room: Optional[Room], new_status: StageStatus, actor_id) -> None:
        previous = stage.status

        async def work() -> None:
            apply_status_timestamps(stage, new_status, actor_id, now_utc())
            await self.db.flush()
            if room is not None:
                room.status, room.current_stage = derive_room_status(await self._room_stages(room.id))
            await log_stage_activity(
                self.db,
                actor_id=actor_id,
                action=ActivityType.STAGE_STATUS_CHANGED,
                stage_id=stage.id,
                previousStatus=str(previous),
                newStatus=str(new_status),
            )

        await commit_or_raise(self.db, work)

    async def _mark_not_applicable(self, stage: Stage, room: Room, *, actor_id, **_):
        await self._set_applicability(stage, room, StageStatus.NOT_APPLICABLE, actor_id)
        return None

    async def _mark_applicable(self, stage: Stage, room: Room, *, actor_id, **_):
        if stage.status != StageStatus.NOT_APPLICABLE:
            raise InvalidStageAction(StageAction.MARK_APPLICABLE, "La fase ya aplica")
        await self._set_applicability(stage, room, StageStatus.NOT_STARTED, actor_id)
        return None

    async def _assign(self, stage: Stage, room: Room, *, actor_id, assigned_to=None, **_):
        assignee: Optional[User] = None
        if assigned_to is not None:
            assignee = await self.db.get(User, assigned_to)
            if assignee is None or not assignee.is_active:
                raise AssigneeNotFound(assigned_to)

        async def work() -> None:
            stage.assigned_to = assignee.id if assignee else None
            await log_stage_activity(
                self.db,
                actor_id=actor_id,
                action=ActivityType.STAGE_ASSIGNED,
                stage_id=stage.id,
                assigneeId=assignee.id if assignee else None,
                assigneeName=(assignee.name or assignee.email) if assignee else None,
            )

        await commit_or_raise(self.db, work)

        if assignee is None or assignee.id == actor_id:
            return None
        assignee_id = assignee.id

        async def notify() -> None:
            project_name = None
            room_name = None
            if room is not None:
                room_name = format_room_display_name(room.name, room.type)
                project = await self.db.get(Project, room.project_id)
                project_name = project.name if project else None
            display = get_phase_display_name(str(stage.type))
            await create_notification(
                self.db,
                user_id=assignee_id,
                type=NotificationType.STAGE_ASSIGNED,
                title=f"New {display} assignment",
                message=f"You have been assigned to the {display} phase for {room_name} in {project_name}.",
                related_id=stage.id,
                related_type=RelatedType.STAGE,
            )

        return notify

    # ===== ACTUALIZACIÓN MASIVA =====

    async def bulk_update(
        self,
        room_id: str,
        updates: Sequence[dict[str, Any]],
        *,
        actor_id: Optional[str],
    ) -> dict[str, Any]:
        """
        Aplica [{stage_type, status}, ...] en una sola transacción.

        Crea las fases faltantes, mantiene timestamps y registra
        STAGE_STATUS_CHANGED solo cuando el estado cambia de verdad.

        Raises:
            RoomNotFound: el room no existe
            DuplicateStageType: un mismo tipo aparece más de una vez
        """
        room = await self.db.get(Room, room_id)
        if room is None:
            raise RoomNotFound(room_id)

        seen: set[str] = set()
        duplicates: list[str] = []
        for item in updates:
            stage_type = str(item["stage_type"])
            if stage_type in seen and stage_type not in duplicates:
                duplicates.append(stage_type)
            seen.add(stage_type)
        if duplicates:
            raise DuplicateStageType(duplicates)

        async def work() -> list[Stage]:
            existing = {str(s.type): s for s in await self._room_stages(room_id)}
            now = now_utc()
            touched: list[Stage] = []
            for item in updates:
                stage_type = StageType(str(item["stage_type"]))
                new_status = StageStatus(str(item["status"]))
                stage = existing.get(stage_type.value)
                if stage is None:
                    stage = Stage(room_id=room_id, type=stage_type, status=StageStatus.NOT_STARTED)
                    self.db.add(stage)
                    await self.db.flush()
                    existing[stage_type.value] = stage

                previous = stage.status
                if previous != new_status:
                    apply_status_timestamps(stage, new_status, actor_id, now)
                    await log_stage_activity(
                        self.db,
                        actor_id=actor_id,
                        action=ActivityType.STAGE_STATUS_CHANGED,
                        stage_id=stage.id,
                        previousStatus=str(previous),
                        newStatus=str(new_status),
                    )
                touched.append(stage)

            await self.db.flush()
            room.status, room.current_stage = derive_room_status(list(existing.values()))
            return touched

        touched = await commit_or_raise(self.db, work)
        STAGE_TRANSITIONS.labels(action="bulk").inc()
        all_stages = await self._room_stages(room_id)
        logger.info("[Stages] bulk room=%s updates=%d room_status=%s", room_id, len(touched), room.status)
        return {
            "room_id": room_id,
            "updated": [stage_view(s) for s in touched],
            "progress": calculate_room_completion(all_stages),
        }


__all__ = ["StageFacade", "apply_status_timestamps"]

# Fin del archivo backend/app/modules/rooms/facades/stage_facade.py
