# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/services/rooms_service.py

Capa de aplicación de rooms y stages.
Orquesta RoomFacade / StageFacade y NO reimplementa reglas de dominio.
"""
from __future__ import annotations

from typing import Any, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.rooms.facades.room_facade import RoomFacade
from app.modules.rooms.facades.stage_facade import StageFacade
from app.shared.integrations.email_sender import IEmailSender


class RoomsService:
    def __init__(self, db: AsyncSession, email_sender: Optional[IEmailSender] = None):
        self.db = db
        self.rooms = RoomFacade(db)
        self.stages = StageFacade(db, email_sender=email_sender)

    # Rooms
    async def list_rooms(self, project_id: str):
        return await self.rooms.list_rooms(project_id)

    async def get_room(self, room_id: str):
        return await self.rooms.get_room(room_id)

    async def create_room(self, project_id: str, *, actor_id: Optional[str], **data: Any):
        return await self.rooms.create_room(project_id, actor_id=actor_id, **data)

    async def update_room(self, room_id: str, *, actor_id: Optional[str], **changes: Any):
        return await self.rooms.update_room(room_id, actor_id=actor_id, **changes)

    async def delete_room(self, room_id: str, *, actor_id: Optional[str]) -> None:
        await self.rooms.delete_room(room_id, actor_id=actor_id)

    # Stages
    async def apply_stage_action(
        self,
        stage_id: str,
        *,
        actor_id: Optional[str],
        action: str,
        assigned_to: Optional[str] = None,
    ):
        return await self.stages.apply_action(stage_id, actor_id=actor_id, action=action, assigned_to=assigned_to)

    async def bulk_update_stages(self, room_id: str, updates: Sequence[dict[str, Any]], *, actor_id: Optional[str]):
        return await self.stages.bulk_update(room_id, updates, actor_id=actor_id)
