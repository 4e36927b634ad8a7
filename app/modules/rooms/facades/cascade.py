# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/facades/cascade.py

Borrado explícito de rooms/fases y sus dependientes (chat, menciones,
reacciones). No hay relationships ORM; el orden de borrado respeta las FKs.
No hace commit.

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.chat.models import ChatMention, ChatMessage, ChatMessageReaction
from app.modules.rooms.models import Room, Stage

logger = logging.getLogger(__name__)


async def delete_stages_cascade(db: AsyncSession, stage_ids: Sequence[str]) -> int:
    if not stage_ids:
        return 0
    message_ids = select(ChatMessage.id).where(ChatMessage.stage_id.in_(stage_ids)).scalar_subquery()
    await db.execute(delete(ChatMessageReaction).where(ChatMessageReaction.message_id.in_(message_ids)))
    await db.execute(delete(ChatMention).where(ChatMention.message_id.in_(message_ids)))
    await db.execute(delete(ChatMessage).where(ChatMessage.stage_id.in_(stage_ids)))
    result = await db.execute(delete(Stage).where(Stage.id.in_(stage_ids)))
    return result.rowcount or 0


async def delete_rooms_cascade(db: AsyncSession, room_ids: Sequence[str]) -> dict[str, int]:
    if not room_ids:
        return {"rooms": 0, "stages": 0}
    stage_ids = list((await db.execute(select(Stage.id).where(Stage.room_id.in_(room_ids)))).scalars().all())
    stages = await delete_stages_cascade(db, stage_ids)
    result = await db.execute(delete(Room).where(Room.id.in_(room_ids)))
    stats = {"rooms": result.rowcount or 0, "stages": stages}
    logger.debug("[Rooms] cascade rooms=%d stages=%d", stats["rooms"], stats["stages"])
    return stats


__all__ = ["delete_stages_cascade", "delete_rooms_cascade"]

# Fin del archivo backend/app/modules/rooms/facades/cascade.py
