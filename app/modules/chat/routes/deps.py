# -*- coding: utf-8 -*-
"""
backend/app/modules/chat/routes/deps.py

Dependencias inyectables del chat.

Autor: Atelier
Fecha: 12/08/2026
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.database import get_db
from app.modules.chat.services import ChatService


async def get_chat_service(db: AsyncSession = Depends(get_db)) -> ChatService:
    return ChatService(db)
# Fin del archivo backend/app/modules/chat/routes/deps.py
