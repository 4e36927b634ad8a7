# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/routes/deps.py

Dependencias inyectables para los servicios reales de Rooms/Stages.
Tests pueden overridearlas con InMemoryRoomsService.

Autor: Atelier
Fecha: 12/08/2026
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.database import get_db
from app.modules.rooms.services import RoomsService


async def get_rooms_service(db: AsyncSession = Depends(get_db)) -> RoomsService:
    return RoomsService(db)
# Fin del archivo backend/app/modules/rooms/routes/deps.py
