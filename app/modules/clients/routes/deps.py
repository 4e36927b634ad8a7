# -*- coding: utf-8 -*-
"""
backend/app/modules/clients/routes/deps.py

Dependencias inyectables para los servicios reales de Clients.
Tests pueden overridearlas con InMemoryClientsService.

Autor: Atelier
Fecha: 12/08/2026
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.database import get_db
from app.modules.clients.services import ClientsService


async def get_clients_service(db: AsyncSession = Depends(get_db)) -> ClientsService:
    return ClientsService(db)
# Fin del archivo backend/app/modules/clients/routes/deps.py
