# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/routes/deps.py

Dependencias inyectables para los servicios reales de Auth.
Tests pueden overridear estas dependencias con stubs InMemory.

Autor: Atelier
Fecha: 12/08/2026
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.database import get_db
from app.modules.auth.services import AuthService, TeamService


async def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    return AuthService(db)


async def get_team_service(db: AsyncSession = Depends(get_db)) -> TeamService:
    return TeamService(db)
# Fin del archivo backend/app/modules/auth/routes/deps.py
