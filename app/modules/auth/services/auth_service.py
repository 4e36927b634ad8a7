# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/services/auth_service.py

Capa de aplicación de Auth (login) y de equipo.
Orquesta AuthFacade/TeamFacade y NO reimplementa reglas de dominio.
"""
from __future__ import annotations

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.enums import UserRole
from app.modules.auth.facades import AuthFacade, TeamFacade


class AuthService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.facade = AuthFacade(db)

    async def login(self, *, email: str, password: str, ip_address: Optional[str] = None):
        return await self.facade.authenticate(email, password, ip_address=ip_address)


class TeamService:
    """Consultas y comandos sobre miembros del equipo."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.facade = TeamFacade(db)

    async def list_members(self, role: Optional[UserRole] = None):
        return await self.facade.list_members(role)

    async def get_member(self, user_id: str):
        return await self.facade.get_member(user_id)

    async def create_member(self, actor, **data: Any):
        return await self.facade.create_member(actor, **data)

    async def update_member(self, actor, user_id: str, changes: dict[str, Any]):
        return await self.facade.update_member(actor, user_id, changes)

    async def deactivate_member(self, actor, user_id: str):
        return await self.facade.deactivate_member(actor, user_id)
