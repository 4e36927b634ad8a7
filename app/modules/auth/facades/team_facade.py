# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/facades/team_facade.py

Gestión de miembros del equipo (alta, edición, cambio de rol, baja lógica).

Reglas de dominio:
1. Email único (comparación case-insensitive, se guarda en minúsculas)
2. Solo un OWNER puede crear/promover a OWNER (can_change_to_role)
3. Un ADMIN no puede modificar el rol de un OWNER
4. Un cambio de rol reacomoda las fases asignadas (módulo rooms)
5. Baja lógica: is_active=False; nadie puede darse de baja a sí mismo

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.activity.enums import ActivityType, EntityType
from app.modules.activity.facades import log_activity
from app.modules.auth.enums import UserRole, can_change_to_role
from app.modules.auth.facades.auth_facade import get_user_by_email
from app.modules.auth.facades.errors import (
    CannotDeleteSelf,
    EmailAlreadyExists,
    PermissionDenied,
    UserNotFound,
)
from app.modules.auth.models import User
from app.modules.rooms.facades.assignment import reassign_phases_on_role_change
from app.shared.database.transactions import commit_or_raise
from app.shared.utils.security import hash_password

logger = logging.getLogger(__name__)

# Lista blanca de campos editables desde PATCH /team/{id}
ALLOWED_UPDATE_FIELDS = {"name", "email", "role", "email_notifications_enabled"}


class _Actor(Protocol):
    id: str
    role: UserRole


class TeamFacade:
    def __init__(self, db: AsyncSession):
        self.db = db

    # ---- Consultas ----
    async def list_members(self, role: Optional[UserRole] = None) -> list[User]:
        stmt = select(User).where(User.is_active.is_(True))
        if role is not None:
            stmt = stmt.where(User.role == role)
        stmt = stmt.order_by(func.coalesce(User.name, User.email).asc())
        return list((await self.db.execute(stmt)).scalars().all())

    async def get_member(self, user_id: str) -> User:
        user = await self.db.get(User, user_id)
        if user is None:
            raise UserNotFound(user_id)
        return user

    # ---- Comandos ----
    async def create_member(
        self,
        actor: _Actor,
        *,
        name: str,
        email: str,
        password: str,
        role: UserRole,
        email_notifications_enabled: bool = True,
    ) -> User:
        if not can_change_to_role(UserRole(actor.role), role):
            raise PermissionDenied("Solo un OWNER puede crear otro OWNER")

        normalized = email.strip().lower()
        if await get_user_by_email(self.db, normalized) is not None:
            raise EmailAlreadyExists(normalized)

        async def work() -> User:
            user = User(
                name=name.strip(),
                email=normalized,
                password_hash=hash_password(password),
                role=role,
                email_notifications_enabled=email_notifications_enabled,
                is_active=True,
            )
            self.db.add(user)
            await self.db.flush()
            await log_activity(
                self.db,
                actor_id=actor.id,
                action=ActivityType.USER_CREATED,
                entity=EntityType.USER,
                entity_id=user.id,
                details={"userName": user.name, "email": user.email, "role": str(role)},
            )
            return user

        user = await commit_or_raise(self.db, work)
        logger.info("[Team] miembro creado user=%s role=%s by=%s", user.id, role, actor.id)
        return user

    async def update_member(self, actor: _Actor, user_id: str, changes: dict[str, Any]) -> User:
        user = await self.get_member(user_id)
        changes = {k: v for k, v in changes.items() if k in ALLOWED_UPDATE_FIELDS and v is not None}

        new_role = changes.get("role")
        old_role = UserRole(user.role)
        role_changed = new_role is not None and UserRole(new_role) != old_role
        if role_changed:
            if old_role == UserRole.OWNER and UserRole(actor.role) != UserRole.OWNER:
                raise PermissionDenied("Un ADMIN no puede modificar el rol de un OWNER")
            if not can_change_to_role(UserRole(actor.role), UserRole(new_role)):
                raise PermissionDenied("No tienes permisos para asignar ese rol")

        if "email" in changes:
            changes["email"] = str(changes["email"]).strip().lower()
            existing = await get_user_by_email(self.db, changes["email"])
            if existing is not None and existing.id != user.id:
                raise EmailAlreadyExists(changes["email"])

        async def work() -> User:
            for field, value in changes.items():
                setattr(user, field, value)
            await self.db.flush()

            if role_changed:
                await reassign_phases_on_role_change(self.db, user.id, old_role, UserRole(new_role))
                await log_activity(
                    self.db,
                    actor_id=actor.id,
                    action=ActivityType.USER_ROLE_CHANGED,
                    entity=EntityType.USER,
                    entity_id=user.id,
                    details={"userName": user.name, "previousRole": str(old_role), "newRole": str(new_role)},
                )
            other = sorted(k for k in changes if k != "role")
            if other:
                await log_activity(
                    self.db,
                    actor_id=actor.id,
                    action=ActivityType.USER_UPDATED,
                    entity=EntityType.USER,
                    entity_id=user.id,
                    details={"userName": user.name, "fields": other},
                )
            return user

        user = await commit_or_raise(self.db, work)
        logger.info("[Team] miembro actualizado user=%s fields=%s by=%s", user.id, sorted(changes), actor.id)
        return user

    async def deactivate_member(self, actor: _Actor, user_id: str) -> User:
        if UserRole(actor.role) != UserRole.OWNER:
            raise PermissionDenied("Solo un OWNER puede eliminar miembros")
        if actor.id == user_id:
            raise CannotDeleteSelf(user_id)
        user = await self.get_member(user_id)

        async def work() -> User:
            user.is_active = False
            await log_activity(
                self.db,
                actor_id=actor.id,
                action=ActivityType.USER_UPDATED,
                entity=EntityType.USER,
                entity_id=user.id,
                details={"userName": user.name, "deactivated": True},
            )
            return user

        user = await commit_or_raise(self.db, work)
        logger.info("[Team] miembro desactivado user=%s by=%s", user.id, actor.id)
        return user


__all__ = ["TeamFacade", "ALLOWED_UPDATE_FIELDS"]

# Fin del archivo backend/app/modules/auth/facades/team_facade.py
