# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/facades/auth_facade.py

Fachada de login: valida credenciales, emite el access token y registra
la actividad LOGIN del usuario.

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.activity.enums import ActivityType, EntityType
from app.modules.activity.facades import log_activity
from app.modules.auth.facades.errors import InvalidCredentials
from app.modules.auth.models import User
from app.shared.database.transactions import commit_or_raise
from app.shared.utils.security import create_access_token, verify_password

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    """Búsqueda case-insensitive por email."""
    result = await db.execute(select(User).where(func.lower(User.email) == email.strip().lower()))
    return result.scalars().first()


async def get_user_by_id(db: AsyncSession, user_id: str) -> Optional[User]:
    return await db.get(User, user_id)


class AuthFacade:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def authenticate(
        self,
        email: str,
        password: str,
        *,
        ip_address: Optional[str] = None,
    ) -> tuple[str, User]:
        """
        Valida credenciales y devuelve (access_token, user).

        Raises:
            InvalidCredentials: usuario inexistente, contraseña incorrecta o usuario inactivo
        """
        user = await get_user_by_email(self.db, email)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("[Auth] login fallido email=%s", email)
            raise InvalidCredentials()
        if not user.is_active:
            logger.info("[Auth] login rechazado (inactivo) user=%s", user.id)
            raise InvalidCredentials("Usuario inactivo")

        user_id, role = user.id, user.role
        token = create_access_token({"sub": user_id, "role": str(role)})

        async def work():
            await log_activity(
                self.db,
                actor_id=user.id,
                action=ActivityType.LOGIN,
                entity=EntityType.USER,
                entity_id=user.id,
                details={"userName": user.name, "email": user.email},
                ip_address=ip_address,
            )

        try:
            await commit_or_raise(self.db, work)
        except Exception:
            logger.warning("[Auth] no se pudo registrar LOGIN user=%s", user_id, exc_info=True)
            # El rollback expira la instancia
            await self.db.refresh(user)

        logger.info("[Auth] login ok user=%s role=%s", user_id, role)
        return token, user


__all__ = ["AuthFacade", "get_user_by_email", "get_user_by_id"]

# Fin del archivo backend/app/modules/auth/facades/auth_facade.py
