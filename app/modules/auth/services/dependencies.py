# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/services/dependencies.py

Dependencias de autenticación JWT para FastAPI.

Provee:
- get_current_user: valida el Bearer token y devuelve el User activo
- require_roles: fábrica de dependencias que exige uno de los roles dados

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.enums import UserRole
from app.modules.auth.models import User
from app.shared.database.database import get_db
from app.shared.utils.security import ACCESS_TOKEN_TYPE, verify_token_type

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=True)


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=message,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    creds: HTTPAuthorizationCredentials = Depends(_bearer),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Dependencia de autenticación para endpoints protegidos.

    Raises:
        HTTPException 401: token inválido/expirado o usuario inexistente
        HTTPException 403: usuario desactivado
    """
    payload = verify_token_type(creds.credentials, ACCESS_TOKEN_TYPE)
    if not payload or not payload.get("sub"):
        raise _unauthorized("Token inválido o expirado")

    user = await db.get(User, str(payload["sub"]))
    if user is None:
        raise _unauthorized("Usuario no encontrado")
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Usuario inactivo")
    return user


def _role_of(user) -> str | None:
    role = getattr(user, "role", None)
    if role is None and isinstance(user, dict):
        role = user.get("role")
    return str(role) if role is not None else None


def require_roles(*roles: UserRole):
    """
    Dependencia que exige que el usuario autenticado tenga alguno de `roles`.

    Uso:
        @router.post("/team", dependencies=[Depends(require_roles(UserRole.OWNER, UserRole.ADMIN))])
    """
    allowed = {str(r) for r in roles}

    async def _dependency(user=Depends(get_current_user)):
        if _role_of(user) not in allowed:
            logger.info("[Auth] acceso denegado role=%s requerido=%s", _role_of(user), sorted(allowed))
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Permisos insuficientes")
        return user

    return _dependency


__all__ = ["get_current_user", "require_roles"]

# Fin del archivo backend/app/modules/auth/services/dependencies.py
