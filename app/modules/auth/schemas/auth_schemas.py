# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/schemas/auth_schemas.py

Esquemas de login y de lectura de usuarios.

Autor: Atelier
Fecha: 12/08/2026
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.shared.utils.base_models import UTF8SafeModel, EmailStr
from app.modules.auth.enums import UserRole


class LoginRequest(UTF8SafeModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=1024)


class UserSummary(UTF8SafeModel):
    """Forma corta usada al embeber autores, asignados y actores."""
    id: str
    name: Optional[str] = None
    email: str
    role: Optional[UserRole] = None


class UserRead(UTF8SafeModel):
    id: str
    name: Optional[str] = None
    email: str
    role: UserRole
    email_notifications_enabled: bool = True
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class LoginResponse(UTF8SafeModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead


__all__ = ["LoginRequest", "UserSummary", "UserRead", "LoginResponse"]
