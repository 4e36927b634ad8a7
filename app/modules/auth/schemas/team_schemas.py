# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/schemas/team_schemas.py

Esquemas de alta y edición de miembros del equipo.

Autor: Atelier
Fecha: 12/08/2026
"""

from typing import Optional

from pydantic import Field

from app.shared.utils.base_models import UTF8SafeModel, EmailStr
from app.modules.auth.enums import UserRole, DEFAULT_USER_ROLE


class TeamMemberCreate(UTF8SafeModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=1024)
    role: UserRole = DEFAULT_USER_ROLE
    email_notifications_enabled: bool = True


class TeamMemberUpdate(UTF8SafeModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None
    email_notifications_enabled: Optional[bool] = None


class MessageResponse(UTF8SafeModel):
    message: str


__all__ = ["TeamMemberCreate", "TeamMemberUpdate", "MessageResponse"]
