# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/models/user_models.py

Modelo de miembros del equipo (usuarios internos del estudio).

- email único; las búsquedas por email son case-insensitive
- baja lógica con is_active=False (las referencias en stages/chat se conservan)

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, TimestampMixin, as_str_enum, new_id
from app.modules.auth.enums import UserRole, DEFAULT_USER_ROLE


class User(TimestampMixin, Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False, index=True)
    password_hash: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    role: Mapped[UserRole] = mapped_column(
        as_str_enum(UserRole, name="user_role"),
        nullable=False,
        default=DEFAULT_USER_ROLE,
        index=True,
    )

    email_notifications_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    @property
    def display_name(self) -> str:
        return self.name or self.email

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email} role={self.role}>"


__all__ = ["User"]

# Fin del archivo backend/app/modules/auth/models/user_models.py
