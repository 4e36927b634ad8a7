# -*- coding: utf-8 -*-
"""
Servicios in-memory para pruebas de rutas del módulo Auth.
No tocan DB ni facades; reproducen las reglas que las rutas traducen a HTTP.
Autor: Atelier
Fecha: 12/08/2026
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any, Dict, List, Optional
from uuid import uuid4

from app.modules.auth.enums import UserRole, can_change_to_role
from app.modules.auth.facades.errors import (
    CannotDeleteSelf,
    EmailAlreadyExists,
    InvalidCredentials,
    PermissionDenied,
    UserNotFound,
)


def make_user(**overrides) -> SimpleNamespace:
    now = datetime.now(timezone.utc)
    data = {
        "id": uuid4().hex,
        "name": "Test User",
        "email": "test@example.com",
        "role": UserRole.DESIGNER,
        "email_notifications_enabled": True,
        "is_active": True,
        "password": "secret-pass",
        "created_at": now,
        "updated_at": now,
    }
    data.update(overrides)
    return SimpleNamespace(**data)


class InMemoryTeamService:
    """Implementa solo lo que las rutas usan en tests."""

    def __init__(self, users: Optional[List[SimpleNamespace]] = None):
        self.users: Dict[str, SimpleNamespace] = {u.id: u for u in (users or [])}

    async def list_members(self, role: Optional[UserRole] = None):
        items = [u for u in self.users.values() if u.is_active and (role is None or u.role == role)]
        return sorted(items, key=lambda u: (u.name or u.email))

    async def get_member(self, user_id: str):
        if user_id not in self.users:
            raise UserNotFound(user_id)
        return self.users[user_id]

    async def create_member(self, actor, **data: Any):
        if not can_change_to_role(UserRole(actor.role), data["role"]):
            raise PermissionDenied("Solo un OWNER puede crear otro OWNER")
        email = data["email"].lower()
        if any(u.email == email for u in self.users.values()):
            raise EmailAlreadyExists(email)
        user = make_user(
            name=data["name"],
            email=email,
            role=data["role"],
            email_notifications_enabled=data.get("email_notifications_enabled", True),
            password=data["password"],
        )
        self.users[user.id] = user
        return user

    async def update_member(self, actor, user_id: str, changes: Dict[str, Any]):
        user = await self.get_member(user_id)
        new_role = changes.get("role")
        if new_role is not None and new_role != user.role:
            if user.role == UserRole.OWNER and actor.role != UserRole.OWNER:
                raise PermissionDenied("Un ADMIN no puede modificar el rol de un OWNER")
            if not can_change_to_role(UserRole(actor.role), UserRole(new_role)):
                raise PermissionDenied("No tienes permisos para asignar ese rol")
        email = changes.get("email")
        if email and any(u.email == email.lower() and u.id != user_id for u in self.users.values()):
            raise EmailAlreadyExists(email)
        for k, v in changes.items():
            if v is not None:
                setattr(user, k, v.lower() if k == "email" else v)
        return user

    async def deactivate_member(self, actor, user_id: str):
        if actor.role != UserRole.OWNER:
            raise PermissionDenied("Solo un OWNER puede eliminar miembros")
        if actor.id == user_id:
            raise CannotDeleteSelf(user_id)
        user = await self.get_member(user_id)
        user.is_active = False
        return user


class InMemoryAuthService:
    def __init__(self, users: Optional[List[SimpleNamespace]] = None):
        self.users = users or []
        self.logins: List[Dict[str, Any]] = []

    async def login(self, *, email: str, password: str, ip_address: Optional[str] = None):
        self.logins.append({"email": email, "ip_address": ip_address})
        for u in self.users:
            if u.email == email.lower() and u.password == password and u.is_active:
                return f"token-{u.id}", u
        raise InvalidCredentials()
