# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/enums/role_enum.py

Roles de los miembros del estudio y reglas de cambio de rol.

Roles: OWNER, ADMIN, DESIGNER, RENDERER, DRAFTER, FFE, VIEWER

Autor: Atelier
Fecha: 12/08/2026
"""
from enum import StrEnum


class UserRole(StrEnum):
    OWNER = "OWNER"
    ADMIN = "ADMIN"
    DESIGNER = "DESIGNER"
    RENDERER = "RENDERER"
    DRAFTER = "DRAFTER"
    FFE = "FFE"
    VIEWER = "VIEWER"


# Roles que administran el equipo
MANAGER_ROLES: frozenset[UserRole] = frozenset({UserRole.OWNER, UserRole.ADMIN})

DEFAULT_USER_ROLE = UserRole.DESIGNER


def can_change_to_role(current_role: UserRole, target_role: UserRole) -> bool:
    """
    ¿Puede un usuario con `current_role` asignar `target_role`?

    - Si alguno de los dos es OWNER, solo un OWNER puede.
    - ADMIN puede asignar cualquier otro rol.
    - El resto no puede cambiar roles.
    """
    if current_role == UserRole.OWNER or target_role == UserRole.OWNER:
        return current_role == UserRole.OWNER
    return current_role == UserRole.ADMIN


__all__ = ["UserRole", "MANAGER_ROLES", "DEFAULT_USER_ROLE", "can_change_to_role"]

# Fin del archivo backend/app/modules/auth/enums/role_enum.py
