# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/enums/__init__.py

Export central de enums del módulo Auth.

Autor: Atelier
Fecha: 12/08/2026
"""

from .role_enum import UserRole, MANAGER_ROLES, DEFAULT_USER_ROLE, can_change_to_role

__all__ = ["UserRole", "MANAGER_ROLES", "DEFAULT_USER_ROLE", "can_change_to_role"]
