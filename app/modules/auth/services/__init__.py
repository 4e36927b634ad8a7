# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/services/__init__.py

Punto de entrada del paquete services de Auth.
Expone las dependencias que usan las rutas de todos los módulos.

Autor: Atelier
Fecha: 12/08/2026
"""

from .dependencies import get_current_user, require_roles
from .auth_service import AuthService, TeamService

__all__ = [
    "get_current_user",
    "require_roles",
    "AuthService",
    "TeamService",
]
# Fin del archivo
