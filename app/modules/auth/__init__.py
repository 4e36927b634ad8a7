# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/__init__.py

Módulo Auth: miembros del equipo, login JWT y usuario actual.

Expone:
- enums (UserRole, can_change_to_role)
- get_current_user / require_roles en app.modules.auth.services
- get_auth_routers() en app.modules.auth.routes

Autor: Atelier
Fecha: 12/08/2026
"""

from .enums import *            # noqa: F401,F403

# Fin del archivo backend/app/modules/auth/__init__.py
