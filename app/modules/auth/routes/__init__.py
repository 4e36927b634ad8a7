# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/routes/__init__.py

Ensambla los routers de sesión y de equipo del módulo Auth.

Autor: Atelier
Fecha: 12/08/2026
"""

from fastapi import APIRouter

from .auth_routes import router as auth_router
from .team_routes import router as team_router


def get_auth_routers() -> list[APIRouter]:
    """Devuelve todos los routers listos para montar."""
    return [auth_router, team_router]

# Fin del archivo backend/app/modules/auth/routes/__init__.py
