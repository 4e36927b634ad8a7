# -*- coding: utf-8 -*-
"""
backend/app/routes/__init__.py

Ensamblador principal de ruteadores de la API de Atelier.

Responsabilidades:
- Incluir el router de health (/health, /health/db).
- Incluir los routers de módulos definidos en master_routes.py.

Autor: Atelier
Fecha: 12/08/2026
"""

from fastapi import APIRouter

from .health_routes import router as health_router
from .master_routes import build_api_router


def get_api_router() -> APIRouter:
    router = APIRouter()
    router.include_router(health_router)
    router.include_router(build_api_router())
    return router


__all__ = ["get_api_router", "health_router"]

# Fin del archivo backend/app/routes/__init__.py
