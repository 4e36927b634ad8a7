# -*- coding: utf-8 -*-
"""
backend/app/routes/health_routes.py

Health checks del backend de Atelier:
- GET /health     estado básico (sin tocar la base de datos)
- GET /health/db  conectividad a la base de datos (503 si no responde)

Autor: Atelier
Fecha: 12/08/2026
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.shared.config import get_settings
from app.shared.database.database import check_database_health

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health check del backend")
async def health_check() -> dict:
    settings = get_settings()
    return {
        "status": "ok",
        "app": settings.app_name,
        "version": settings.app_version,
        "env": settings.python_env,
    }


@router.get("/health/db", summary="Health check de la base de datos")
async def health_db():
    db_ok = await check_database_health(timeout_s=2.0)
    if not db_ok:
        return JSONResponse(status_code=503, content={"database": "unavailable"})
    return {"database": "ok"}

# Fin del archivo backend/app/routes/health_routes.py
