# -*- coding: utf-8 -*-
"""
backend/app/main.py

Punto de entrada principal del backend de Atelier.

- Carga .env antes de leer configuración (python-dotenv)
- Logging vía setup_logging (plain/pretty/json)
- Lifespan: create_all en dev/test, scheduler con recordatorios de vencimiento
- Middlewares: JSONExceptionMiddleware, RequestLoggingMiddleware, Prometheus, CORS
- Routers: /health + módulos (app.routes.get_api_router)

Autor: Atelier
Fecha: 12/08/2026
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de cualquier import que lea settings
# En PROD: override=False para respetar variables del entorno
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_PYTHON_ENV = os.getenv("PYTHON_ENV", "development").strip().lower()
load_dotenv(dotenv_path=_ENV_PATH, override=_PYTHON_ENV != "production")

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from app.routes import get_api_router
from app.observability.prom import setup_observability
from app.shared.config import get_settings, setup_logging
from app.shared.middleware import JSONExceptionMiddleware, RequestLoggingMiddleware
from app.shared.utils.json_response import UTF8JSONResponse, json_response_utf8

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    settings = get_settings()

    if settings.is_dev or settings.is_test or settings.db_create_all:
        from app.shared.database.database import create_all_tables

        try:
            await create_all_tables()
        except Exception as e:
            logger.error("❌ No se pudieron crear tablas: %s", e)

    scheduler = None
    if settings.scheduler_enabled:
        from app.shared.scheduler import get_scheduler
        from app.shared.scheduler.jobs import register_due_date_reminder_job

        try:
            scheduler = get_scheduler()
            register_due_date_reminder_job(scheduler, settings)
            scheduler.start()
            logger.info("⏰ Scheduler iniciado con jobs programados")
        except Exception as e:
            logger.warning("⚠️ No se pudo iniciar scheduler: %s", e)
            scheduler = None
    else:
        logger.info("⏰ Scheduler deshabilitado (SCHEDULER_ENABLED=false)")

    logger.info("🟢 Backend de %s iniciado (env=%s)", settings.app_name, settings.python_env)
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        if scheduler is not None:
            try:
                scheduler.shutdown(wait=False)
                logger.info("⏰ Scheduler detenido")
            except Exception as e:
                logger.warning("⚠️ Error deteniendo scheduler: %s", e)
        logger.info("🔴 Backend de %s apagado.", settings.app_name)


openapi_tags = [
    {"name": "auth", "description": "Login y usuario actual"},
    {"name": "team", "description": "Miembros del equipo y roles"},
    {"name": "clients", "description": "Clientes del estudio"},
    {"name": "projects", "description": "Proyectos y ciclo de vida"},
    {"name": "rooms", "description": "Espacios de cada proyecto"},
    {"name": "stages", "description": "Fases del flujo de diseño"},
    {"name": "chat", "description": "Chat del equipo por fase"},
    {"name": "activity", "description": "Registro de actividad"},
    {"name": "notifications", "description": "Bandeja de notificaciones"},
    {"name": "files", "description": "Archivos en Dropbox"},
]


def _configure_cors(app_instance: FastAPI, settings) -> dict:
    """
    Configura CORS. "*" implica allow_credentials=False (inválido con credenciales).
    """
    origins = settings.get_cors_origins()
    is_wildcard_only = origins == ["*"]
    cors_config = {
        "allow_origins": origins,
        "allow_credentials": not is_wildcard_only,
        "allow_methods": ["*"] if is_wildcard_only else ["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        "allow_headers": ["*"],
        "expose_headers": ["X-Request-ID"],
        "max_age": 600,
    }
    if settings.is_prod and is_wildcard_only:
        logger.warning("⚠️ CORS WILDCARD en producción: configura CORS_ORIGINS con orígenes explícitos")
    app_instance.add_middleware(CORSMiddleware, **cors_config)
    logger.info("🌐 CORS habilitado para %s", origins)
    return cors_config


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="API de gestión de proyectos de diseño de interiores",
        version=settings.app_version,
        lifespan=lifespan,
        openapi_tags=openapi_tags,
        default_response_class=UTF8JSONResponse,
    )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """HTTPException con charset UTF-8 (acentos en detail)."""
        return json_response_utf8(
            {"detail": exc.detail},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    app.include_router(get_api_router())

    # El orden real de ejecución es inverso al registro:
    # CORS queda outermost y JSONExceptionMiddleware envuelve al resto.
    app.add_middleware(RequestLoggingMiddleware)
    setup_observability(app, http_metrics=settings.http_metrics_enabled)
    app.add_middleware(JSONExceptionMiddleware)
    _configure_cors(app, settings)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.app_host,
        port=int(settings.app_port),
        reload=settings.is_dev,
    )

# Fin del archivo backend/app/main.py
