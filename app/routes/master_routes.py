# -*- coding: utf-8 -*-
"""
backend/app/routes/master_routes.py

Router maestro de la API de Atelier.

Monta, sin prefijo global, los routers de cada módulo:
auth (login + equipo), clients, projects, rooms/stages, chat,
activity, notifications y files (Dropbox).

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

logger = logging.getLogger(__name__)

_loaded: list[str] = []  # trazabilidad/debug


def _include(target: APIRouter, router: APIRouter, name: str) -> None:
    """Incluye un router y registra trazabilidad en logs."""
    target.include_router(router)
    _loaded.append(name)
    logger.debug(
        "[Routes] router '%s' montado (router.prefix='%s')",
        name,
        getattr(router, "prefix", ""),
    )


def _tag(router: APIRouter, fallback: str) -> str:
    return str(router.tags[0]) if router.tags else fallback


def build_api_router() -> APIRouter:
    from app.modules.activity.routes import get_activity_router
    from app.modules.auth.routes import get_auth_routers
    from app.modules.chat.routes import get_chat_router
    from app.modules.clients.routes import get_clients_router
    from app.modules.files.routes import get_files_routers
    from app.modules.notifications.routes import get_notifications_router
    from app.modules.projects.routes import get_projects_router
    from app.modules.rooms.routes import get_rooms_routers

    api = APIRouter()
    _loaded.clear()

    # ─────────── AUTH / TEAM ───────────
    for r in get_auth_routers():
        _include(api, r, f"auth.{_tag(r, 'auth')}")

    # ─────────── DOMINIO ───────────
    _include(api, get_clients_router(), "clients")
    _include(api, get_projects_router(), "projects")
    for r in get_rooms_routers():
        _include(api, r, f"rooms.{_tag(r, 'rooms')}")
    _include(api, get_chat_router(), "chat")

    # ─────────── TRANSVERSALES ───────────
    _include(api, get_activity_router(), "activity")
    _include(api, get_notifications_router(), "notifications")
    for r in get_files_routers():
        _include(api, r, f"files.{_tag(r, 'files')}")

    logger.info("[Routes] %d routers montados: %s", len(_loaded), ", ".join(_loaded))
    return api


def loaded_routers() -> list[str]:
    return list(_loaded)


__all__ = ["build_api_router", "loaded_routers"]

# Fin del archivo backend/app/routes/master_routes.py
