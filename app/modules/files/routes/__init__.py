# -*- coding: utf-8 -*-
"""
backend/app/modules/files/routes/__init__.py

Ensamblador de routers del módulo Files.
"""

from fastapi import APIRouter

from .dropbox_routes import router as dropbox_router


def get_files_routers() -> list[APIRouter]:
    return [dropbox_router]


__all__ = ["get_files_routers", "dropbox_router"]

# Fin del archivo backend/app/modules/files/routes/__init__.py
