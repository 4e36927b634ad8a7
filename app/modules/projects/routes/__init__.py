# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/routes/__init__.py

Router principal del módulo Projects.
Compone subrouters de:
- projects_crud (CRUD y listado)
- projects_lifecycle (status y carpeta de Dropbox)

Cada subrouter declara su propio prefijo /projects.

Autor: Atelier
Fecha: 12/08/2026
"""
from fastapi import APIRouter

from .projects_crud import router as projects_crud_router
from .projects_lifecycle import router as projects_lifecycle_router


def get_projects_router() -> APIRouter:
    """
    Devuelve el router principal del módulo de proyectos (/projects).

    Los rooms de un proyecto (/projects/{id}/rooms) viven en el módulo rooms.
    """
    router = APIRouter(
        tags=["projects"],
        responses={404: {"description": "No encontrado"}},
    )
    router.include_router(projects_crud_router)
    router.include_router(projects_lifecycle_router)
    return router


# Fin del archivo backend/app/modules/projects/routes/__init__.py
