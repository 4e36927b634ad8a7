# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/facades/__init__.py

Re-exporta facades del módulo projects para facilitar imports.

Autor: Atelier
Fecha: 12/08/2026
"""

from .errors import (
    ProjectNotFound,
    InvalidStatusTransition,
    ProjectFolderMissing,
)
from .project_facade import ProjectFacade, ALLOWED_UPDATE_FIELDS
from .project_query_facade import ProjectQueryFacade

__all__ = [
    # Errors
    "ProjectNotFound",
    "InvalidStatusTransition",
    "ProjectFolderMissing",
    # Facades
    "ProjectFacade",
    "ProjectQueryFacade",
    "ALLOWED_UPDATE_FIELDS",
]

# Fin del archivo backend/app/modules/projects/facades/__init__.py
