# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/schemas/__init__.py

Schemas Pydantic del módulo de proyectos.

Autor: Atelier
Fecha: 12/08/2026
"""

from .project_schemas import (
    ProjectCreateIn,
    ProjectUpdateIn,
    ProjectStatusIn,
    ProjectRead,
    ProjectListResponse,
    ProjectDetailRead,
)

__all__ = [
    "ProjectCreateIn",
    "ProjectUpdateIn",
    "ProjectStatusIn",
    "ProjectRead",
    "ProjectListResponse",
    "ProjectDetailRead",
]
