# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/enums/__init__.py

Export central de enums del módulo de proyectos.

Autor: Atelier
Fecha: 12/08/2026
"""

from .project_status_enum import ProjectStatus, ProjectType
from .project_state_transitions import (
    VALID_STATUS_TRANSITIONS,
    is_valid_status_transition,
    get_allowed_transitions,
)

__all__ = [
    "ProjectStatus",
    "ProjectType",
    "VALID_STATUS_TRANSITIONS",
    "is_valid_status_transition",
    "get_allowed_transitions",
]
# Fin del archivo backend/app/modules/projects/enums/__init__.py
