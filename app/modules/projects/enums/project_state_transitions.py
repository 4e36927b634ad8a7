# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/enums/project_state_transitions.py

Mapa de transiciones válidas para ProjectStatus.

Reglas de transición:
- DRAFT       → IN_PROGRESS | ON_HOLD | CANCELLED
- IN_PROGRESS → ON_HOLD | URGENT | COMPLETED | CANCELLED
- ON_HOLD     → IN_PROGRESS | CANCELLED
- URGENT      → IN_PROGRESS | ON_HOLD | COMPLETED | CANCELLED
- COMPLETED   → IN_PROGRESS (reapertura)
- CANCELLED   → DRAFT (reactivación)

Autor: Atelier
Fecha: 12/08/2026
"""

from typing import Dict, Set

from .project_status_enum import ProjectStatus


VALID_STATUS_TRANSITIONS: Dict[ProjectStatus, Set[ProjectStatus]] = {
    ProjectStatus.DRAFT: {
        ProjectStatus.IN_PROGRESS,
        ProjectStatus.ON_HOLD,
        ProjectStatus.CANCELLED,
    },
    ProjectStatus.IN_PROGRESS: {
        ProjectStatus.ON_HOLD,
        ProjectStatus.URGENT,
        ProjectStatus.COMPLETED,
        ProjectStatus.CANCELLED,
    },
    ProjectStatus.ON_HOLD: {
        ProjectStatus.IN_PROGRESS,
        ProjectStatus.CANCELLED,
    },
    ProjectStatus.URGENT: {
        ProjectStatus.IN_PROGRESS,
        ProjectStatus.ON_HOLD,
        ProjectStatus.COMPLETED,
        ProjectStatus.CANCELLED,
    },
    ProjectStatus.COMPLETED: {
        ProjectStatus.IN_PROGRESS,
    },
    ProjectStatus.CANCELLED: {
        ProjectStatus.DRAFT,
    },
}


def is_valid_status_transition(
    from_status: ProjectStatus,
    to_status: ProjectStatus,
) -> bool:
    """
    Valida si una transición de status es permitida.
    Un cambio al mismo status se considera válido (no-op).
    """
    if from_status == to_status:
        return True
    return to_status in VALID_STATUS_TRANSITIONS.get(from_status, set())


def get_allowed_transitions(from_status: ProjectStatus) -> Set[ProjectStatus]:
    return VALID_STATUS_TRANSITIONS.get(from_status, set())


__all__ = [
    "VALID_STATUS_TRANSITIONS",
    "is_valid_status_transition",
    "get_allowed_transitions",
]

# Fin del archivo backend/app/modules/projects/enums/project_state_transitions.py
