# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/facades/phase_utils.py

Utilidades puras de secuencia de fases (sin acceso a DB).

Reglas:
- CLIENT_APPROVAL completada habilita DRAWINGS y FFE en paralelo.
- El avance de un room solo cuenta fases del flujo y excluye NOT_APPLICABLE.

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Protocol

from app.modules.auth.enums import UserRole
from app.modules.rooms.enums import PHASE_SEQUENCE, StageStatus, StageType


@dataclass(frozen=True)
class PhaseSequenceInfo:
    current_phase: str
    next_phase: Optional[str]
    previous_phase: Optional[str]
    is_first_phase: bool
    is_last_phase: bool
    phase_order: int


class _StageLike(Protocol):
    type: str
    status: str


# Rol por defecto que recibe cada fase al crear un room
DEFAULT_PHASE_ROLES: dict[StageType, UserRole] = {
    StageType.DESIGN_CONCEPT: UserRole.DESIGNER,
    StageType.THREE_D: UserRole.RENDERER,
    StageType.CLIENT_APPROVAL: UserRole.DESIGNER,
    StageType.DRAWINGS: UserRole.DRAFTER,
    StageType.FFE: UserRole.FFE,
}

_PHASE_DISPLAY_NAMES = {
    StageType.DESIGN_CONCEPT: "Design Concept",
    StageType.THREE_D: "3D Rendering",
    StageType.CLIENT_APPROVAL: "Client Approval",
    StageType.DRAWINGS: "Drawings",
    StageType.FFE: "FFE (Furniture, Fixtures & Equipment)",
}

_PHASE_DESCRIPTIONS = {
    StageType.DESIGN_CONCEPT: "Create mood boards, material selections, and design concepts",
    StageType.THREE_D: "Generate photorealistic 3D visualizations and renderings",
    StageType.CLIENT_APPROVAL: "Client review and approval process with presentation materials",
    StageType.DRAWINGS: "Create detailed technical drawings and construction specifications",
    StageType.FFE: "Premium furniture, fixtures, and equipment sourcing with detailed specifications",
}


def get_phase_sequence_info(phase: str) -> PhaseSequenceInfo:
    try:
        index = PHASE_SEQUENCE.index(StageType(phase))
    except ValueError:
        raise ValueError(f"Unknown phase type: {phase}") from None

    last = len(PHASE_SEQUENCE) - 1
    return PhaseSequenceInfo(
        current_phase=PHASE_SEQUENCE[index].value,
        next_phase=PHASE_SEQUENCE[index + 1].value if index < last else None,
        previous_phase=PHASE_SEQUENCE[index - 1].value if index > 0 else None,
        is_first_phase=index == 0,
        is_last_phase=index == last,
        phase_order=index + 1,
    )


def get_next_phases_to_notify(phase: str) -> list[str]:
    """Fases que se habilitan al completar `phase`."""
    if phase == StageType.CLIENT_APPROVAL:
        return [StageType.DRAWINGS.value, StageType.FFE.value]
    info = get_phase_sequence_info(phase)
    return [info.next_phase] if info.next_phase else []


def get_phase_display_name(phase: str) -> str:
    try:
        return _PHASE_DISPLAY_NAMES[StageType(phase)]
    except ValueError:
        return str(phase)


def get_phase_description(phase: str) -> str:
    try:
        return _PHASE_DESCRIPTIONS[StageType(phase)]
    except ValueError:
        return ""


def are_phase_prerequisites_completed(phase: str, statuses_by_type: Mapping[str, str]) -> bool:
    """
    ¿Puede arrancar `phase` dado el estado actual de las fases del room?

    Args:
        phase: fase a evaluar
        statuses_by_type: {stage_type: status} del room
    """
    info = get_phase_sequence_info(phase)
    if info.is_first_phase:
        return True

    if phase == StageType.CLIENT_APPROVAL:
        required = StageType.THREE_D
    elif phase in (StageType.DRAWINGS, StageType.FFE):
        required = StageType.CLIENT_APPROVAL
    else:
        required = StageType(info.previous_phase)

    return statuses_by_type.get(required.value) == StageStatus.COMPLETED


def calculate_room_completion(stages: Iterable[_StageLike]) -> int:
    """Porcentaje entero de fases completadas (sobre las aplicables)."""
    phase_values = {p.value for p in PHASE_SEQUENCE}
    counted = [
        s for s in stages
        if str(s.type) in phase_values and s.status != StageStatus.NOT_APPLICABLE
    ]
    if not counted:
        return 0
    completed = sum(1 for s in counted if s.status == StageStatus.COMPLETED)
    return round(completed / len(counted) * 100)


def format_room_display_name(name: Optional[str], room_type: str) -> str:
    if name:
        return name
    return str(room_type).replace("_", " ", 1).lower().title()


def generate_phase_transition_summary(completed_phase: str, room_name: str, project_name: str) -> str:
    next_names = [get_phase_display_name(p) for p in get_next_phases_to_notify(completed_phase)]
    summary = f"{get_phase_display_name(completed_phase)} completed for {room_name} in {project_name}."
    if next_names:
        plural = "s" if len(next_names) > 1 else ""
        summary += f" Next phase{plural}: {', '.join(next_names)}."
    else:
        summary += " This was the final phase."
    return summary


__all__ = [
    "PhaseSequenceInfo",
    "DEFAULT_PHASE_ROLES",
    "get_phase_sequence_info",
    "get_next_phases_to_notify",
    "get_phase_display_name",
    "get_phase_description",
    "are_phase_prerequisites_completed",
    "calculate_room_completion",
    "format_room_display_name",
    "generate_phase_transition_summary",
]

# Fin del archivo backend/app/modules/rooms/facades/phase_utils.py
