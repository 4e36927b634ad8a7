# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/facades/room_state.py

Derivación del estado de un room a partir de sus fases (sin acceso a DB).

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from app.modules.rooms.enums import PHASE_SEQUENCE, RoomStatus, StageStatus, StageType

_PHASE_INDEX = {phase.value: i for i, phase in enumerate(PHASE_SEQUENCE)}


def sort_stages(stages: Iterable):
    """Fases en orden canónico; tipos desconocidos al final."""
    return sorted(stages, key=lambda s: _PHASE_INDEX.get(str(s.type), len(_PHASE_INDEX)))


def applicable_stages(stages: Iterable) -> list:
    return [s for s in stages if s.status != StageStatus.NOT_APPLICABLE]


def all_applicable_completed(stages: Sequence) -> bool:
    # Un room sin fases aplicables no se considera completado
    applicable = applicable_stages(stages)
    return bool(applicable) and all(s.status == StageStatus.COMPLETED for s in applicable)


def first_pending_phase(stages: Iterable) -> Optional[StageType]:
    for stage in sort_stages(applicable_stages(stages)):
        if stage.status != StageStatus.COMPLETED:
            return StageType(str(stage.type))
    return None


def derive_room_status(stages: Sequence) -> tuple[RoomStatus, Optional[StageType]]:
    """
    Estado y fase actual de un room tras una actualización masiva.

    - todas las aplicables COMPLETED → COMPLETED
    - alguna IN_PROGRESS o COMPLETED → IN_PROGRESS
    - en otro caso → NOT_STARTED
    """
    if all_applicable_completed(stages):
        return RoomStatus.COMPLETED, None
    current = first_pending_phase(stages)
    if any(s.status in (StageStatus.IN_PROGRESS, StageStatus.COMPLETED) for s in stages):
        return RoomStatus.IN_PROGRESS, current
    return RoomStatus.NOT_STARTED, current


__all__ = [
    "sort_stages",
    "applicable_stages",
    "all_applicable_completed",
    "first_pending_phase",
    "derive_room_status",
]

# Fin del archivo backend/app/modules/rooms/facades/room_state.py
