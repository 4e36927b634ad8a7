# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/enums/room_enums.py

Enums de rooms (espacios de un proyecto) y de stages (fases de diseño).

Flujo estándar de 5 fases por room:
  DESIGN_CONCEPT → THREE_D → CLIENT_APPROVAL → DRAWINGS | FFE

Autor: Atelier
Fecha: 12/08/2026
"""
from enum import StrEnum


class RoomType(StrEnum):
    ENTRANCE = "ENTRANCE"
    FOYER = "FOYER"
    STAIRCASE = "STAIRCASE"
    LIVING_ROOM = "LIVING_ROOM"
    DINING_ROOM = "DINING_ROOM"
    KITCHEN = "KITCHEN"
    STUDY_ROOM = "STUDY_ROOM"
    OFFICE = "OFFICE"
    PLAYROOM = "PLAYROOM"
    MASTER_BEDROOM = "MASTER_BEDROOM"
    GIRLS_ROOM = "GIRLS_ROOM"
    BOYS_ROOM = "BOYS_ROOM"
    GUEST_BEDROOM = "GUEST_BEDROOM"
    POWDER_ROOM = "POWDER_ROOM"
    MASTER_BATHROOM = "MASTER_BATHROOM"
    FAMILY_BATHROOM = "FAMILY_BATHROOM"
    GUEST_BATHROOM = "GUEST_BATHROOM"
    LAUNDRY_ROOM = "LAUNDRY_ROOM"
    SUKKAH = "SUKKAH"
    BEDROOM = "BEDROOM"
    BATHROOM = "BATHROOM"
    OTHER = "OTHER"


class RoomStatus(StrEnum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    ON_HOLD = "ON_HOLD"
    COMPLETED = "COMPLETED"
    NEEDS_ATTENTION = "NEEDS_ATTENTION"


class StageType(StrEnum):
    DESIGN_CONCEPT = "DESIGN_CONCEPT"
    THREE_D = "THREE_D"
    CLIENT_APPROVAL = "CLIENT_APPROVAL"
    DRAWINGS = "DRAWINGS"
    FFE = "FFE"


class StageStatus(StrEnum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    ON_HOLD = "ON_HOLD"
    NEEDS_ATTENTION = "NEEDS_ATTENTION"
    PENDING_APPROVAL = "PENDING_APPROVAL"
    REVISION_REQUESTED = "REVISION_REQUESTED"
    NOT_APPLICABLE = "NOT_APPLICABLE"


class StageAction(StrEnum):
    """Acciones aceptadas por PATCH /stages/{id}."""
    START = "start"
    COMPLETE = "complete"
    REOPEN = "reopen"
    MARK_NOT_APPLICABLE = "mark_not_applicable"
    MARK_APPLICABLE = "mark_applicable"
    ASSIGN = "assign"


# Orden canónico de fases
PHASE_SEQUENCE: tuple[StageType, ...] = (
    StageType.DESIGN_CONCEPT,
    StageType.THREE_D,
    StageType.CLIENT_APPROVAL,
    StageType.DRAWINGS,
    StageType.FFE,
)


__all__ = [
    "RoomType",
    "RoomStatus",
    "StageType",
    "StageStatus",
    "StageAction",
    "PHASE_SEQUENCE",
]

# Fin del archivo backend/app/modules/rooms/enums/room_enums.py
