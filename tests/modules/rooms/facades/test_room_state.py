# -*- coding: utf-8 -*-
"""
backend/tests/modules/rooms/facades/test_room_state.py

Derivación del estado de un room a partir de sus fases.

Autor: Atelier
Fecha: 12/08/2026
"""

from types import SimpleNamespace

from app.modules.rooms.enums import RoomStatus, StageStatus, StageType
from app.modules.rooms.facades.room_state import (
    all_applicable_completed,
    derive_room_status,
    first_pending_phase,
    sort_stages,
)


def _stages(**statuses):
    return [SimpleNamespace(type=t, status=s) for t, s in statuses.items()]


def test_sort_stages_uses_canonical_order():
    stages = _stages(FFE="NOT_STARTED", DESIGN_CONCEPT="NOT_STARTED", CLIENT_APPROVAL="NOT_STARTED")
    assert [s.type for s in sort_stages(stages)] == ["DESIGN_CONCEPT", "CLIENT_APPROVAL", "FFE"]


def test_all_completed_skips_not_applicable():
    stages = _stages(
        DESIGN_CONCEPT=StageStatus.COMPLETED,
        THREE_D=StageStatus.NOT_APPLICABLE,
        CLIENT_APPROVAL=StageStatus.COMPLETED,
    )
    assert all_applicable_completed(stages) is True


def test_room_without_applicable_stages_is_not_completed():
    stages = _stages(DESIGN_CONCEPT=StageStatus.NOT_APPLICABLE, FFE=StageStatus.NOT_APPLICABLE)
    assert all_applicable_completed(stages) is False
    assert derive_room_status(stages) == (RoomStatus.NOT_STARTED, None)


def test_first_pending_phase():
    stages = _stages(
        DESIGN_CONCEPT=StageStatus.COMPLETED,
        THREE_D=StageStatus.NOT_APPLICABLE,
        CLIENT_APPROVAL=StageStatus.NOT_STARTED,
        DRAWINGS=StageStatus.NOT_STARTED,
    )
    assert first_pending_phase(stages) == StageType.CLIENT_APPROVAL


def test_derive_room_status():
    assert derive_room_status(
        _stages(DESIGN_CONCEPT=StageStatus.NOT_STARTED, THREE_D=StageStatus.NOT_STARTED)
    ) == (RoomStatus.NOT_STARTED, StageType.DESIGN_CONCEPT)

    assert derive_room_status(
        _stages(DESIGN_CONCEPT=StageStatus.COMPLETED, THREE_D=StageStatus.NOT_STARTED)
    ) == (RoomStatus.IN_PROGRESS, StageType.THREE_D)

    assert derive_room_status(
        _stages(DESIGN_CONCEPT=StageStatus.COMPLETED, THREE_D=StageStatus.COMPLETED)
    ) == (RoomStatus.COMPLETED, None)

# Fin del archivo backend/tests/modules/rooms/facades/test_room_state.py
