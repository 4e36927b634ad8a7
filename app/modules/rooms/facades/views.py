# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/facades/views.py

Serialización de rooms y fases a dicts de lectura (con progreso y nombre visible).

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

from typing import Any, Iterable

from app.modules.rooms.facades.phase_utils import calculate_room_completion, format_room_display_name
from app.modules.rooms.facades.room_state import sort_stages

_STAGE_FIELDS = (
    "id",
    "room_id",
    "type",
    "status",
    "assigned_to",
    "due_date",
    "start_date",
    "started_at",
    "completed_at",
    "completed_by_id",
    "created_at",
    "updated_at",
)

_ROOM_FIELDS = (
    "id",
    "project_id",
    "type",
    "name",
    "order",
    "status",
    "current_stage",
    "start_date",
    "due_date",
    "created_at",
    "updated_at",
)


def stage_view(stage) -> dict[str, Any]:
    return {field: getattr(stage, field, None) for field in _STAGE_FIELDS}


def room_view(room, stages: Iterable, *, include_stages: bool = True) -> dict[str, Any]:
    ordered = sort_stages(stages)
    data = {field: getattr(room, field, None) for field in _ROOM_FIELDS}
    data["display_name"] = format_room_display_name(room.name, room.type)
    data["progress"] = calculate_room_completion(ordered)
    if include_stages:
        data["stages"] = [stage_view(s) for s in ordered]
    return data


__all__ = ["stage_view", "room_view"]
