# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/schemas/__init__.py
"""

from .room_schemas import (
    RoomCreateIn,
    RoomUpdateIn,
    RoomRead,
    StageRead,
    StageActionIn,
    StageStatusUpdate,
    BulkStageUpdateIn,
    BulkStageUpdateResponse,
)

__all__ = [
    "RoomCreateIn",
    "RoomUpdateIn",
    "RoomRead",
    "StageRead",
    "StageActionIn",
    "StageStatusUpdate",
    "BulkStageUpdateIn",
    "BulkStageUpdateResponse",
]
