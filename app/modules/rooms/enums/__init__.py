# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/enums/__init__.py
"""

from .room_enums import (
    RoomType,
    RoomStatus,
    StageType,
    StageStatus,
    StageAction,
    PHASE_SEQUENCE,
)

__all__ = [
    "RoomType",
    "RoomStatus",
    "StageType",
    "StageStatus",
    "StageAction",
    "PHASE_SEQUENCE",
]
