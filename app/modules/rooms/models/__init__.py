# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/models/__init__.py
"""

from .room_models import Room, Stage

__all__ = ["Room", "Stage"]
