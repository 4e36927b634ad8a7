# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/routes/__init__.py
"""

from typing import List

from fastapi import APIRouter

from .rooms_routes import router as rooms_router
from .stages_routes import router as stages_router


def get_rooms_routers() -> List[APIRouter]:
    return [rooms_router, stages_router]
