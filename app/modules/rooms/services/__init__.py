# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/services/__init__.py
"""

from .rooms_service import RoomsService

__all__ = ["RoomsService"]
