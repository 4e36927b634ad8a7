# -*- coding: utf-8 -*-
"""
backend/app/modules/activity/enums/__init__.py
"""

from .activity_type_enum import (
    ActivityType,
    EntityType,
    ActivityCategory,
    ActivityTypeMeta,
    ACTIVITY_TYPE_META,
    FALLBACK_META,
)

__all__ = [
    "ActivityType",
    "EntityType",
    "ActivityCategory",
    "ActivityTypeMeta",
    "ACTIVITY_TYPE_META",
    "FALLBACK_META",
]
