# -*- coding: utf-8 -*-
"""
backend/app/modules/activity/schemas/__init__.py
"""

from .activity_schemas import ActivityRead, ActivityListResponse, ActivityTypeRead, ActivityCategoryRead

__all__ = ["ActivityRead", "ActivityListResponse", "ActivityTypeRead", "ActivityCategoryRead"]
