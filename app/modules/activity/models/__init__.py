# -*- coding: utf-8 -*-
"""
backend/app/modules/activity/models/__init__.py
"""

from .activity_log_models import ActivityLog

__all__ = ["ActivityLog"]
