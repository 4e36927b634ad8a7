# -*- coding: utf-8 -*-
"""
backend/app/modules/activity/services/__init__.py
"""

from .queries import ActivityQueryService

__all__ = ["ActivityQueryService"]
