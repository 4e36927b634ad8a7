# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/models/__init__.py
"""

from .notification_models import Notification

__all__ = ["Notification"]
