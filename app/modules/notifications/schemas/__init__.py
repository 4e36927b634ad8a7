# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/schemas/__init__.py
"""

from .notification_schemas import MarkAllReadResponse, NotificationListResponse, NotificationRead

__all__ = ["NotificationRead", "NotificationListResponse", "MarkAllReadResponse"]
