# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/services/__init__.py
"""

from .notification_service import NotificationService

__all__ = ["NotificationService"]
