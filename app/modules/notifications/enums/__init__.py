# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/enums/__init__.py
"""

from .notification_type_enum import NotificationType, RelatedType

__all__ = ["NotificationType", "RelatedType"]
