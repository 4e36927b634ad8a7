# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/routes/__init__.py
"""

from fastapi import APIRouter

from .notification_routes import router as notifications_router


def get_notifications_router() -> APIRouter:
    return notifications_router
