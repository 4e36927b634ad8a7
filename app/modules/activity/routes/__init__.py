# -*- coding: utf-8 -*-
"""
backend/app/modules/activity/routes/__init__.py
"""

from fastapi import APIRouter

from .activity_routes import router as activity_router


def get_activity_router() -> APIRouter:
    return activity_router
