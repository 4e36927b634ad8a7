# -*- coding: utf-8 -*-
"""
backend/app/modules/chat/routes/__init__.py
"""

from fastapi import APIRouter

from .chat_routes import router as chat_router


def get_chat_router() -> APIRouter:
    return chat_router
