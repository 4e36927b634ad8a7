# -*- coding: utf-8 -*-
"""
backend/app/modules/chat/services/__init__.py
"""

from .chat_service import ChatService

__all__ = ["ChatService"]
