# -*- coding: utf-8 -*-
"""
backend/app/modules/chat/models/__init__.py
"""

from .chat_models import ChatMention, ChatMessage, ChatMessageReaction

__all__ = ["ChatMessage", "ChatMention", "ChatMessageReaction"]
