# -*- coding: utf-8 -*-
"""
backend/app/modules/chat/facades/__init__.py
"""

from .errors import ChatPermissionDenied, InvalidMessage, MessageNotFound, StageNotFound
from .chat_facade import PREVIEW_LENGTH, ChatFacade, group_reactions, message_preview

__all__ = [
    "ChatPermissionDenied",
    "InvalidMessage",
    "MessageNotFound",
    "StageNotFound",
    "ChatFacade",
    "group_reactions",
    "message_preview",
    "PREVIEW_LENGTH",
]
