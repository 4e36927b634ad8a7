# -*- coding: utf-8 -*-
"""
backend/app/modules/chat/schemas/__init__.py
"""

from .chat_schemas import (
    ChatAttachment,
    ChatMessageCreateIn,
    ChatMessageRead,
    ChatMessageUpdateIn,
    ChatUserSummary,
    ReactionGroup,
    ReactionToggleIn,
    ReactionToggleResponse,
    ReactionUser,
)

__all__ = [
    "ChatAttachment",
    "ChatMessageCreateIn",
    "ChatMessageRead",
    "ChatMessageUpdateIn",
    "ChatUserSummary",
    "ReactionGroup",
    "ReactionToggleIn",
    "ReactionToggleResponse",
    "ReactionUser",
]
