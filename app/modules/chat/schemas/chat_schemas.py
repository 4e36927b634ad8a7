# -*- coding: utf-8 -*-
"""
backend/app/modules/chat/schemas/chat_schemas.py

Esquemas del chat por fase (mensajes, menciones y reacciones).

Autor: Atelier
Fecha: 12/08/2026
"""

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import Field

from app.shared.utils.base_models import UTF8SafeModel


class ChatAttachment(UTF8SafeModel):
    name: str
    url: Optional[str] = None
    path: Optional[str] = None
    type: Optional[str] = None
    size: Optional[int] = None


class ChatUserSummary(UTF8SafeModel):
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None


class ReactionUser(UTF8SafeModel):
    id: str
    name: Optional[str] = None


class ReactionGroup(UTF8SafeModel):
    emoji: str
    count: int
    users: list[ReactionUser] = Field(default_factory=list)
    user_has_reacted: bool = False


class ChatMessageCreateIn(UTF8SafeModel):
    content: Optional[str] = None
    mentions: list[str] = Field(default_factory=list)
    attachments: list[ChatAttachment] = Field(default_factory=list)
    parent_message_id: Optional[str] = None
    notify_assignee: bool = False


class ChatMessageUpdateIn(UTF8SafeModel):
    content: str


class ReactionToggleIn(UTF8SafeModel):
    emoji: str = Field(min_length=1, max_length=32)


class ChatMessageRead(UTF8SafeModel):
    id: str
    stage_id: str
    content: str
    author: Optional[ChatUserSummary] = None
    parent_message_id: Optional[str] = None
    attachments: list[dict[str, Any]] = Field(default_factory=list)
    is_edited: bool = False
    edited_at: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    mentions: list[ChatUserSummary] = Field(default_factory=list)
    reactions: list[ReactionGroup] = Field(default_factory=list)


class ReactionToggleResponse(UTF8SafeModel):
    action: Literal["added", "removed"]
    reactions: list[ReactionGroup]


__all__ = [
    "ChatAttachment",
    "ChatUserSummary",
    "ReactionUser",
    "ReactionGroup",
    "ChatMessageCreateIn",
    "ChatMessageUpdateIn",
    "ReactionToggleIn",
    "ChatMessageRead",
    "ReactionToggleResponse",
]

# Fin del archivo backend/app/modules/chat/schemas/chat_schemas.py
