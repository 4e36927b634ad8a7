# -*- coding: utf-8 -*-
"""
backend/app/modules/chat/models/chat_models.py

Mensajes de chat por fase, menciones y reacciones.

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Index, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, TimestampMixin, new_id
from app.shared.database.transactions import now_utc


class ChatMessage(TimestampMixin, Base):
    __tablename__ = "chat_messages"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    author_id: Mapped[Optional[str]] = mapped_column(
        String(32), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    stage_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("stages.id", ondelete="CASCADE"), nullable=False
    )
    parent_message_id: Mapped[Optional[str]] = mapped_column(
        String(32), ForeignKey("chat_messages.id", ondelete="SET NULL"), nullable=True
    )
    attachments: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    is_edited: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    edited_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index("idx_chat_messages_stage_created", "stage_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<ChatMessage {self.id} stage={self.stage_id}>"


class ChatMention(Base):
    __tablename__ = "chat_mentions"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    message_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("chat_messages.id", ondelete="CASCADE"), nullable=False, index=True
    )
    mentioned_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=now_utc, server_default=func.now()
    )


class ChatMessageReaction(Base):
    __tablename__ = "chat_message_reactions"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    message_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("chat_messages.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    emoji: Mapped[str] = mapped_column(String(32), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=now_utc, server_default=func.now()
    )

    __table_args__ = (
        UniqueConstraint("message_id", "user_id", "emoji", name="uq_chat_message_reactions_message_user_emoji"),
    )


__all__ = ["ChatMessage", "ChatMention", "ChatMessageReaction"]

# Fin del archivo backend/app/modules/chat/models/chat_models.py
