# -*- coding: utf-8 -*-
"""
backend/app/modules/chat/services/chat_service.py

Capa de aplicación del chat por fase.
Delegación directa a ChatFacade.
"""
from __future__ import annotations

from typing import Any, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.chat.facades import ChatFacade
from app.shared.integrations.email_sender import IEmailSender


class ChatService:
    def __init__(self, db: AsyncSession, email_sender: Optional[IEmailSender] = None):
        self.db = db
        self.facade = ChatFacade(db, email_sender=email_sender)

    async def list_messages(self, stage_id: str, *, viewer_id: Optional[str] = None):
        return await self.facade.list_messages(stage_id, viewer_id=viewer_id)

    async def post_message(
        self,
        stage_id: str,
        *,
        author,
        content: Optional[str] = None,
        mentions: Optional[Sequence[str]] = None,
        attachments: Optional[Sequence[dict[str, Any]]] = None,
        parent_message_id: Optional[str] = None,
        notify_assignee: bool = False,
    ):
        return await self.facade.post_message(
            stage_id,
            author=author,
            content=content,
            mentions=mentions,
            attachments=attachments,
            parent_message_id=parent_message_id,
            notify_assignee=notify_assignee,
        )

    async def edit_message(self, message_id: str, *, actor, content: str):
        return await self.facade.edit_message(message_id, actor=actor, content=content)

    async def delete_message(self, message_id: str, *, actor) -> None:
        await self.facade.delete_message(message_id, actor=actor)

    async def toggle_reaction(self, message_id: str, *, actor, emoji: str):
        return await self.facade.toggle_reaction(message_id, actor=actor, emoji=emoji)
