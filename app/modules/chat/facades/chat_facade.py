# -*- coding: utf-8 -*-
"""
backend/app/modules/chat/facades/chat_facade.py

Facade del chat por fase.

Reglas de dominio:
1. Un mensaje necesita contenido (sin espacios) o al menos un adjunto
2. El mensaje padre debe existir, ser de la misma fase y no estar borrado
3. Menciones: solo usuarios activos, sin duplicados; nunca se notifica al autor
4. MENTION in-app + email opcional por mención; CHAT_MESSAGE al responsable
   de la fase si notify_assignee y no fue mencionado ni es el autor
5. Solo el autor edita; autor, OWNER o ADMIN borran (borrado lógico)
6. Reacciones en toggle; agregar avisa al autor del mensaje

Las notificaciones viajan en la misma transacción que el mensaje; los
emails salen después del commit y sus fallos solo se registran.

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Any, Iterable, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.activity.enums import ActivityType
from app.modules.activity.facades import log_chat_activity
from app.modules.auth.enums import MANAGER_ROLES
from app.modules.auth.models import User
from app.modules.chat.facades.errors import (
    ChatPermissionDenied,
    InvalidMessage,
    MessageNotFound,
    StageNotFound,
)
from app.modules.chat.models import ChatMention, ChatMessage, ChatMessageReaction
from app.modules.notifications.enums import NotificationType, RelatedType
from app.modules.notifications.facades import create_notification
from app.modules.projects.models import Project
from app.modules.rooms.facades.phase_utils import format_room_display_name, get_phase_display_name
from app.modules.rooms.models import Room, Stage
from app.observability.prom import CHAT_MESSAGES
from app.shared.database.transactions import commit_or_raise, now_utc
from app.shared.integrations.email_sender import IEmailSender, get_email_sender

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 100


def message_preview(content: str, length: int = PREVIEW_LENGTH) -> str:
    return content[:length] + ("..." if len(content) > length else "")


def _user_summary(user: Optional[User]) -> Optional[dict[str, Any]]:
    if user is None:
        return None
    return {"id": user.id, "name": user.name, "email": user.email, "role": user.role}


def _display(user) -> str:
    return getattr(user, "name", None) or getattr(user, "email", None) or "Someone"


def group_reactions(rows: Iterable[tuple[str, str, Optional[str]]], viewer_id: Optional[str]) -> list[dict[str, Any]]:
    """
    Agrupa reacciones por emoji conservando el orden de aparición.

    Args:
        rows: (emoji, user_id, user_name)
        viewer_id: usuario que consulta (para user_has_reacted)
    """
    grouped: "OrderedDict[str, dict[str, Any]]" = OrderedDict()
    for emoji, user_id, user_name in rows:
        entry = grouped.setdefault(
            emoji, {"emoji": emoji, "count": 0, "users": [], "user_has_reacted": False}
        )
        entry["count"] += 1
        entry["users"].append({"id": user_id, "name": user_name})
        if user_id == viewer_id:
            entry["user_has_reacted"] = True
    return list(grouped.values())


class _StageContext:
    """Nombres visibles de la fase para textos de notificación y email."""

    def __init__(self, stage: Stage, room: Optional[Room], project: Optional[Project]):
        self.stage = stage
        self.stage_name = get_phase_display_name(str(stage.type))
        self.room_name = format_room_display_name(room.name, room.type) if room else "room"
        self.project_name = project.name if project else "project"
        self.project_id = project.id if project else None
        self.room_id = room.id if room else None

    @property
    def label(self) -> str:
        return f"{self.stage_name} - {self.room_name} ({self.project_name})"

    def link(self, frontend_url: str) -> str:
        return f"{frontend_url.rstrip('/')}/projects/{self.project_id}/rooms/{self.room_id}?stage={self.stage.id}"


class ChatFacade:
    def __init__(self, db: AsyncSession, email_sender: Optional[IEmailSender] = None):
        self.db = db
        self._email_sender = email_sender

    # ===== HELPERS =====

    def _sender(self) -> IEmailSender:
        if self._email_sender is None:
            self._email_sender = get_email_sender()
        return self._email_sender

    async def _stage(self, stage_id: str) -> Stage:
        stage = await self.db.get(Stage, stage_id)
        if stage is None:
            raise StageNotFound(stage_id)
        return stage

    async def _stage_context(self, stage: Stage) -> _StageContext:
        room = await self.db.get(Room, stage.room_id)
        project = await self.db.get(Project, room.project_id) if room else None
        return _StageContext(stage, room, project)

    async def _message(self, message_id: str) -> ChatMessage:
        message = await self.db.get(ChatMessage, message_id)
        if message is None:
            raise MessageNotFound(message_id)
        return message

    async def _reactions_for(self, message_ids: Sequence[str], viewer_id: Optional[str]) -> dict[str, list]:
        if not message_ids:
            return {}
        rows = (
            await self.db.execute(
                select(
                    ChatMessageReaction.message_id,
                    ChatMessageReaction.emoji,
                    ChatMessageReaction.user_id,
                    User.name,
                )
                .outerjoin(User, User.id == ChatMessageReaction.user_id)
                .where(ChatMessageReaction.message_id.in_(message_ids))
                .order_by(ChatMessageReaction.created_at.asc(), ChatMessageReaction.id.asc())
            )
        ).all()
        by_message: dict[str, list] = {}
        for message_id, emoji, user_id, name in rows:
            by_message.setdefault(message_id, []).append((emoji, user_id, name))
        return {mid: group_reactions(items, viewer_id) for mid, items in by_message.items()}

    async def _mentions_for(self, message_ids: Sequence[str]) -> dict[str, list]:
        if not message_ids:
            return {}
        rows = (
            await self.db.execute(
                select(ChatMention.message_id, User)
                .join(User, User.id == ChatMention.mentioned_id)
                .where(ChatMention.message_id.in_(message_ids))
                .order_by(ChatMention.created_at.asc(), ChatMention.id.asc())
            )
        ).all()
        by_message: dict[str, list] = {}
        for message_id, user in rows:
            by_message.setdefault(message_id, []).append(_user_summary(user))
        return by_message

    async def _views(self, messages: Sequence[ChatMessage], viewer_id: Optional[str]) -> list[dict[str, Any]]:
        ids = [m.id for m in messages]
        author_ids = {m.author_id for m in messages if m.author_id}
        authors = {}
        if author_ids:
            rows = (await self.db.execute(select(User).where(User.id.in_(author_ids)))).scalars().all()
            authors = {u.id: u for u in rows}
        mentions = await self._mentions_for(ids)
        reactions = await self._reactions_for(ids, viewer_id)
        return [
            {
                "id": m.id,
                "stage_id": m.stage_id,
                "content": m.content,
                "author": _user_summary(authors.get(m.author_id)),
                "parent_message_id": m.parent_message_id,
                "attachments": list(m.attachments or []),
                "is_edited": m.is_edited,
                "edited_at": m.edited_at,
                "created_at": m.created_at,
                "updated_at": m.updated_at,
                "mentions": mentions.get(m.id, []),
                "reactions": reactions.get(m.id, []),
            }
            for m in messages
        ]

    # ===== LECTURA =====

    async def list_messages(self, stage_id: str, *, viewer_id: Optional[str] = None) -> list[dict[str, Any]]:
        await self._stage(stage_id)
        messages = (
            await self.db.execute(
                select(ChatMessage)
                .where(ChatMessage.stage_id == stage_id, ChatMessage.is_deleted.is_(False))
                .order_by(ChatMessage.created_at.asc(), ChatMessage.id.asc())
            )
        ).scalars().all()
        return await self._views(messages, viewer_id)

    # ===== ALTA =====

    async def post_message(
        self,
        stage_id: str,
        *,
        author: User,
        content: Optional[str] = None,
        mentions: Optional[Sequence[str]] = None,
        attachments: Optional[Sequence[dict[str, Any]]] = None,
        parent_message_id: Optional[str] = None,
        notify_assignee: bool = False,
        frontend_url: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Publica un mensaje en la fase y dispara menciones/avisos.

        Raises:
            InvalidMessage: sin contenido ni adjuntos, o padre inválido
            StageNotFound: la fase no existe
        """
        text = (content or "").strip()
        files = list(attachments or [])
        if not text and not files:
            raise InvalidMessage("El mensaje necesita contenido o un adjunto")

        stage = await self._stage(stage_id)
        if parent_message_id:
            parent = await self.db.get(ChatMessage, parent_message_id)
            if parent is None or parent.stage_id != stage_id or parent.is_deleted:
                raise InvalidMessage("Mensaje padre inválido")

        ctx = await self._stage_context(stage)
        if frontend_url is None:
            from app.shared.config import get_settings

            frontend_url = get_settings().frontend_url
        author_id = author.id
        author_name = _display(author)

        requested = list(OrderedDict.fromkeys(m for m in (mentions or []) if m))
        mentioned: list[User] = []
        if requested:
            rows = (
                await self.db.execute(select(User).where(User.id.in_(requested), User.is_active.is_(True)))
            ).scalars().all()
            by_id = {u.id: u for u in rows}
            mentioned = [by_id[uid] for uid in requested if uid in by_id]
        to_notify = [u for u in mentioned if u.id != author_id]

        preview = message_preview(text)

        async def work() -> ChatMessage:
            message = ChatMessage(
                content=text,
                author_id=author_id,
                stage_id=stage_id,
                parent_message_id=parent_message_id,
                attachments=files,
            )
            self.db.add(message)
            await self.db.flush()

            for user in mentioned:
                self.db.add(ChatMention(message_id=message.id, mentioned_id=user.id))

            for user in to_notify:
                await create_notification(
                    self.db,
                    user_id=user.id,
                    type=NotificationType.MENTION,
                    title=f"{author_name} mentioned you",
                    message=f"You were mentioned in {ctx.label}: {preview or '(Attachment)'}",
                    related_id=stage_id,
                    related_type=RelatedType.STAGE,
                )

            mentioned_ids = {u.id for u in mentioned}
            if (
                notify_assignee
                and stage.assigned_to
                and stage.assigned_to != author_id
                and stage.assigned_to not in mentioned_ids
            ):
                await create_notification(
                    self.db,
                    user_id=stage.assigned_to,
                    type=NotificationType.CHAT_MESSAGE,
                    title=f"New message from {author_name}",
                    message=f"{author_name} sent a message in {ctx.label}: {preview or '(Attachment)'}",
                    related_id=stage_id,
                    related_type=RelatedType.STAGE,
                )

            await log_chat_activity(
                self.db,
                actor_id=author_id,
                action=ActivityType.CHAT_MESSAGE_SENT,
                message_id=message.id,
                stageId=stage_id,
                stageName=str(stage.type),
                roomId=ctx.room_id,
                roomName=ctx.room_name,
                projectId=ctx.project_id,
                projectName=ctx.project_name,
                messagePreview=text[:PREVIEW_LENGTH],
            )
            for user in mentioned:
                await log_chat_activity(
                    self.db,
                    actor_id=author_id,
                    action=ActivityType.CHAT_MENTION,
                    message_id=message.id,
                    stageId=stage_id,
                    stageName=str(stage.type),
                    roomId=ctx.room_id,
                    roomName=ctx.room_name,
                    projectId=ctx.project_id,
                    projectName=ctx.project_name,
                    mentionedUserId=user.id,
                    mentionedUserName=_display(user),
                )
            return message

        message = await commit_or_raise(self.db, work)
        CHAT_MESSAGES.inc()
        logger.info(
            "[Chat] mensaje %s en stage=%s autor=%s menciones=%d",
            message.id, stage_id, author_id, len(mentioned),
        )

        await self._send_mention_emails(to_notify, author_name, ctx, text, frontend_url)
        views = await self._views([message], author_id)
        return views[0]

    async def _send_mention_emails(
        self,
        users: Sequence[User],
        author_name: str,
        ctx: _StageContext,
        text: str,
        frontend_url: str,
    ) -> int:
        recipients = [u for u in users if u.email and u.email_notifications_enabled]
        if not recipients:
            return 0
        sent = 0
        link = ctx.link(frontend_url)
        for user in recipients:
            try:
                await self._sender().send_mention_email(
                    to_email=user.email,
                    to_name=user.name or user.email,
                    author_name=author_name,
                    stage_label=ctx.label,
                    message_preview=text or "(Attachment)",
                    link=link,
                )
                sent += 1
            except Exception as e:
                logger.warning("[Chat] email de mención a %s falló: %s", user.email, e)
        return sent

    # ===== EDICIÓN / BORRADO =====

    async def edit_message(self, message_id: str, *, actor: User, content: str) -> dict[str, Any]:
        message = await self._message(message_id)
        if message.is_deleted:
            raise InvalidMessage("No se puede editar un mensaje borrado")
        if message.author_id != actor.id:
            raise ChatPermissionDenied("Solo el autor puede editar el mensaje")
        text = (content or "").strip()
        if not text and not message.attachments:
            raise InvalidMessage("El mensaje necesita contenido o un adjunto")
        actor_id = actor.id

        async def work() -> ChatMessage:
            message.content = text
            message.is_edited = True
            message.edited_at = now_utc()
            await log_chat_activity(
                self.db,
                actor_id=actor_id,
                action=ActivityType.CHAT_MESSAGE_EDITED,
                message_id=message.id,
                stageId=message.stage_id,
                messagePreview=text[:PREVIEW_LENGTH],
            )
            return message

        message = await commit_or_raise(self.db, work)
        return (await self._views([message], actor_id))[0]

    async def delete_message(self, message_id: str, *, actor: User) -> None:
        message = await self._message(message_id)
        if message.is_deleted:
            raise MessageNotFound(message_id)
        if message.author_id != actor.id and actor.role not in MANAGER_ROLES:
            raise ChatPermissionDenied("Solo el autor, OWNER o ADMIN pueden borrar el mensaje")
        actor_id = actor.id

        async def work() -> None:
            message.is_deleted = True
            message.deleted_at = now_utc()
            await log_chat_activity(
                self.db,
                actor_id=actor_id,
                action=ActivityType.CHAT_MESSAGE_DELETED,
                message_id=message.id,
                stageId=message.stage_id,
            )

        await commit_or_raise(self.db, work)
        logger.info("[Chat] mensaje %s borrado por %s", message_id, actor_id)

    # ===== REACCIONES =====

    async def toggle_reaction(self, message_id: str, *, actor: User, emoji: str) -> dict[str, Any]:
        """Agrega la reacción si no existe; si existe la quita. Devuelve la acción y el agrupado."""
        message = await self._message(message_id)
        if message.is_deleted:
            raise MessageNotFound(message_id)
        actor_id = actor.id
        actor_name = _display(actor)

        existing = await self.db.scalar(
            select(ChatMessageReaction).where(
                ChatMessageReaction.message_id == message_id,
                ChatMessageReaction.user_id == actor_id,
                ChatMessageReaction.emoji == emoji,
            )
        )

        async def work() -> str:
            if existing is not None:
                await self.db.delete(existing)
                return "removed"
            self.db.add(ChatMessageReaction(message_id=message_id, user_id=actor_id, emoji=emoji))
            if message.author_id and message.author_id != actor_id:
                await create_notification(
                    self.db,
                    user_id=message.author_id,
                    type=NotificationType.MESSAGE_REACTION,
                    title=f"{actor_name} reacted to your message",
                    message=f"{actor_name} reacted {emoji} to: {message_preview(message.content, 50)}",
                    related_id=message.stage_id,
                    related_type=RelatedType.STAGE,
                )
            return "added"

        action = await commit_or_raise(self.db, work)
        reactions = await self._reactions_for([message_id], actor_id)
        return {"action": action, "reactions": reactions.get(message_id, [])}


__all__ = ["ChatFacade", "group_reactions", "message_preview", "PREVIEW_LENGTH"]

# Fin del archivo backend/app/modules/chat/facades/chat_facade.py
