# -*- coding: utf-8 -*-
"""
Servicio in-memory para pruebas de rutas del módulo Chat.
Replica las reglas visibles desde HTTP (validación, permisos, toggle).
Autor: Atelier
Fecha: 12/08/2026
"""

from datetime import datetime, timezone
from itertools import count
from typing import Any, Dict, List, Optional

from app.modules.auth.enums import MANAGER_ROLES
from app.modules.chat.facades import (
    ChatPermissionDenied,
    InvalidMessage,
    MessageNotFound,
    StageNotFound,
    group_reactions,
)


class InMemoryChatService:
    def __init__(self, stage_ids=("s1",)):
        self.stage_ids = set(stage_ids)
        self.messages: Dict[str, Dict[str, Any]] = {}
        self.reactions: List[tuple] = []
        self._seq = count(1)

    def _view(self, m: Dict[str, Any], viewer_id: Optional[str]) -> Dict[str, Any]:
        rows = [(e, uid, name) for mid, e, uid, name in self.reactions if mid == m["id"]]
        return {**m, "reactions": group_reactions(rows, viewer_id)}

    def _get(self, message_id: str) -> Dict[str, Any]:
        m = self.messages.get(message_id)
        if m is None or m["is_deleted"]:
            raise MessageNotFound(message_id)
        return m

    async def list_messages(self, stage_id: str, *, viewer_id: Optional[str] = None):
        if stage_id not in self.stage_ids:
            raise StageNotFound(stage_id)
        return [
            self._view(m, viewer_id)
            for m in self.messages.values()
            if m["stage_id"] == stage_id and not m["is_deleted"]
        ]

    async def post_message(self, stage_id: str, *, author, content=None, mentions=None,
                           attachments=None, parent_message_id=None, notify_assignee=False):
        text = (content or "").strip()
        if not text and not attachments:
            raise InvalidMessage("El mensaje necesita contenido o un adjunto")
        if stage_id not in self.stage_ids:
            raise StageNotFound(stage_id)
        if parent_message_id:
            parent = self.messages.get(parent_message_id)
            if parent is None or parent["stage_id"] != stage_id or parent["is_deleted"]:
                raise InvalidMessage("Mensaje padre inválido")
        now = datetime.now(timezone.utc)
        mid = f"m{next(self._seq)}"
        self.messages[mid] = {
            "id": mid,
            "stage_id": stage_id,
            "content": text,
            "author": {"id": author.id, "name": getattr(author, "name", None)},
            "parent_message_id": parent_message_id,
            "attachments": list(attachments or []),
            "is_edited": False,
            "edited_at": None,
            "is_deleted": False,
            "created_at": now,
            "updated_at": now,
            "mentions": [{"id": uid} for uid in dict.fromkeys(mentions or [])],
        }
        return self._view(self.messages[mid], author.id)

    async def edit_message(self, message_id: str, *, actor, content: str):
        m = self.messages.get(message_id)
        if m is None:
            raise MessageNotFound(message_id)
        if m["is_deleted"]:
            raise InvalidMessage("No se puede editar un mensaje borrado")
        if m["author"]["id"] != actor.id:
            raise ChatPermissionDenied("Solo el autor puede editar el mensaje")
        m.update(content=content.strip(), is_edited=True, edited_at=datetime.now(timezone.utc))
        return self._view(m, actor.id)

    async def delete_message(self, message_id: str, *, actor) -> None:
        m = self._get(message_id)
        if m["author"]["id"] != actor.id and actor.role not in MANAGER_ROLES:
            raise ChatPermissionDenied()
        m["is_deleted"] = True

    async def toggle_reaction(self, message_id: str, *, actor, emoji: str):
        self._get(message_id)
        key = (message_id, emoji, actor.id, getattr(actor, "name", None))
        if key in self.reactions:
            self.reactions.remove(key)
            action = "removed"
        else:
            self.reactions.append(key)
            action = "added"
        rows = [(e, uid, name) for mid, e, uid, name in self.reactions if mid == message_id]
        return {"action": action, "reactions": group_reactions(rows, actor.id)}
