# -*- coding: utf-8 -*-
"""
backend/tests/modules/chat/facades/test_chat_facade.py

ChatFacade sobre SQLite: menciones, avisos al responsable, emails,
edición/borrado con permisos y reacciones en toggle.

Autor: Atelier
Fecha: 12/08/2026
"""

import pytest
from sqlalchemy import select

from app.modules.activity.models import ActivityLog
from app.modules.auth.enums import UserRole
from app.modules.chat.facades import (
    ChatFacade,
    ChatPermissionDenied,
    InvalidMessage,
    MessageNotFound,
    StageNotFound,
    group_reactions,
    message_preview,
)
from app.modules.notifications.enums import NotificationType
from app.modules.notifications.models import Notification
from app.modules.rooms.enums import StageType

FRONTEND = "https://studio.example.com"


@pytest.fixture
async def people(create_user):
    return {
        "dana": await create_user(name="Dana", role=UserRole.DESIGNER),
        "rui": await create_user(name="Rui", role=UserRole.RENDERER),
        "fede": await create_user(name="Fede", role=UserRole.FFE, email_notifications_enabled=False),
        "olga": await create_user(name="Olga", role=UserRole.OWNER),
    }


@pytest.fixture
async def stage_id(people, create_project, create_room):
    project = await create_project()
    room = await create_room(project.id, name="Chef's Kitchen")
    # THREE_D queda asignada a Rui (primer RENDERER activo)
    return next(s["id"] for s in room["stages"] if s["type"] == StageType.THREE_D)


@pytest.fixture
def chat(db_session, email_sender):
    return ChatFacade(db_session, email_sender)


async def _notifications(db_session, type_=None):
    stmt = select(Notification)
    if type_ is not None:
        stmt = stmt.where(Notification.type == type_)
    return (await db_session.execute(stmt)).scalars().all()


def test_message_preview_truncates():
    assert message_preview("short") == "short"
    assert message_preview("x" * 120) == "x" * 100 + "..."


def test_group_reactions_keeps_first_seen_order():
    grouped = group_reactions(
        [("👍", "u1", "Ana"), ("❤️", "u2", "Bo"), ("👍", "u2", "Bo")],
        viewer_id="u2",
    )
    assert [g["emoji"] for g in grouped] == ["👍", "❤️"]
    assert grouped[0]["count"] == 2
    assert grouped[0]["users"] == [{"id": "u1", "name": "Ana"}, {"id": "u2", "name": "Bo"}]
    assert all(g["user_has_reacted"] for g in grouped)


async def test_post_message_with_mentions(db_session, chat, email_sender, people, stage_id):
    dana, rui, fede = people["dana"], people["rui"], people["fede"]

    view = await chat.post_message(
        stage_id,
        author=dana,
        content="  Renders ready for review?  ",
        mentions=[rui.id, fede.id, rui.id, dana.id, "ghost"],
        frontend_url=FRONTEND,
    )

    assert view["content"] == "Renders ready for review?"
    assert view["author"]["id"] == dana.id
    assert sorted(m["id"] for m in view["mentions"]) == sorted([rui.id, fede.id, dana.id])
    assert view["reactions"] == []

    mentions = await _notifications(db_session, NotificationType.MENTION)
    # Nunca se notifica al autor
    assert sorted(n.user_id for n in mentions) == sorted([rui.id, fede.id])
    rui_note = next(n for n in mentions if n.user_id == rui.id)
    assert rui_note.title == "Dana mentioned you"
    assert rui_note.message == (
        "You were mentioned in 3D Rendering - Chef's Kitchen (Villa Serena): Renders ready for review?"
    )
    assert rui_note.related_id == stage_id

    # Fede tiene los correos desactivados
    assert email_sender.sent == [
        {"kind": "mention", "to": rui.email, "stage_label": "3D Rendering - Chef's Kitchen (Villa Serena)"}
    ]

    actions = [row.action for row in (await db_session.execute(select(ActivityLog))).scalars().all()]
    assert actions.count("CHAT_MESSAGE_SENT") == 1
    assert actions.count("CHAT_MENTION") == 3


async def test_notify_assignee(db_session, chat, people, stage_id):
    await chat.post_message(stage_id, author=people["dana"], content="FYI", notify_assignee=True, frontend_url=FRONTEND)

    [note] = await _notifications(db_session, NotificationType.CHAT_MESSAGE)
    assert note.user_id == people["rui"].id
    assert note.title == "New message from Dana"
    assert note.message.endswith(": FYI")


async def test_assignee_is_not_notified_twice_or_by_self(db_session, chat, people, stage_id):
    rui = people["rui"]
    await chat.post_message(
        stage_id, author=people["dana"], content="hey", mentions=[rui.id], notify_assignee=True, frontend_url=FRONTEND
    )
    await chat.post_message(stage_id, author=rui, content="on it", notify_assignee=True, frontend_url=FRONTEND)

    assert await _notifications(db_session, NotificationType.CHAT_MESSAGE) == []
    assert len(await _notifications(db_session, NotificationType.MENTION)) == 1


async def test_attachment_only_message(db_session, chat, people, stage_id):
    attachment = {"name": "plan.dwg", "url": "https://files.example.com/plan.dwg", "type": "application/acad", "size": 1024}

    view = await chat.post_message(
        stage_id, author=people["dana"], attachments=[attachment], notify_assignee=True, frontend_url=FRONTEND
    )

    assert view["content"] == ""
    assert view["attachments"] == [attachment]
    [note] = await _notifications(db_session, NotificationType.CHAT_MESSAGE)
    assert note.message.endswith("(Attachment)")


async def test_attachment_only_mention(db_session, chat, email_sender, people, stage_id):
    attachment = {"name": "moodboard.pdf", "url": "https://files.example.com/moodboard.pdf"}

    await chat.post_message(
        stage_id, author=people["dana"], attachments=[attachment], mentions=[people["rui"].id], frontend_url=FRONTEND
    )

    [note] = await _notifications(db_session, NotificationType.MENTION)
    assert note.message == "You were mentioned in 3D Rendering - Chef's Kitchen (Villa Serena): (Attachment)"
    assert [m["to"] for m in email_sender.sent] == [people["rui"].email]


async def test_post_message_validation(chat, people, stage_id):
    with pytest.raises(InvalidMessage):
        await chat.post_message(stage_id, author=people["dana"], content="   ", frontend_url=FRONTEND)
    with pytest.raises(StageNotFound):
        await chat.post_message("missing", author=people["dana"], content="hi", frontend_url=FRONTEND)
    with pytest.raises(InvalidMessage):
        await chat.post_message(
            stage_id, author=people["dana"], content="reply", parent_message_id="nope", frontend_url=FRONTEND
        )


async def test_threaded_reply_and_listing(chat, people, stage_id):
    root = await chat.post_message(stage_id, author=people["dana"], content="first", frontend_url=FRONTEND)
    reply = await chat.post_message(
        stage_id, author=people["rui"], content="second", parent_message_id=root["id"], frontend_url=FRONTEND
    )

    assert reply["parent_message_id"] == root["id"]
    messages = await chat.list_messages(stage_id, viewer_id=people["dana"].id)
    assert sorted(m["content"] for m in messages) == ["first", "second"]


async def test_edit_message(chat, people, stage_id):
    msg = await chat.post_message(stage_id, author=people["dana"], content="draft", frontend_url=FRONTEND)

    with pytest.raises(ChatPermissionDenied):
        await chat.edit_message(msg["id"], actor=people["olga"], content="nope")
    with pytest.raises(InvalidMessage):
        await chat.edit_message(msg["id"], actor=people["dana"], content="  ")

    edited = await chat.edit_message(msg["id"], actor=people["dana"], content="final")
    assert edited["content"] == "final"
    assert edited["is_edited"] is True
    assert edited["edited_at"] is not None


async def test_delete_message_permissions(chat, people, stage_id):
    msg = await chat.post_message(stage_id, author=people["dana"], content="oops", frontend_url=FRONTEND)

    with pytest.raises(ChatPermissionDenied):
        await chat.delete_message(msg["id"], actor=people["rui"])

    # OWNER puede borrar mensajes ajenos
    await chat.delete_message(msg["id"], actor=people["olga"])
    assert await chat.list_messages(stage_id) == []

    with pytest.raises(MessageNotFound):
        await chat.delete_message(msg["id"], actor=people["dana"])
    with pytest.raises(InvalidMessage):
        await chat.edit_message(msg["id"], actor=people["dana"], content="again")


async def test_toggle_reaction(db_session, chat, people, stage_id):
    msg = await chat.post_message(stage_id, author=people["dana"], content="Look at this render", frontend_url=FRONTEND)

    added = await chat.toggle_reaction(msg["id"], actor=people["rui"], emoji="👍")
    assert added["action"] == "added"
    assert added["reactions"] == [
        {"emoji": "👍", "count": 1, "users": [{"id": people["rui"].id, "name": "Rui"}], "user_has_reacted": True}
    ]
    [note] = await _notifications(db_session, NotificationType.MESSAGE_REACTION)
    assert note.user_id == people["dana"].id
    assert note.title == "Rui reacted to your message"
    assert note.related_id == stage_id

    removed = await chat.toggle_reaction(msg["id"], actor=people["rui"], emoji="👍")
    assert removed == {"action": "removed", "reactions": []}


async def test_self_reaction_does_not_notify(db_session, chat, people, stage_id):
    msg = await chat.post_message(stage_id, author=people["dana"], content="mine", frontend_url=FRONTEND)
    await chat.toggle_reaction(msg["id"], actor=people["dana"], emoji="🎉")
    assert await _notifications(db_session, NotificationType.MESSAGE_REACTION) == []

    with pytest.raises(MessageNotFound):
        await chat.toggle_reaction("missing", actor=people["dana"], emoji="🎉")

# Fin del archivo backend/tests/modules/chat/facades/test_chat_facade.py
