# -*- coding: utf-8 -*-
"""
backend/tests/modules/notifications/facades/test_notification_facade.py

NotificationFacade sobre SQLite: bandeja propia, leídas y borrado.

Autor: Atelier
Fecha: 12/08/2026
"""

import pytest

from app.modules.notifications.enums import NotificationType, RelatedType
from app.modules.notifications.facades import NotificationFacade, NotificationNotFound, create_notification


@pytest.fixture
async def inbox(db_session, create_user):
    dana = await create_user(name="Dana")
    rui = await create_user(name="Rui")
    created = []
    for i in range(3):
        created.append(
            await create_notification(
                db_session,
                user_id=dana.id,
                type=NotificationType.MENTION,
                title=f"Note {i}",
                message="hello",
                related_id="s1",
                related_type=RelatedType.STAGE,
            )
        )
    foreign = await create_notification(
        db_session, user_id=rui.id, type=NotificationType.CHAT_MESSAGE, title="Other", message="x"
    )
    await db_session.commit()
    return {"dana": dana, "rui": rui, "mine": created, "foreign": foreign}


async def test_create_notification_defaults(inbox):
    note = inbox["mine"][0]
    assert note.read is False
    assert note.related_type == "STAGE"
    assert inbox["foreign"].related_type is None


async def test_list_and_mark(db_session, inbox):
    facade = NotificationFacade(db_session)
    dana_id = inbox["dana"].id

    items, unread = await facade.list_for_user(dana_id)
    assert len(items) == 3
    assert unread == 3

    await facade.mark_read(dana_id, inbox["mine"][0].id)
    items, unread = await facade.list_for_user(dana_id, unread_only=True)
    assert unread == 2
    assert inbox["mine"][0].id not in {n.id for n in items}

    assert await facade.mark_all_read(dana_id) == 2
    _, unread = await facade.list_for_user(dana_id)
    assert unread == 0
    _, rui_unread = await facade.list_for_user(inbox["rui"].id)
    assert rui_unread == 1


async def test_foreign_notifications_are_not_found(db_session, inbox):
    facade = NotificationFacade(db_session)
    with pytest.raises(NotificationNotFound):
        await facade.mark_read(inbox["dana"].id, inbox["foreign"].id)
    with pytest.raises(NotificationNotFound):
        await facade.delete(inbox["dana"].id, inbox["foreign"].id)


async def test_delete(db_session, inbox):
    facade = NotificationFacade(db_session)
    dana_id = inbox["dana"].id
    await facade.delete(dana_id, inbox["mine"][1].id)
    items, _ = await facade.list_for_user(dana_id)
    assert len(items) == 2
    with pytest.raises(NotificationNotFound):
        await facade.delete(dana_id, "missing")

# Fin del archivo backend/tests/modules/notifications/facades/test_notification_facade.py
