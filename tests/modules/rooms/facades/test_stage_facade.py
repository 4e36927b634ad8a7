# -*- coding: utf-8 -*-
"""
backend/tests/modules/rooms/facades/test_stage_facade.py

StageFacade sobre SQLite: acciones por fase, avisos de "fase lista",
asignaciones y actualización masiva.

Autor: Atelier
Fecha: 12/08/2026
"""

import pytest
from sqlalchemy import select

from app.modules.activity.models import ActivityLog
from app.modules.auth.enums import UserRole
from app.modules.notifications.enums import NotificationType
from app.modules.notifications.models import Notification
from app.modules.rooms.enums import RoomStatus, StageStatus, StageType
from app.modules.rooms.facades.errors import (
    AssigneeNotFound,
    DuplicateStageType,
    InvalidStageAction,
    RoomNotFound,
    StageNotFound,
)
from app.modules.rooms.facades.stage_facade import StageFacade
from app.modules.rooms.models import Room


@pytest.fixture
async def team(create_user):
    return {
        "designer": await create_user(name="Dana", role=UserRole.DESIGNER),
        "renderer": await create_user(name="Rui", role=UserRole.RENDERER),
        "drafter": await create_user(name="Dora", role=UserRole.DRAFTER),
        "ffe": await create_user(name="Fede", role=UserRole.FFE, email_notifications_enabled=False),
    }


@pytest.fixture
async def room(team, create_project, create_room):
    project = await create_project()
    return await create_room(project.id, name="Chef's Kitchen")


def _stage_id(room, stage_type):
    return next(s["id"] for s in room["stages"] if s["type"] == stage_type)


async def _notifications(db_session):
    return (await db_session.execute(select(Notification).order_by(Notification.title))).scalars().all()


# ===== start / complete =====

async def test_start_moves_room_to_in_progress(db_session, email_sender, room, team):
    facade = StageFacade(db_session, email_sender)
    stage_id = _stage_id(room, StageType.THREE_D)

    view = await facade.apply_action(stage_id, actor_id=team["renderer"].id, action="start")

    assert view["status"] == StageStatus.IN_PROGRESS
    assert view["started_at"] is not None
    db_room = await db_session.get(Room, room["id"])
    assert db_room.status == RoomStatus.IN_PROGRESS
    assert db_room.current_stage == StageType.THREE_D

    log = await db_session.scalar(select(ActivityLog).where(ActivityLog.action == "STAGE_STARTED"))
    assert log.details["stageName"] == "THREE_D"
    assert log.details["roomName"] == "Chef's Kitchen"


async def test_complete_notifies_next_phase_and_emails(db_session, email_sender, room, team):
    facade = StageFacade(db_session, email_sender)

    view = await facade.apply_action(
        _stage_id(room, StageType.DESIGN_CONCEPT), actor_id=team["designer"].id, action="complete"
    )

    assert view["status"] == StageStatus.COMPLETED
    assert view["completed_by_id"] == team["designer"].id
    assert view["completed_at"] is not None

    db_room = await db_session.get(Room, room["id"])
    assert db_room.current_stage == StageType.THREE_D

    [notification] = await _notifications(db_session)
    assert notification.user_id == team["renderer"].id
    assert notification.type == NotificationType.STAGE_ASSIGNED
    assert notification.title == "3D Rendering Phase Ready"
    assert notification.message == (
        "Design Concept for Chef's Kitchen in Villa Serena has been completed. "
        "You can now start the 3D Rendering phase."
    )
    assert notification.related_id == _stage_id(room, StageType.THREE_D)
    assert email_sender.sent == [
        {
            "kind": "phase_ready",
            "to": team["renderer"].email,
            "subject": "3D Rendering Phase Ready to Start - Villa Serena",
        }
    ]


async def test_client_approval_fans_out_to_drawings_and_ffe(db_session, email_sender, room, team):
    facade = StageFacade(db_session, email_sender)

    await facade.apply_action(
        _stage_id(room, StageType.CLIENT_APPROVAL), actor_id=team["designer"].id, action="complete"
    )

    notifications = await _notifications(db_session)
    assert [(n.title, n.user_id) for n in notifications] == [
        ("Drawings Phase Ready", team["drafter"].id),
        ("FFE (Furniture, Fixtures & Equipment) Phase Ready", team["ffe"].id),
    ]
    assert notifications[0].message.startswith("Client approval for Chef's Kitchen in Villa Serena")
    # El responsable de FFE tiene los correos desactivados
    assert [e["to"] for e in email_sender.sent] == [team["drafter"].email]


async def test_completing_last_phase_sends_nothing(db_session, email_sender, room, team):
    facade = StageFacade(db_session, email_sender)

    await facade.apply_action(_stage_id(room, StageType.FFE), actor_id=team["ffe"].id, action="complete")

    assert await _notifications(db_session) == []
    assert email_sender.sent == []


async def test_room_completes_when_all_applicable_stages_done(db_session, email_sender, room, team):
    facade = StageFacade(db_session, email_sender)
    await facade.apply_action(_stage_id(room, StageType.THREE_D), actor_id=None, action="mark_not_applicable")

    for stage_type in (StageType.DESIGN_CONCEPT, StageType.CLIENT_APPROVAL, StageType.DRAWINGS, StageType.FFE):
        await facade.apply_action(_stage_id(room, stage_type), actor_id=None, action="complete")

    db_room = await db_session.get(Room, room["id"])
    assert db_room.status == RoomStatus.COMPLETED


async def test_applicability_changes_recompute_room(db_session, email_sender, room, team):
    facade = StageFacade(db_session, email_sender)
    for stage_type in (StageType.DESIGN_CONCEPT, StageType.CLIENT_APPROVAL, StageType.DRAWINGS, StageType.FFE):
        await facade.apply_action(_stage_id(room, stage_type), actor_id=None, action="complete")

    db_room = await db_session.get(Room, room["id"])
    assert db_room.current_stage == StageType.THREE_D

    # La última fase pendiente deja de aplicar: el room queda completado
    await facade.apply_action(_stage_id(room, StageType.THREE_D), actor_id=None, action="mark_not_applicable")
    db_room = await db_session.get(Room, room["id"])
    assert db_room.status == RoomStatus.COMPLETED
    assert db_room.current_stage is None

    await facade.apply_action(_stage_id(room, StageType.THREE_D), actor_id=None, action="mark_applicable")
    db_room = await db_session.get(Room, room["id"])
    assert db_room.status == RoomStatus.IN_PROGRESS
    assert db_room.current_stage == StageType.THREE_D


async def test_reopen_clears_completion_and_reopens_room(db_session, email_sender, room, team):
    facade = StageFacade(db_session, email_sender)
    for stage_type in StageType:
        await facade.apply_action(_stage_id(room, stage_type), actor_id=None, action="complete")
    assert (await db_session.get(Room, room["id"])).status == RoomStatus.COMPLETED

    view = await facade.apply_action(_stage_id(room, StageType.DRAWINGS), actor_id=None, action="reopen")

    assert view["status"] == StageStatus.IN_PROGRESS
    assert view["completed_at"] is None
    assert view["completed_by_id"] is None
    db_room = await db_session.get(Room, room["id"])
    assert db_room.status == RoomStatus.IN_PROGRESS
    assert db_room.current_stage == StageType.DRAWINGS


# ===== errores =====

async def test_invalid_actions(db_session, email_sender, room):
    facade = StageFacade(db_session, email_sender)
    stage_id = _stage_id(room, StageType.THREE_D)

    with pytest.raises(InvalidStageAction):
        await facade.apply_action(stage_id, actor_id=None, action="explode")
    with pytest.raises(InvalidStageAction):
        await facade.apply_action(stage_id, actor_id=None, action="mark_applicable")

    await facade.apply_action(stage_id, actor_id=None, action="mark_not_applicable")
    for action in ("start", "complete", "reopen"):
        with pytest.raises(InvalidStageAction):
            await facade.apply_action(stage_id, actor_id=None, action=action)

    view = await facade.apply_action(stage_id, actor_id=None, action="mark_applicable")
    assert view["status"] == StageStatus.NOT_STARTED


async def test_start_on_completed_stage_is_rejected(db_session, email_sender, room):
    facade = StageFacade(db_session, email_sender)
    stage_id = _stage_id(room, StageType.FFE)
    await facade.apply_action(stage_id, actor_id=None, action="complete")

    with pytest.raises(InvalidStageAction):
        await facade.apply_action(stage_id, actor_id=None, action="start")


async def test_unknown_stage(db_session):
    with pytest.raises(StageNotFound):
        await StageFacade(db_session).apply_action("missing", actor_id=None, action="start")


# ===== assign =====

async def test_assign_notifies_new_assignee(db_session, email_sender, room, team):
    facade = StageFacade(db_session, email_sender)
    stage_id = _stage_id(room, StageType.DESIGN_CONCEPT)

    view = await facade.apply_action(
        stage_id, actor_id=team["designer"].id, action="assign", assigned_to=team["drafter"].id
    )

    assert view["assigned_to"] == team["drafter"].id
    [notification] = await _notifications(db_session)
    assert notification.user_id == team["drafter"].id
    assert notification.title == "New Design Concept assignment"
    assert "Chef's Kitchen in Villa Serena" in notification.message


async def test_self_assignment_and_unassign_do_not_notify(db_session, email_sender, room, team):
    facade = StageFacade(db_session, email_sender)
    stage_id = _stage_id(room, StageType.DRAWINGS)

    await facade.apply_action(stage_id, actor_id=team["drafter"].id, action="assign", assigned_to=team["drafter"].id)
    view = await facade.apply_action(stage_id, actor_id=team["drafter"].id, action="assign", assigned_to=None)

    assert view["assigned_to"] is None
    assert await _notifications(db_session) == []


async def test_assign_to_inactive_user(db_session, email_sender, room, create_user):
    inactive = await create_user(is_active=False)
    with pytest.raises(AssigneeNotFound):
        await StageFacade(db_session, email_sender).apply_action(
            _stage_id(room, StageType.FFE), actor_id=None, action="assign", assigned_to=inactive.id
        )


# ===== bulk =====

async def test_bulk_update_sets_statuses_and_progress(db_session, room):
    facade = StageFacade(db_session)

    result = await facade.bulk_update(
        room["id"],
        [
            {"stage_type": "DESIGN_CONCEPT", "status": "COMPLETED"},
            {"stage_type": "THREE_D", "status": "NOT_APPLICABLE"},
            {"stage_type": "CLIENT_APPROVAL", "status": "IN_PROGRESS"},
        ],
        actor_id=None,
    )

    assert result["room_id"] == room["id"]
    assert [s["status"] for s in result["updated"]] == ["COMPLETED", "NOT_APPLICABLE", "IN_PROGRESS"]
    # 1 completada de 4 aplicables
    assert result["progress"] == 25
    db_room = await db_session.get(Room, room["id"])
    assert db_room.status == RoomStatus.IN_PROGRESS
    assert db_room.current_stage == StageType.CLIENT_APPROVAL

    logs = (
        await db_session.execute(select(ActivityLog).where(ActivityLog.action == "STAGE_STATUS_CHANGED"))
    ).scalars().all()
    assert len(logs) == 3


async def test_bulk_update_unchanged_status_is_not_logged(db_session, room):
    await StageFacade(db_session).bulk_update(
        room["id"], [{"stage_type": "FFE", "status": "NOT_STARTED"}], actor_id=None
    )
    logs = (
        await db_session.execute(select(ActivityLog).where(ActivityLog.action == "STAGE_STATUS_CHANGED"))
    ).scalars().all()
    assert logs == []


async def test_bulk_update_errors(db_session, room):
    facade = StageFacade(db_session)
    with pytest.raises(DuplicateStageType) as exc:
        await facade.bulk_update(
            room["id"],
            [{"stage_type": "FFE", "status": "COMPLETED"}, {"stage_type": "FFE", "status": "NOT_STARTED"}],
            actor_id=None,
        )
    assert exc.value.stage_types == ["FFE"]

    with pytest.raises(RoomNotFound):
        await facade.bulk_update("missing", [], actor_id=None)

# Fin del archivo backend/tests/modules/rooms/facades/test_stage_facade.py
