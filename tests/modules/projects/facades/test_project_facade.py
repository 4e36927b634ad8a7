# -*- coding: utf-8 -*-
"""
backend/tests/modules/projects/facades/test_project_facade.py

ProjectFacade / ProjectQueryFacade sobre SQLite con un doble de Dropbox.

Autor: Atelier
Fecha: 12/08/2026
"""

from decimal import Decimal

import pytest
from sqlalchemy import func, select

from app.modules.activity.models import ActivityLog
from app.modules.clients.facades import ClientFacade, ClientNotFound
from app.modules.projects.enums import ProjectStatus
from app.modules.projects.facades import (
    InvalidStatusTransition,
    ProjectFacade,
    ProjectNotFound,
    ProjectQueryFacade,
)
from app.modules.rooms.enums import StageStatus, StageType
from app.modules.rooms.facades.stage_facade import StageFacade
from app.modules.rooms.models import Room, Stage
from app.shared.integrations.dropbox_client import DropboxError


@pytest.fixture
async def client_id(db_session):
    client = await ClientFacade(db_session).create(actor_id=None, name="Ana Ortega")
    return client.id


async def test_create_project_in_draft_with_folder(db_session, client_id, fake_dropbox):
    facade = ProjectFacade(db_session, dropbox=fake_dropbox, dropbox_enabled=True)

    project = await facade.create(actor_id="u1", name="Villa Serena", client_id=client_id, budget=Decimal("1000.50"))

    assert project.status == ProjectStatus.DRAFT
    assert project.created_by_id == "u1"
    assert project.dropbox_folder == "/Atelier Team/Villa Serena"
    assert fake_dropbox.created == ["/Atelier Team/Villa Serena"]

    log = await db_session.scalar(select(ActivityLog).where(ActivityLog.action == "PROJECT_CREATED"))
    assert log.project_id == project.id
    assert log.details["projectName"] == "Villa Serena"


async def test_create_project_folder_flag_overrides_settings(db_session, client_id, fake_dropbox):
    facade = ProjectFacade(db_session, dropbox=fake_dropbox, dropbox_enabled=True)
    project = await facade.create(actor_id=None, name="No Folder", client_id=client_id, create_dropbox_folder=False)
    assert project.dropbox_folder is None

    facade = ProjectFacade(db_session, dropbox=fake_dropbox, dropbox_enabled=False)
    project = await facade.create(actor_id=None, name="Default Off", client_id=client_id)
    assert project.dropbox_folder is None
    assert fake_dropbox.created == []


async def test_dropbox_failure_does_not_block_creation(db_session, client_id, failing_dropbox):
    facade = ProjectFacade(db_session, dropbox=failing_dropbox, dropbox_enabled=True)

    project = await facade.create(actor_id=None, name="Villa Serena", client_id=client_id)

    assert project.dropbox_folder is None
    assert await facade.get(project.id) is project


async def test_create_requires_existing_client(db_session):
    with pytest.raises(ClientNotFound):
        await ProjectFacade(db_session, dropbox_enabled=False).create(actor_id=None, name="X", client_id="nope")


async def test_ensure_dropbox_folder_propagates_errors(db_session, client_id, failing_dropbox, fake_dropbox):
    project = await ProjectFacade(db_session, dropbox_enabled=False).create(
        actor_id=None, name="Villa Serena", client_id=client_id
    )

    with pytest.raises(DropboxError):
        await ProjectFacade(db_session, dropbox=failing_dropbox).ensure_dropbox_folder(project.id, actor_id=None)

    updated = await ProjectFacade(db_session, dropbox=fake_dropbox).ensure_dropbox_folder(project.id, actor_id="u2")
    assert updated.dropbox_folder == "/Atelier Team/Villa Serena"
    assert updated.updated_by_id == "u2"


async def test_update_records_changes(db_session, client_id):
    facade = ProjectFacade(db_session, dropbox_enabled=False)
    project = await facade.create(actor_id=None, name="Villa Serena", client_id=client_id, city="Madrid")

    updated = await facade.update(project.id, actor_id="u1", city="Valencia", name=None, status="COMPLETED")

    assert updated.city == "Valencia"
    assert updated.name == "Villa Serena"
    assert updated.status == ProjectStatus.DRAFT
    log = await db_session.scalar(select(ActivityLog).where(ActivityLog.action == "PROJECT_UPDATED"))
    assert log.details["changes"] == {"city": {"from": "Madrid", "to": "Valencia"}}


async def test_change_status(db_session, client_id):
    facade = ProjectFacade(db_session, dropbox_enabled=False)
    project = await facade.create(actor_id=None, name="Villa Serena", client_id=client_id)

    with pytest.raises(InvalidStatusTransition) as exc:
        await facade.change_status(project.id, actor_id=None, new_status=ProjectStatus.COMPLETED)
    assert exc.value.from_status == "DRAFT"

    project = await facade.change_status(project.id, actor_id="u1", new_status=ProjectStatus.IN_PROGRESS)
    assert project.status == ProjectStatus.IN_PROGRESS

    # Mismo status: sin actividad nueva
    await facade.change_status(project.id, actor_id="u1", new_status=ProjectStatus.IN_PROGRESS)
    count = await db_session.scalar(
        select(func.count()).select_from(ActivityLog).where(ActivityLog.action == "PROJECT_STATUS_CHANGED")
    )
    assert count == 1


async def test_delete_cascades_rooms_and_stages(db_session, create_project, create_room):
    project = await create_project()
    await create_room(project.id)
    await create_room(project.id)

    await ProjectFacade(db_session, dropbox_enabled=False).delete(project.id, actor_id=None)

    assert await db_session.scalar(select(func.count()).select_from(Room)) == 0
    assert await db_session.scalar(select(func.count()).select_from(Stage)) == 0
    with pytest.raises(ProjectNotFound):
        await ProjectFacade(db_session).get(project.id)


async def test_query_list_and_detail(db_session, create_project, create_room):
    villa = await create_project("Villa Serena", city="Valencia")
    await create_project("Casa Roma")
    kitchen = await create_room(villa.id)
    await create_room(villa.id, name="Den")

    facade = ProjectQueryFacade(db_session)
    items, total = await facade.list_projects(q="valencia")
    assert total == 1
    assert items[0].id == villa.id

    items, total = await facade.list_projects(status=ProjectStatus.IN_PROGRESS, limit=1)
    assert total == 2
    assert len(items) == 1

    # 1 de 5 fases en un room, 0 en el otro → promedio 10
    first_stage = next(s["id"] for s in kitchen["stages"] if s["type"] == StageType.DESIGN_CONCEPT)
    await StageFacade(db_session).bulk_update(
        kitchen["id"], [{"stage_type": "DESIGN_CONCEPT", "status": StageStatus.COMPLETED}], actor_id=None
    )
    detail = await facade.get_detail(villa.id)
    assert detail["client"].name == "Ana Ortega"
    assert [r["display_name"] for r in detail["rooms"]] == ["Kitchen", "Den"]
    assert detail["rooms"][0]["stages"][0]["id"] == first_stage
    assert detail["progress"] == 10

    with pytest.raises(ProjectNotFound):
        await facade.get_detail("missing")

# Fin del archivo backend/tests/modules/projects/facades/test_project_facade.py
