# -*- coding: utf-8 -*-
"""
backend/tests/modules/files/facades/test_asset_facade.py

AssetFacade sobre SQLite con un doble del cliente Dropbox.

Autor: Atelier
Fecha: 12/08/2026
"""

import pytest
from sqlalchemy import select

from app.modules.activity.models import ActivityLog
from app.modules.files.facades import (
    AssetFacade,
    InvalidFilePath,
    ProjectFolderMissing,
    ProjectNotFound,
    clean_filename,
    upload_target,
)
from app.shared.integrations.dropbox_client import DropboxError


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("plan.dwg", "plan.dwg"),
        ("C:\\Users\\dana\\plan.dwg", "plan.dwg"),
        ("../../etc/passwd", "passwd"),
        ("  render.png  ", "render.png"),
    ],
)
def test_clean_filename(raw, expected):
    assert clean_filename(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "..", "folder/"])
def test_clean_filename_rejects_empty(raw):
    with pytest.raises(InvalidFilePath):
        clean_filename(raw)


def test_upload_target():
    assert upload_target("/Team/Villa", None, "a.pdf") == "/Team/Villa/a.pdf"
    assert upload_target("/Team/Villa/", "/3- RENDERING//final/", "a.png") == "/Team/Villa/3- RENDERING/final/a.png"
    with pytest.raises(InvalidFilePath):
        upload_target("/Team/Villa", "x/../../y", "a.png")


async def test_upload_records_activity(db_session, create_project, fake_dropbox_client):
    project = await create_project("Villa Serena", dropbox_folder="/Team/Villa Serena")

    uploaded = await AssetFacade(db_session, fake_dropbox_client).upload(
        project.id, actor_id=None, filename="brief.pdf", content=b"%PDF", path="4- SENT"
    )

    assert uploaded == {
        "id": "id:abc",
        "name": "brief.pdf",
        "path": "/Team/Villa Serena/4- SENT/brief.pdf",
        "size": 4,
        "revision": "015f",
    }
    assert fake_dropbox_client.uploads == {"/Team/Villa Serena/4- SENT/brief.pdf": b"%PDF"}

    log = await db_session.scalar(select(ActivityLog).where(ActivityLog.action == "ASSET_UPLOADED"))
    assert log.project_id == project.id
    assert log.entity_id == "/Team/Villa Serena/4- SENT/brief.pdf"
    assert log.details["fileName"] == "brief.pdf"
    assert log.details["projectName"] == "Villa Serena"


async def test_upload_requires_project_folder(db_session, create_project, fake_dropbox_client):
    facade = AssetFacade(db_session, fake_dropbox_client)
    with pytest.raises(ProjectNotFound):
        await facade.upload("missing", actor_id=None, filename="a.pdf", content=b"")

    project = await create_project()
    with pytest.raises(ProjectFolderMissing):
        await facade.upload(project.id, actor_id=None, filename="a.pdf", content=b"")
    assert fake_dropbox_client.uploads == {}


async def test_upload_provider_error_propagates(db_session, create_project, fake_dropbox_client):
    project = await create_project(dropbox_folder="/Team/Villa")
    fake_dropbox_client.fail_with = DropboxError("upload: 507 insufficient_space", status_code=507)

    with pytest.raises(DropboxError):
        await AssetFacade(db_session, fake_dropbox_client).upload(project.id, actor_id=None, filename="a.pdf", content=b"x")
    assert await db_session.scalar(select(ActivityLog)) is None


async def test_delete(db_session, create_project, fake_dropbox_client):
    project = await create_project(dropbox_folder="/Team/Villa")
    facade = AssetFacade(db_session, fake_dropbox_client)
    await facade.upload(project.id, actor_id=None, filename="a.pdf", content=b"x")

    result = await facade.delete("/Team/Villa/a.pdf", actor_id=None, project_id=project.id)
    assert result == {"path": "/Team/Villa/a.pdf", "deleted": True, "not_found": False}
    log = await db_session.scalar(select(ActivityLog).where(ActivityLog.action == "ASSET_DELETED"))
    assert log.details["fileName"] == "a.pdf"

    # Ya no existe y sin proyecto: sin actividad nueva
    result = await facade.delete("/Team/Villa/a.pdf", actor_id=None)
    assert result["not_found"] is True

    with pytest.raises(InvalidFilePath):
        await facade.delete("/", actor_id=None)

# Fin del archivo backend/tests/modules/files/facades/test_asset_facade.py
