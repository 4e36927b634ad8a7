# -*- coding: utf-8 -*-
"""
backend/tests/modules/files/routes/test_dropbox_routes.py

Rutas /files/dropbox contra InMemoryFilesService.

Autor: Atelier
Fecha: 12/08/2026
"""

import pytest

from app.shared.integrations.dropbox_client import DropboxConfigError, DropboxError


def _upload(client, project_id="p1", path="1- CAD", name="plan.dwg", content=b"DWG"):
    data = {"project_id": project_id}
    if path is not None:
        data["path"] = path
    return client.post("/files/dropbox/upload", data=data, files={"file": (name, content, "application/octet-stream")})


def test_upload_into_project_folder(client, files_service):
    r = _upload(client)
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["path"] == "/Team/Villa/1- CAD/plan.dwg"
    assert body["name"] == "plan.dwg"
    assert body["size"] == 3
    assert files_service.activity == [("ASSET_UPLOADED", "p1", "/Team/Villa/1- CAD/plan.dwg")]


def test_upload_errors(client):
    r = _upload(client, project_id="missing")
    assert r.status_code == 404
    assert r.json()["detail"] == "Proyecto no encontrado"

    r = _upload(client, project_id="p2")
    assert r.status_code == 400
    assert r.json()["detail"] == "El proyecto no tiene carpeta de Dropbox"

    r = _upload(client, path="../other")
    assert r.status_code == 400
    assert ".." in r.json()["detail"]

    assert client.post("/files/dropbox/upload", data={"project_id": "p1"}).status_code == 422


def test_browse_metadata_and_link(client):
    _upload(client, path=None, name="brief.pdf")

    r = client.get("/files/dropbox/browse", params={"path": "/Team/Villa"})
    assert r.status_code == 200
    assert [f["name"] for f in r.json()["files"]] == ["brief.pdf"]
    assert r.json()["has_more"] is False

    r = client.get("/files/dropbox/metadata", params={"path": "/Team/Villa/brief.pdf"})
    assert r.status_code == 200
    assert r.json()["revision"] == "rev1"
    assert client.get("/files/dropbox/metadata", params={"path": "/nope"}).status_code == 404

    r = client.get("/files/dropbox/temporary-link", params={"path": "/Team/Villa/brief.pdf"})
    assert r.json() == {"path": "/Team/Villa/brief.pdf", "link": "https://dl.example.test/Team/Villa/brief.pdf"}
    assert client.get("/files/dropbox/temporary-link", params={"path": "/nope"}).status_code == 404


def test_search_cad(client):
    _upload(client, name="kitchen.dwg")
    _upload(client, name="bath.dxf")

    r = client.get("/files/dropbox/search-cad", params={"q": "kitchen"})
    assert [f["name"] for f in r.json()] == ["kitchen.dwg"]
    assert client.get("/files/dropbox/search-cad", params={"q": ""}).status_code == 422


def test_delete(client, files_service):
    _upload(client)
    r = client.delete("/files/dropbox", params={"path": "/Team/Villa/1- CAD/plan.dwg", "project_id": "p1"})
    assert r.status_code == 200
    assert r.json() == {"path": "/Team/Villa/1- CAD/plan.dwg", "deleted": True, "not_found": False}
    assert files_service.activity[-1][0] == "ASSET_DELETED"

    r = client.delete("/files/dropbox", params={"path": "/Team/Villa/ghost.pdf"})
    assert r.json()["not_found"] is True


def test_team_members(client):
    r = client.get("/files/dropbox/team-members")
    assert r.json() == [{"name": "Ana", "email": "ana@studio.test", "memberId": "dbmid:1", "role": "team_admin"}]


def test_test_connection_requires_manager(client, current_user):
    assert client.get("/files/dropbox/test-connection").status_code == 403

    current_user["role"] = "ADMIN"
    r = client.get("/files/dropbox/test-connection")
    assert r.status_code == 200
    assert r.json()["success"] is True
    assert r.json()["member"]["memberId"] == "dbmid:1"


@pytest.mark.parametrize(
    "error,expected",
    [
        (DropboxError("list_folder: 409 path/not_found", status_code=409), 502),
        (DropboxConfigError("No team member ID specified"), 503),
    ],
)
def test_provider_errors_are_mapped(client, files_service, monkeypatch, error, expected):
    async def _boom(*args, **kwargs):
        raise error

    monkeypatch.setattr(files_service, "browse", _boom)
    r = client.get("/files/dropbox/browse")
    assert r.status_code == expected

# Fin del archivo backend/tests/modules/files/routes/test_dropbox_routes.py
