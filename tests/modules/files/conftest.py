# -*- coding: utf-8 -*-
"""
backend/tests/modules/files/conftest.py

Configuración de tests para las rutas /files/dropbox.

Autor: Atelier
Fecha: 12/08/2026
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.modules.auth import services as auth_module
from app.modules.files.routes import deps as files_deps
from app.modules.files.routes import get_files_routers
from app.modules.files.services.inmemory import InMemoryFilesService


@pytest.fixture
def files_service():
    return InMemoryFilesService(project_folders={"p1": "/Team/Villa", "p2": None})


@pytest.fixture
def current_user():
    return {"id": "u1", "email": "dana@example.com", "role": "DESIGNER"}


@pytest.fixture
def client(files_service, current_user):
    app = FastAPI(title="Files Test App")
    for r in get_files_routers():
        app.include_router(r)

    async def _override_get_current_user():
        return current_user

    app.dependency_overrides[auth_module.get_current_user] = _override_get_current_user
    app.dependency_overrides[files_deps.get_files_service] = lambda: files_service

    client_instance = TestClient(app)
    yield client_instance

    app.dependency_overrides.clear()


class FakeDropboxClient:
    """Doble de DropboxClient para AssetFacade: guarda subidas y borrados."""

    def __init__(self, fail_with: Exception | None = None):
        self.fail_with = fail_with
        self.uploads: dict[str, bytes] = {}
        self.deleted: list[str] = []

    async def upload_file(self, path: str, content: bytes, mode: str = "add", member_id=None) -> dict:
        if self.fail_with:
            raise self.fail_with
        self.uploads[path] = content
        return {
            "id": "id:abc",
            "name": path.rsplit("/", 1)[-1],
            "path_display": path,
            "size": len(content),
            "rev": "015f",
        }

    async def delete_path(self, path: str, member_id=None) -> dict:
        if self.fail_with:
            raise self.fail_with
        if path in self.uploads:
            del self.uploads[path]
            self.deleted.append(path)
            return {"path_display": path}
        return {"path": path, "not_found": True}


@pytest.fixture
def fake_dropbox_client():
    return FakeDropboxClient()

# Fin del archivo backend/tests/modules/files/conftest.py
