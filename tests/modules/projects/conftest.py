# -*- coding: utf-8 -*-
"""
backend/tests/modules/projects/conftest.py

Configuración de tests para las rutas del módulo Projects.
Una sola instancia in-memory atiende comandos y consultas.

Autor: Atelier
Fecha: 12/08/2026
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.modules.auth import services as auth_module
from app.modules.projects.routes import deps as projects_deps
from app.modules.projects.routes import get_projects_router
from app.modules.projects.services.inmemory import InMemoryProjectsService
from app.shared.integrations.dropbox_client import DropboxError


@pytest.fixture
def test_user_id():
    return "u-designer"


@pytest.fixture
def projects_service():
    return InMemoryProjectsService(client_ids={"c1"})


@pytest.fixture
def client(test_user_id, projects_service):
    app = FastAPI(title="Projects Test App")
    app.include_router(get_projects_router())

    async def _override_get_current_user():
        return {"id": test_user_id, "email": "designer@example.com", "role": "DESIGNER"}

    app.dependency_overrides[auth_module.get_current_user] = _override_get_current_user
    app.dependency_overrides[projects_deps.get_projects_command_service] = lambda: projects_service
    app.dependency_overrides[projects_deps.get_projects_query_service] = lambda: projects_service

    client_instance = TestClient(app)
    yield client_instance

    app.dependency_overrides.clear()


class FakeDropbox:
    """Doble de DropboxClient: registra las carpetas pedidas o falla a voluntad."""

    def __init__(self, fail: bool = False, team_folder: str = "/Atelier Team"):
        self.fail = fail
        self.team_folder = team_folder
        self.created: list[str] = []

    async def create_project_folder_structure(self, project_name: str) -> str:
        if self.fail:
            raise DropboxError("Dropbox no disponible", status_code=503)
        path = f"{self.team_folder}/{project_name}"
        self.created.append(path)
        return path


@pytest.fixture
def fake_dropbox():
    return FakeDropbox()


@pytest.fixture
def failing_dropbox():
    return FakeDropbox(fail=True)

# Fin del archivo backend/tests/modules/projects/conftest.py
