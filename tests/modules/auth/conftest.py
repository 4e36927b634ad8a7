# -*- coding: utf-8 -*-
"""
backend/tests/modules/auth/conftest.py

Fixtures de rutas de Auth/Team con servicios in-memory.
El usuario autenticado se elige por test con `make_client(actor)`.

Autor: Atelier
Fecha: 12/08/2026
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.modules.auth import services as auth_module
from app.modules.auth.enums import UserRole
from app.modules.auth.routes import deps as auth_deps
from app.modules.auth.routes import get_auth_routers
from app.modules.auth.services.inmemory import (
    InMemoryAuthService,
    InMemoryTeamService,
    make_user,
)


@pytest.fixture
def owner():
    return make_user(name="Olga", email="owner@example.com", role=UserRole.OWNER)


@pytest.fixture
def admin():
    return make_user(name="Adam", email="admin@example.com", role=UserRole.ADMIN)


@pytest.fixture
def designer():
    return make_user(name="Dana", email="dana@example.com", role=UserRole.DESIGNER)


@pytest.fixture
def team_users(owner, admin, designer):
    return [owner, admin, designer]


@pytest.fixture
def team_service(team_users):
    return InMemoryTeamService(team_users)


@pytest.fixture
def auth_service(team_users):
    return InMemoryAuthService(team_users)


@pytest.fixture
def make_client(team_service, auth_service):
    apps = []

    def _make(actor) -> TestClient:
        app = FastAPI(title="Auth Test App")
        for router in get_auth_routers():
            app.include_router(router)

        async def _override_get_current_user():
            return actor

        app.dependency_overrides[auth_module.get_current_user] = _override_get_current_user
        app.dependency_overrides[auth_deps.get_team_service] = lambda: team_service
        app.dependency_overrides[auth_deps.get_auth_service] = lambda: auth_service
        apps.append(app)
        return TestClient(app)

    yield _make

    for app in apps:
        app.dependency_overrides.clear()

# Fin del archivo backend/tests/modules/auth/conftest.py
