# -*- coding: utf-8 -*-
"""
backend/tests/modules/rooms/conftest.py

TestClient para las rutas de rooms y fases con servicio in-memory.

Autor: Atelier
Fecha: 12/08/2026
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.modules.auth import services as auth_module
from app.modules.rooms.routes import deps as rooms_deps
from app.modules.rooms.routes import get_rooms_routers
from app.modules.rooms.services.inmemory import InMemoryRoomsService


@pytest.fixture
def rooms_service():
    return InMemoryRoomsService(project_ids={"p1"})


@pytest.fixture
def client(rooms_service):
    app = FastAPI(title="Rooms Test App")
    for router in get_rooms_routers():
        app.include_router(router)

    async def _override_get_current_user():
        return {"id": "u1", "email": "designer@example.com", "role": "DESIGNER"}

    app.dependency_overrides[auth_module.get_current_user] = _override_get_current_user
    app.dependency_overrides[rooms_deps.get_rooms_service] = lambda: rooms_service

    client_instance = TestClient(app)
    yield client_instance

    app.dependency_overrides.clear()

# Fin del archivo backend/tests/modules/rooms/conftest.py
