# -*- coding: utf-8 -*-
"""
backend/tests/modules/clients/conftest.py

TestClient para las rutas de clientes con servicio in-memory.

Autor: Atelier
Fecha: 12/08/2026
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.modules.auth import services as auth_module
from app.modules.clients.routes import deps as clients_deps
from app.modules.clients.routes import get_clients_router
from app.modules.clients.services.inmemory import InMemoryClientsService


@pytest.fixture
def clients_service():
    return InMemoryClientsService()


@pytest.fixture
def client(clients_service):
    app = FastAPI(title="Clients Test App")
    app.include_router(get_clients_router())

    async def _override_get_current_user():
        return {"id": "u1", "email": "designer@example.com", "role": "DESIGNER"}

    app.dependency_overrides[auth_module.get_current_user] = _override_get_current_user
    app.dependency_overrides[clients_deps.get_clients_service] = lambda: clients_service

    client_instance = TestClient(app)
    yield client_instance

    app.dependency_overrides.clear()

# Fin del archivo backend/tests/modules/clients/conftest.py
