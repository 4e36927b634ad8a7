# -*- coding: utf-8 -*-
"""
backend/tests/modules/activity/conftest.py

Configuración de tests para las rutas del feed de actividad.

Autor: Atelier
Fecha: 12/08/2026
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.modules.activity.routes import deps as activity_deps
from app.modules.activity.routes import get_activity_router
from app.modules.activity.services.inmemory import InMemoryActivityQueryService
from app.modules.auth import services as auth_module


@pytest.fixture
def activity_entries():
    return [
        {
            "id": "a1",
            "action": "PROJECT_CREATED",
            "project_id": "p1",
            "details": {"projectName": "Casa Roma"},
            "actor": {"id": "u1", "name": "Olga", "email": "olga@example.com", "role": "OWNER"},
        },
        {
            "id": "a2",
            "action": "STAGE_COMPLETED",
            "entity": "STAGE",
            "entity_id": "s1",
            "project_id": "p1",
            "details": {"stageName": "DRAWINGS", "roomName": "Den"},
        },
        {
            "id": "a3",
            "action": "CLIENT_CREATED",
            "entity": "CLIENT",
            "entity_id": "c1",
            "details": {"itemName": "Ana Ortega"},
        },
    ]


@pytest.fixture
def activity_service(activity_entries):
    return InMemoryActivityQueryService(activity_entries)


@pytest.fixture
def client(activity_service):
    app = FastAPI(title="Activity Test App")
    app.include_router(get_activity_router())

    async def _override_get_current_user():
        return {"id": "u1", "email": "olga@example.com", "role": "OWNER"}

    app.dependency_overrides[auth_module.get_current_user] = _override_get_current_user
    app.dependency_overrides[activity_deps.get_activity_query_service] = lambda: activity_service

    client_instance = TestClient(app)
    yield client_instance

    app.dependency_overrides.clear()

# Fin del archivo backend/tests/modules/activity/conftest.py
