# -*- coding: utf-8 -*-
"""
backend/tests/modules/chat/conftest.py

Configuración de tests para las rutas del chat por fase.
El usuario actual se puede cambiar en mitad del test vía `as_user`.

Autor: Atelier
Fecha: 12/08/2026
"""
from types import SimpleNamespace

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.modules.auth import services as auth_module
from app.modules.chat.routes import deps as chat_deps
from app.modules.chat.routes import get_chat_router
from app.modules.chat.services.inmemory import InMemoryChatService


@pytest.fixture
def chat_service():
    return InMemoryChatService(stage_ids=("s1", "s2"))


@pytest.fixture
def current_user():
    return {"user": SimpleNamespace(id="u1", name="Dana", email="dana@example.com", role="DESIGNER")}


@pytest.fixture
def as_user(current_user):
    def _switch(id: str, name: str, role: str = "DESIGNER"):
        current_user["user"] = SimpleNamespace(id=id, name=name, email=f"{id}@example.com", role=role)

    return _switch


@pytest.fixture
def client(chat_service, current_user):
    app = FastAPI(title="Chat Test App")
    app.include_router(get_chat_router())

    async def _override_get_current_user():
        return current_user["user"]

    app.dependency_overrides[auth_module.get_current_user] = _override_get_current_user
    app.dependency_overrides[chat_deps.get_chat_service] = lambda: chat_service

    client_instance = TestClient(app)
    yield client_instance

    app.dependency_overrides.clear()

# Fin del archivo backend/tests/modules/chat/conftest.py
