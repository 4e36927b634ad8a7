# -*- coding: utf-8 -*-
"""
backend/tests/modules/notifications/conftest.py

Configuración de tests para la bandeja /notifications.

Autor: Atelier
Fecha: 12/08/2026
"""
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.modules.auth import services as auth_module
from app.modules.notifications.routes import deps as notifications_deps
from app.modules.notifications.routes import get_notifications_router
from app.modules.notifications.services.inmemory import InMemoryNotificationService, make_notification


@pytest.fixture
def notification_service():
    base = datetime(2026, 8, 1, tzinfo=timezone.utc)
    return InMemoryNotificationService(
        [
            make_notification(id="n1", created_at=base),
            make_notification(id="n2", type="MENTION", title="Dana mentioned you", created_at=base + timedelta(hours=1)),
            make_notification(id="n3", read=True, created_at=base + timedelta(hours=2)),
            make_notification(id="n4", user_id="u2", created_at=base),
        ]
    )


@pytest.fixture
def client(notification_service):
    app = FastAPI(title="Notifications Test App")
    app.include_router(get_notifications_router())

    async def _override_get_current_user():
        return SimpleNamespace(id="u1", email="dana@example.com", role="DESIGNER")

    app.dependency_overrides[auth_module.get_current_user] = _override_get_current_user
    app.dependency_overrides[notifications_deps.get_notification_service] = lambda: notification_service

    client_instance = TestClient(app)
    yield client_instance

    app.dependency_overrides.clear()

# Fin del archivo backend/tests/modules/notifications/conftest.py
