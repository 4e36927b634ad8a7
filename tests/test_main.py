# -*- coding: utf-8 -*-
"""
backend/tests/test_main.py

Smoke tests de la app completa: health, métricas, request id,
autenticación Bearer de punta a punta.

Autor: Atelier
Fecha: 12/08/2026
"""

import uuid

from app.modules.auth.enums import UserRole
from app.modules.auth.models import User
from app.shared.database.database import SessionLocal
from app.shared.utils.security import hash_password


def test_create_app_mounts_project_collection_routes(app):
    methods = {}
    for route in app.routes:
        for method in getattr(route, "methods", None) or ():
            methods.setdefault(route.path, set()).add(method)

    assert {"GET", "POST"} <= methods["/projects"]
    assert {"GET", "PATCH", "DELETE"} <= methods["/projects/{project_id}"]
    assert "PATCH" in methods["/projects/{project_id}/status"]
    assert "POST" in methods["/projects/{project_id}/rooms"]


async def test_health(async_client):
    r = await async_client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["env"] == "test"


async def test_health_db(async_client):
    r = await async_client.get("/health/db")
    assert r.status_code == 200
    assert r.json() == {"database": "ok"}


async def test_metrics_exposes_app_counters(async_client):
    r = await async_client.get("/metrics")
    assert r.status_code == 200
    assert "atelier_stage_transitions_total" in r.text


async def test_request_id_header(async_client):
    r = await async_client.get("/health", headers={"X-Request-ID": "smoke-1"})
    assert r.headers["X-Request-ID"] == "smoke-1"
    assert len((await async_client.get("/health")).headers["X-Request-ID"]) == 16


async def test_unknown_route_is_404(async_client):
    assert (await async_client.get("/does-not-exist")).status_code == 404


async def test_protected_routes_require_token(async_client):
    for path in ("/projects", "/notifications", "/auth/me", "/activity"):
        r = await async_client.get(path)
        assert r.status_code in (401, 403), path

    r = await async_client.get("/projects", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Token inválido o expirado"


async def test_login_and_me(async_client):
    email = f"owner-{uuid.uuid4().hex[:8]}@example.com"
    async with SessionLocal() as db:
        db.add(
            User(
                name="Olga",
                email=email,
                password_hash=hash_password("s3cret-pass"),
                role=UserRole.OWNER,
                is_active=True,
            )
        )
        await db.commit()

    bad = await async_client.post("/auth/login", json={"email": email, "password": "wrong"})
    assert bad.status_code == 401

    r = await async_client.post("/auth/login", json={"email": email.upper(), "password": "s3cret-pass"})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["role"] == "OWNER"

    me = await async_client.get("/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"})
    assert me.status_code == 200
    assert me.json()["email"] == email

# Fin del archivo backend/tests/test_main.py
