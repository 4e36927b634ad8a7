# -*- coding: utf-8 -*-
"""
backend/tests/modules/auth/routes/test_auth_routes.py

POST /auth/login y GET /auth/me.

Autor: Atelier
Fecha: 12/08/2026
"""


def test_login_ok(make_client, designer, auth_service):
    client = make_client(designer)
    r = client.post("/auth/login", json={"email": "DANA@example.com", "password": "secret-pass"})

    assert r.status_code == 200, r.text
    body = r.json()
    assert body["access_token"] == f"token-{designer.id}"
    assert body["token_type"] == "bearer"
    assert body["user"]["email"] == "dana@example.com"
    assert body["user"]["role"] == "DESIGNER"
    assert "password" not in body["user"]
    assert auth_service.logins[-1]["email"].lower() == "dana@example.com"
    assert auth_service.logins[-1]["ip_address"] == "testclient"


def test_login_wrong_password(make_client, designer):
    r = make_client(designer).post("/auth/login", json={"email": "dana@example.com", "password": "nope"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Credenciales inválidas"
    assert r.headers["www-authenticate"] == "Bearer"


def test_login_inactive_user(make_client, designer):
    designer.is_active = False
    r = make_client(designer).post("/auth/login", json={"email": "dana@example.com", "password": "secret-pass"})
    assert r.status_code == 401


def test_login_validates_payload(make_client, designer):
    client = make_client(designer)
    assert client.post("/auth/login", json={"email": "not-an-email", "password": "x"}).status_code == 422
    assert client.post("/auth/login", json={"email": "dana@example.com"}).status_code == 422


def test_me_returns_current_user(make_client, admin):
    r = make_client(admin).get("/auth/me")
    assert r.status_code == 200
    assert r.json()["id"] == admin.id
    assert r.json()["role"] == "ADMIN"

# Fin del archivo backend/tests/modules/auth/routes/test_auth_routes.py
