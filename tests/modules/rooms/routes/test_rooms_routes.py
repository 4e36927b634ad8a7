# -*- coding: utf-8 -*-
"""
backend/tests/modules/rooms/routes/test_rooms_routes.py

Rutas de rooms y fases contra InMemoryRoomsService.

Autor: Atelier
Fecha: 12/08/2026
"""


def _create(client, **payload):
    body = {"type": "KITCHEN", **payload}
    r = client.post("/projects/p1/rooms", json=body)
    assert r.status_code == 201, r.text
    return r.json()


def test_create_room_returns_five_stages(client):
    room = _create(client, name="Chef's Kitchen")
    assert room["display_name"] == "Chef's Kitchen"
    assert room["status"] == "NOT_STARTED"
    assert room["current_stage"] == "DESIGN_CONCEPT"
    assert [s["type"] for s in room["stages"]] == [
        "DESIGN_CONCEPT",
        "THREE_D",
        "CLIENT_APPROVAL",
        "DRAWINGS",
        "FFE",
    ]


def test_create_room_unknown_project(client):
    r = client.post("/projects/nope/rooms", json={"type": "KITCHEN"})
    assert r.status_code == 404
    assert r.json()["detail"] == "Proyecto no encontrado"


def test_create_room_rejects_unknown_type(client):
    r = client.post("/projects/p1/rooms", json={"type": "GARAGE"})
    assert r.status_code == 422


def test_list_and_get_rooms(client):
    first = _create(client, order=0)
    _create(client, type="OFFICE", order=1)

    r = client.get("/projects/p1/rooms")
    assert r.status_code == 200
    assert [room["display_name"] for room in r.json()] == ["Kitchen", "Office"]

    r = client.get(f"/rooms/{first['id']}")
    assert r.status_code == 200
    assert r.json()["id"] == first["id"]

    assert client.get("/rooms/missing").status_code == 404
    assert client.get("/projects/nope/rooms").status_code == 404


def test_update_and_delete_room(client):
    room = _create(client)

    r = client.patch(f"/rooms/{room['id']}", json={"status": "ON_HOLD"})
    assert r.status_code == 200
    assert r.json()["status"] == "ON_HOLD"

    assert client.patch("/rooms/missing", json={"name": "x"}).status_code == 404

    r = client.delete(f"/rooms/{room['id']}")
    assert r.status_code == 204
    assert client.delete(f"/rooms/{room['id']}").status_code == 404


def test_stage_action_complete(client, rooms_service):
    room = _create(client)
    stage_id = room["stages"][0]["id"]

    r = client.patch(f"/stages/{stage_id}", json={"action": "complete"})
    assert r.status_code == 200, r.text
    assert r.json()["status"] == "COMPLETED"
    assert r.json()["completed_by_id"] == "u1"
    assert rooms_service.actions[-1] == {"stage_id": stage_id, "action": "complete", "actor_id": "u1"}


def test_stage_action_errors(client):
    room = _create(client)
    stage_id = room["stages"][1]["id"]

    assert client.patch("/stages/missing", json={"action": "start"}).status_code == 404

    r = client.patch(f"/stages/{stage_id}", json={"action": "explode"})
    assert r.status_code == 400

    client.patch(f"/stages/{stage_id}", json={"action": "mark_not_applicable"})
    r = client.patch(f"/stages/{stage_id}", json={"action": "complete"})
    assert r.status_code == 400
    assert "no aplica" in r.json()["detail"]


def test_stage_assign(client):
    room = _create(client)
    stage_id = room["stages"][2]["id"]

    r = client.patch(f"/stages/{stage_id}", json={"action": "assign", "assigned_to": "u2"})
    assert r.status_code == 200
    assert r.json()["assigned_to"] == "u2"


def test_bulk_update_stages(client):
    room = _create(client)
    payload = {
        "updates": [
            {"stage_type": "DESIGN_CONCEPT", "status": "COMPLETED"},
            {"stage_type": "THREE_D", "status": "IN_PROGRESS"},
        ]
    }

    r = client.put(f"/rooms/{room['id']}/stages", json=payload)
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["room_id"] == room["id"]
    assert body["progress"] == 20
    assert [s["status"] for s in body["updated"]] == ["COMPLETED", "IN_PROGRESS"]

    after = client.get(f"/rooms/{room['id']}").json()
    assert after["status"] == "IN_PROGRESS"
    assert after["current_stage"] == "THREE_D"


def test_bulk_update_errors(client):
    room = _create(client)
    dup = {
        "updates": [
            {"stage_type": "FFE", "status": "COMPLETED"},
            {"stage_type": "FFE", "status": "NOT_STARTED"},
        ]
    }
    r = client.put(f"/rooms/{room['id']}/stages", json=dup)
    assert r.status_code == 400
    assert "FFE" in r.json()["detail"]

    ok = {"updates": [{"stage_type": "FFE", "status": "COMPLETED"}]}
    assert client.put("/rooms/missing/stages", json=ok).status_code == 404
    assert client.put(f"/rooms/{room['id']}/stages", json={"updates": []}).status_code == 422

# Fin del archivo backend/tests/modules/rooms/routes/test_rooms_routes.py
