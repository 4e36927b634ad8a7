# -*- coding: utf-8 -*-
"""
Servicio in-memory para pruebas de rutas del módulo Clients.
No toca DB ni facades. Reproduce las reglas que las rutas traducen a HTTP.
Autor: Atelier
Fecha: 12/08/2026
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any, Dict, Optional, Set
from uuid import uuid4

from app.modules.clients.facades.errors import ClientHasProjects, ClientNotFound


class InMemoryClientsService:
    def __init__(self, clients_with_projects: Optional[Set[str]] = None):
        self.clients: Dict[str, SimpleNamespace] = {}
        self.clients_with_projects = clients_with_projects or set()

    async def list_clients(self, q: Optional[str] = None):
        items = list(self.clients.values())
        if q:
            needle = q.lower()
            items = [
                c for c in items
                if any(needle in (getattr(c, f) or "").lower() for f in ("name", "email", "company"))
            ]
        return sorted(items, key=lambda c: c.name)

    async def get_client(self, client_id: str):
        if client_id not in self.clients:
            raise ClientNotFound(client_id)
        return self.clients[client_id]

    async def create_client(self, *, actor_id: Optional[str], **data: Any):
        now = datetime.now(timezone.utc)
        client = SimpleNamespace(
            id=uuid4().hex,
            name=data["name"],
            email=data.get("email"),
            phone=data.get("phone"),
            company=data.get("company"),
            created_at=now,
            updated_at=now,
        )
        self.clients[client.id] = client
        return client

    async def update_client(self, client_id: str, *, actor_id: Optional[str], **changes: Any):
        client = await self.get_client(client_id)
        for k, v in changes.items():
            setattr(client, k, v)
        return client

    async def delete_client(self, client_id: str, *, actor_id: Optional[str]) -> None:
        await self.get_client(client_id)
        if client_id in self.clients_with_projects:
            raise ClientHasProjects(client_id, 1)
        del self.clients[client_id]
