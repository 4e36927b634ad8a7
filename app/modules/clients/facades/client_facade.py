# -*- coding: utf-8 -*-
"""
backend/app/modules/clients/facades/client_facade.py

Facade de clientes: CRUD con búsqueda por texto y borrado protegido.

Reglas de dominio:
1. name obligatorio; email opcional (validado en el esquema)
2. Búsqueda `q`: substring case-insensitive sobre name/email/company
3. No se borra un cliente con proyectos (ClientHasProjects)
4. Cada mutación registra actividad CLIENT_*

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.activity.enums import ActivityType, EntityType
from app.modules.activity.facades import log_activity
from app.modules.clients.facades.errors import ClientHasProjects, ClientNotFound
from app.modules.clients.models import Client
from app.modules.projects.models import Project
from app.shared.database.transactions import commit_or_raise

logger = logging.getLogger(__name__)

ALLOWED_UPDATE_FIELDS = {"name", "email", "phone", "company"}


class ClientFacade:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, client_id: str) -> Client:
        client = await self.db.get(Client, client_id)
        if client is None:
            raise ClientNotFound(client_id)
        return client

    async def list_clients(self, q: Optional[str] = None) -> list[Client]:
        stmt = select(Client)
        if q and q.strip():
            pattern = f"%{q.strip().lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(Client.name).like(pattern),
                    func.lower(func.coalesce(Client.email, "")).like(pattern),
                    func.lower(func.coalesce(Client.company, "")).like(pattern),
                )
            )
        stmt = stmt.order_by(Client.name.asc())
        return list((await self.db.execute(stmt)).scalars().all())

    async def create(self, *, actor_id: Optional[str], **data: Any) -> Client:
        async def work() -> Client:
            client = Client(**{k: v for k, v in data.items() if k in ALLOWED_UPDATE_FIELDS})
            self.db.add(client)
            await self.db.flush()
            await log_activity(
                self.db,
                actor_id=actor_id,
                action=ActivityType.CLIENT_CREATED,
                entity=EntityType.CLIENT,
                entity_id=client.id,
                details={"clientName": client.name, "itemName": client.name},
            )
            return client

        client = await commit_or_raise(self.db, work)
        logger.info("[Clients] cliente creado id=%s", client.id)
        return client

    async def update(self, client_id: str, *, actor_id: Optional[str], **changes: Any) -> Client:
        client = await self.get(client_id)
        changes = {
            k: v for k, v in changes.items()
            if k in ALLOWED_UPDATE_FIELDS and not (k == "name" and v is None)
        }

        async def work() -> Client:
            for field, value in changes.items():
                setattr(client, field, value)
            await log_activity(
                self.db,
                actor_id=actor_id,
                action=ActivityType.CLIENT_UPDATED,
                entity=EntityType.CLIENT,
                entity_id=client.id,
                details={"clientName": client.name, "itemName": client.name, "fields": sorted(changes)},
            )
            return client

        return await commit_or_raise(self.db, work)

    async def delete(self, client_id: str, *, actor_id: Optional[str]) -> None:
        client = await self.get(client_id)
        project_count = await self.db.scalar(
            select(func.count()).select_from(Project).where(Project.client_id == client_id)
        )
        if project_count:
            raise ClientHasProjects(client_id, int(project_count))

        async def work() -> None:
            await self.db.delete(client)
            await log_activity(
                self.db,
                actor_id=actor_id,
                action=ActivityType.CLIENT_DELETED,
                entity=EntityType.CLIENT,
                entity_id=client_id,
                details={"clientName": client.name, "itemName": client.name},
            )

        await commit_or_raise(self.db, work)
        logger.info("[Clients] cliente eliminado id=%s", client_id)


__all__ = ["ClientFacade", "ALLOWED_UPDATE_FIELDS"]

# Fin del archivo backend/app/modules/clients/facades/client_facade.py
