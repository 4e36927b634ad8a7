# -*- coding: utf-8 -*-
"""
backend/app/modules/clients/services/clients_service.py

Capa de aplicación del módulo Clients.
Orquesta ClientFacade y NO reimplementa reglas de dominio.
"""
from __future__ import annotations

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.clients.facades import ClientFacade


class ClientsService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.facade = ClientFacade(db)

    async def list_clients(self, q: Optional[str] = None):
        return await self.facade.list_clients(q)

    async def get_client(self, client_id: str):
        return await self.facade.get(client_id)

    async def create_client(self, *, actor_id: Optional[str], **data: Any):
        return await self.facade.create(actor_id=actor_id, **data)

    async def update_client(self, client_id: str, *, actor_id: Optional[str], **changes: Any):
        return await self.facade.update(client_id, actor_id=actor_id, **changes)

    async def delete_client(self, client_id: str, *, actor_id: Optional[str]) -> None:
        await self.facade.delete(client_id, actor_id=actor_id)
