# -*- coding: utf-8 -*-
"""
backend/app/modules/files/services/files_service.py

Capa de aplicación de archivos Dropbox.
Lecturas delegan al cliente; escrituras pasan por AssetFacade (activity log).
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.files.facades import AssetFacade
from app.shared.integrations.dropbox_client import DropboxClient
from app.shared.integrations.dropbox_paths import normalize_path


class FilesService:
    def __init__(self, db: AsyncSession, dropbox: DropboxClient):
        self.db = db
        self.dropbox = dropbox
        self.assets = AssetFacade(db, dropbox)

    # Lectura
    async def browse(self, path: Optional[str] = None, *, cursor: Optional[str] = None, member_id: Optional[str] = None):
        return await self.dropbox.list_folder(normalize_path(path), member_id=member_id, cursor=cursor)

    async def metadata(self, path: str):
        return await self.dropbox.get_file_metadata(normalize_path(path))

    async def temporary_link(self, path: str) -> Optional[str]:
        return await self.dropbox.get_temporary_link(normalize_path(path))

    async def search_cad(self, query: str, *, max_results: int = 50):
        return await self.dropbox.search_cad_files(query, max_results=max_results)

    def team_members(self):
        return self.dropbox.get_team_members()

    async def test_connection(self, member_id: Optional[str] = None) -> dict:
        return await self.dropbox.test_connection(member_id)

    # Escritura
    async def upload(self, project_id: str, *, actor_id: Optional[str], filename: Optional[str], content: bytes, path: Optional[str] = None):
        return await self.assets.upload(project_id, actor_id=actor_id, filename=filename, content=content, path=path)

    async def delete(self, path: str, *, actor_id: Optional[str], project_id: Optional[str] = None):
        return await self.assets.delete(normalize_path(path), actor_id=actor_id, project_id=project_id)
