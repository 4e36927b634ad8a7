# -*- coding: utf-8 -*-
"""
backend/app/modules/files/routes/deps.py

Dependencias inyectables del módulo Files.
get_dropbox_client se puede sobreescribir en pruebas (dependency_overrides).

Autor: Atelier
Fecha: 12/08/2026
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.database import get_db
from app.shared.integrations.dropbox_client import DropboxClient, get_dropbox_client
from app.modules.files.services import FilesService


def get_dropbox() -> DropboxClient:
    return get_dropbox_client()


async def get_files_service(
    db: AsyncSession = Depends(get_db),
    dropbox: DropboxClient = Depends(get_dropbox),
) -> FilesService:
    return FilesService(db, dropbox)
# Fin del archivo backend/app/modules/files/routes/deps.py
