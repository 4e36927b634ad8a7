# -*- coding: utf-8 -*-
"""
backend/app/modules/files/schemas/files_schemas.py

Esquemas de respuesta de las rutas Dropbox.

Autor: Atelier
Fecha: 12/08/2026
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.shared.utils.base_models import UTF8SafeModel


class DropboxEntryRead(UTF8SafeModel):
    id: str
    name: str
    path: str
    size: int = 0
    last_modified: Optional[datetime] = None
    revision: str = ""
    is_folder: bool = False


class DropboxFolderRead(UTF8SafeModel):
    files: list[DropboxEntryRead] = Field(default_factory=list)
    folders: list[DropboxEntryRead] = Field(default_factory=list)
    has_more: bool = False
    cursor: Optional[str] = None


class TemporaryLinkResponse(UTF8SafeModel):
    path: str
    link: str


class UploadedFileRead(UTF8SafeModel):
    id: str
    name: str
    path: str
    size: int = 0
    revision: str = ""


class DeleteFileResponse(UTF8SafeModel):
    path: str
    deleted: bool = True
    not_found: bool = False


class TeamMemberRead(UTF8SafeModel):
    name: str
    email: str
    memberId: str
    role: str


class ConnectionTestResponse(UTF8SafeModel):
    success: bool
    member: Optional[TeamMemberRead] = None
    root_namespace_id: Optional[str] = None
    error: Optional[str] = None


__all__ = [
    "DropboxEntryRead",
    "DropboxFolderRead",
    "TemporaryLinkResponse",
    "UploadedFileRead",
    "DeleteFileResponse",
    "TeamMemberRead",
    "ConnectionTestResponse",
]

# Fin del archivo backend/app/modules/files/schemas/files_schemas.py
