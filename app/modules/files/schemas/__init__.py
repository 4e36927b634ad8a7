# -*- coding: utf-8 -*-
"""
backend/app/modules/files/schemas/__init__.py
"""

from .files_schemas import (
    ConnectionTestResponse,
    DeleteFileResponse,
    DropboxEntryRead,
    DropboxFolderRead,
    TeamMemberRead,
    TemporaryLinkResponse,
    UploadedFileRead,
)

__all__ = [
    "ConnectionTestResponse",
    "DeleteFileResponse",
    "DropboxEntryRead",
    "DropboxFolderRead",
    "TeamMemberRead",
    "TemporaryLinkResponse",
    "UploadedFileRead",
]
