# -*- coding: utf-8 -*-
"""
backend/app/modules/files/facades/__init__.py
"""

from .errors import FilesError, InvalidFilePath, ProjectFolderMissing, ProjectNotFound
from .asset_facade import AssetFacade, clean_filename, upload_target

__all__ = [
    "FilesError",
    "InvalidFilePath",
    "ProjectFolderMissing",
    "ProjectNotFound",
    "AssetFacade",
    "clean_filename",
    "upload_target",
]
