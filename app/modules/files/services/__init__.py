# -*- coding: utf-8 -*-
"""
backend/app/modules/files/services/__init__.py
"""

from .files_service import FilesService

__all__ = ["FilesService"]
