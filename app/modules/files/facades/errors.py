# -*- coding: utf-8 -*-
"""
backend/app/modules/files/facades/errors.py

Errores de dominio del módulo Files.

Los fallos del proveedor (DropboxError / DropboxConfigError) se propagan
tal cual desde el cliente; aquí solo viven las reglas del módulo.

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

from app.modules.projects.facades.errors import ProjectFolderMissing, ProjectNotFound


class FilesError(Exception):
    """Error base para el módulo Files."""


class InvalidFilePath(FilesError):
    """Ruta o nombre de archivo no utilizable."""

    def __init__(self, message: str = "Ruta de archivo inválida") -> None:
        super().__init__(message)


__all__ = ["FilesError", "InvalidFilePath", "ProjectNotFound", "ProjectFolderMissing"]

# Fin del archivo backend/app/modules/files/facades/errors.py
