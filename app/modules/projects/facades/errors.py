# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/facades/errors.py

Excepciones de dominio para el módulo de proyectos.

Autor: Atelier
Fecha: 12/08/2026
"""


class ProjectNotFound(Exception):
    """Se lanza cuando no se encuentra un proyecto por ID."""
    def __init__(self, project_id):
        self.project_id = project_id
        super().__init__(f"Proyecto no encontrado: {project_id}")


class InvalidStatusTransition(Exception):
    """Se lanza cuando se intenta una transición de status no permitida."""
    def __init__(self, from_status, to_status, message=None):
        self.from_status = from_status
        self.to_status = to_status
        default_msg = f"Transición inválida: {from_status} → {to_status}"
        super().__init__(message or default_msg)


class ProjectFolderMissing(Exception):
    """El proyecto no tiene carpeta de Dropbox asociada."""
    def __init__(self, project_id):
        self.project_id = project_id
        super().__init__(f"El proyecto {project_id} no tiene carpeta de Dropbox")


__all__ = [
    "ProjectNotFound",
    "InvalidStatusTransition",
    "ProjectFolderMissing",
]

# Fin del archivo backend/app/modules/projects/facades/errors.py
