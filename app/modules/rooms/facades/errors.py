# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/facades/errors.py

Errores de dominio de rooms y stages.

Autor: Atelier
Fecha: 12/08/2026
"""


class ProjectNotFound(Exception):
    def __init__(self, project_id):
        self.project_id = project_id
        super().__init__(f"Proyecto no encontrado: {project_id}")


class RoomNotFound(Exception):
    def __init__(self, room_id):
        self.room_id = room_id
        super().__init__(f"Room no encontrado: {room_id}")


class StageNotFound(Exception):
    def __init__(self, stage_id):
        self.stage_id = stage_id
        super().__init__(f"Fase no encontrada: {stage_id}")


class AssigneeNotFound(Exception):
    """El usuario a asignar no existe o está inactivo."""
    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"Usuario no encontrado o inactivo: {user_id}")


class InvalidStageAction(Exception):
    """Acción desconocida o no válida para el estado actual de la fase."""
    def __init__(self, action, message=None):
        self.action = action
        super().__init__(message or f"Acción inválida: {action}")


class DuplicateStageType(Exception):
    def __init__(self, stage_types):
        self.stage_types = list(stage_types)
        super().__init__(f"Tipos de fase duplicados: {', '.join(self.stage_types)}")


__all__ = [
    "ProjectNotFound",
    "RoomNotFound",
    "StageNotFound",
    "AssigneeNotFound",
    "InvalidStageAction",
    "DuplicateStageType",
]

# Fin del archivo backend/app/modules/rooms/facades/errors.py
