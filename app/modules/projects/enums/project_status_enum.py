# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/enums/project_status_enum.py

Estado de negocio del proyecto y tipo de proyecto.

⚠️ DISTINCIÓN SEMÁNTICA:
- ProjectStatus: situación del encargo frente al cliente (borrador, en curso, pausado...).
- RoomStatus / StageStatus (módulo rooms): avance operativo por espacio y fase.

Autor: Atelier
Fecha: 12/08/2026
"""

from enum import StrEnum


class ProjectStatus(StrEnum):
    DRAFT = "DRAFT"
    IN_PROGRESS = "IN_PROGRESS"
    ON_HOLD = "ON_HOLD"
    URGENT = "URGENT"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


class ProjectType(StrEnum):
    RESIDENTIAL = "RESIDENTIAL"
    COMMERCIAL = "COMMERCIAL"
    HOSPITALITY = "HOSPITALITY"


__all__ = ["ProjectStatus", "ProjectType"]
# Fin del archivo backend/app/modules/projects/enums/project_status_enum.py
