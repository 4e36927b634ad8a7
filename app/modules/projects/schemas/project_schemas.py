# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/schemas/project_schemas.py

Schemas Pydantic para creación, actualización y respuesta de proyectos.

Autor: Atelier
Fecha: 12/08/2026
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator

from app.modules.clients.schemas import ClientRead
from app.modules.projects.enums import ProjectStatus, ProjectType
from app.modules.rooms.schemas import RoomRead
from app.shared.utils.base_models import UTF8SafeModel


# ========== REQUEST SCHEMAS ==========

class ProjectCreateIn(UTF8SafeModel):
    """
    Request para crear un proyecto.

    `create_dropbox_folder` sin valor → se crea la carpeta solo si Dropbox
    está configurado.
    """
    name: str = Field(..., min_length=1, max_length=255, description="Nombre del proyecto")
    client_id: str = Field(..., min_length=1, description="Cliente del proyecto")
    description: Optional[str] = Field(None, max_length=5000)
    type: ProjectType = Field(default=ProjectType.RESIDENTIAL)
    due_date: Optional[datetime] = None
    budget: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    street_address: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=128)
    postal_code: Optional[str] = Field(None, max_length=32)
    create_dropbox_folder: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        """Valida que el nombre no esté vacío"""
        if not v.strip():
            raise ValueError("El nombre del proyecto no puede estar vacío")
        return v.strip()

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Villa Rosenthal",
                "client_id": "3f1c2d...",
                "type": "RESIDENTIAL",
                "city": "Tel Aviv",
                "budget": "250000.00",
            }
        }
    )


class ProjectUpdateIn(UTF8SafeModel):
    """Edición parcial (lista blanca). Los campos omitidos no se tocan."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=5000)
    type: Optional[ProjectType] = None
    due_date: Optional[datetime] = None
    budget: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    street_address: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=128)
    postal_code: Optional[str] = Field(None, max_length=32)
    dropbox_folder: Optional[str] = Field(None, max_length=1024)


class ProjectStatusIn(UTF8SafeModel):
    status: ProjectStatus


# ========== RESPONSE SCHEMAS ==========

class ProjectRead(UTF8SafeModel):
    id: str
    name: str
    description: Optional[str] = None
    type: ProjectType
    status: ProjectStatus
    client_id: str
    due_date: Optional[datetime] = None
    budget: Optional[Decimal] = None
    dropbox_folder: Optional[str] = None
    street_address: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    created_by_id: Optional[str] = None
    updated_by_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProjectListResponse(UTF8SafeModel):
    items: List[ProjectRead]
    total: int


class ProjectDetailRead(ProjectRead):
    """Proyecto con cliente, rooms (con progreso) y progreso global."""
    client: Optional[ClientRead] = None
    rooms: List[RoomRead] = Field(default_factory=list)
    progress: int = 0


__all__ = [
    "ProjectCreateIn",
    "ProjectUpdateIn",
    "ProjectStatusIn",
    "ProjectRead",
    "ProjectListResponse",
    "ProjectDetailRead",
]

# Fin del archivo backend/app/modules/projects/schemas/project_schemas.py
