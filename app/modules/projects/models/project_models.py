# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/models/project_models.py

Modelo SQLAlchemy de proyectos de diseño interior.

- client_id: cliente dueño del encargo (RESTRICT: un cliente con proyectos no se borra)
- dropbox_folder: ruta de la carpeta del proyecto en la team folder de Dropbox
- created_by_id / updated_by_id: atribución del último cambio

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, TimestampMixin, as_str_enum, new_id
from app.modules.projects.enums import ProjectStatus, ProjectType


class Project(TimestampMixin, Base):
    """
    Proyecto (encargo) de un cliente.

    Los rooms y sus stages cuelgan de project_id; el borrado en cascada
    se hace explícitamente desde el facade (no hay relationships ORM).
    """

    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    type: Mapped[ProjectType] = mapped_column(
        as_str_enum(ProjectType, name="project_type"),
        nullable=False,
        default=ProjectType.RESIDENTIAL,
    )
    status: Mapped[ProjectStatus] = mapped_column(
        as_str_enum(ProjectStatus, name="project_status"),
        nullable=False,
        default=ProjectStatus.DRAFT,
        index=True,
    )

    client_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("clients.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    due_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    budget: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2), nullable=True)
    dropbox_folder: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)

    # Dirección de obra
    street_address: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    postal_code: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    created_by_id: Mapped[Optional[str]] = mapped_column(
        String(32), ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    updated_by_id: Mapped[Optional[str]] = mapped_column(
        String(32), ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )

    __table_args__ = (
        Index("idx_projects_client_status", "client_id", "status"),
    )

    def __repr__(self) -> str:
        return f"<Project(id={self.id}, name='{self.name}', status={self.status})>"


__all__ = ["Project"]
# Fin del archivo backend/app/modules/projects/models/project_models.py
