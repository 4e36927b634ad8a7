# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/routes/deps.py

Dependencias inyectables para los servicios reales de Projects.
Tests pueden overridear estas dependencias con InMemoryProjectsService.

Autor: Atelier
Fecha: 12/08/2026
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.database import get_db
from app.modules.projects.services import (
    ProjectsCommandService,
    ProjectsQueryService,
)


async def get_projects_command_service(
    db: AsyncSession = Depends(get_db),
) -> ProjectsCommandService:
    """Servicio real para comandos de Projects."""
    return ProjectsCommandService(db)


async def get_projects_query_service(
    db: AsyncSession = Depends(get_db),
) -> ProjectsQueryService:
    """Servicio real para consultas de Projects."""
    return ProjectsQueryService(db)
# Fin del archivo backend/app/modules/projects/routes/deps.py
