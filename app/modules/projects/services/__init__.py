# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/services/__init__.py

Servicios de aplicación del módulo Projects (comandos y consultas).
"""

from .commands import ProjectsCommandService
from .queries import ProjectsQueryService

__all__ = ["ProjectsCommandService", "ProjectsQueryService"]
