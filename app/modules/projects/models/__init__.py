# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/models/__init__.py

Barrel de modelos del módulo Projects.

Autor: Atelier
Fecha: 12/08/2026
"""

from .project_models import Project

__all__ = ["Project"]

# Fin del archivo backend/app/modules/projects/models/__init__.py
