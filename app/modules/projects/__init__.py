# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/__init__.py

Módulo de proyectos de Atelier.

Este módulo gestiona:
- Alta, edición y borrado de proyectos (con sus rooms y fases)
- Listado con filtros y detalle con progreso
- Cambio de status según el mapa de transiciones
- Carpeta del proyecto en Dropbox

Autor: Atelier
Fecha: 12/08/2026
"""

# Paquete liviano: no importes modelos aquí (para no disparar mapeos al importar enums).

__all__ = []
# Fin del archivo backend/app/modules/projects/__init__.py
