# -*- coding: utf-8 -*-
"""
backend/app/modules/files/__init__.py

Módulo Files: archivos de proyecto en Dropbox (navegación, búsqueda CAD,
subida y borrado con registro de actividad).

No hay tabla propia de archivos: Dropbox es la fuente de verdad y cada
subida/borrado queda en el activity log como ASSET_*.

Autor: Atelier
Fecha: 12/08/2026
"""

__all__ = []
