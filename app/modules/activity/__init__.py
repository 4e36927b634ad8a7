# -*- coding: utf-8 -*-
"""
backend/app/modules/activity/__init__.py

Módulo de registro de actividad: vocabulario de acciones, helpers de
atribución (sin commit) y feed de consulta decorado para UI.

Autor: Atelier
Fecha: 12/08/2026
"""

# Paquete liviano: no importes modelos ni rutas aquí.
__all__ = []
