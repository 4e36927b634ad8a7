# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/__init__.py

Módulo de rooms y stages (flujo de fases de diseño por espacio):
- alta de rooms con sus 5 fases auto-asignadas por rol
- acciones por stage (start/complete/reopen/assign/...)
- actualización masiva de estados de fase
- reasignación de fases cuando cambia el rol de un miembro

Autor: Atelier
Fecha: 12/08/2026
"""

# Paquete liviano: no importes modelos ni rutas aquí.
__all__ = []
