# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/__init__.py

Módulo de notificaciones in-app:
- bandeja por usuario (leer, marcar, borrar)
- flujo de "fase lista" al completar una fase
- recordatorios de fechas de entrega (job programado)

Autor: Atelier
Fecha: 12/08/2026
"""

# Paquete liviano: no importes modelos ni rutas aquí.
__all__ = []
