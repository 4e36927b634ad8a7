# -*- coding: utf-8 -*-
"""
backend/app/modules/chat/__init__.py

Módulo de chat por fase (stage): mensajes con menciones, adjuntos,
hilos (parent_message_id), edición, borrado lógico y reacciones.

Autor: Atelier
Fecha: 12/08/2026
"""

# Paquete liviano: no importes modelos ni rutas aquí.
__all__ = []
