# -*- coding: utf-8 -*-
"""
backend/app/modules/clients/__init__.py

Módulo de clientes del estudio: alta, búsqueda, edición y baja
(la baja se rechaza mientras el cliente tenga proyectos).

Autor: Atelier
Fecha: 12/08/2026
"""

# Paquete liviano: no importes modelos ni rutas aquí.
__all__ = []
