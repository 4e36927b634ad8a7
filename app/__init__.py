# -*- coding: utf-8 -*-
"""
backend/app/__init__.py

Paquete principal del backend de Atelier (gestión de proyectos de
interiorismo: clientes, proyectos, rooms con fases, chat por fase,
notificaciones, actividad y archivos en Dropbox).

Los módulos internos se importan como 'app.*'.

Autor: Atelier
Fecha: 12/08/2026
"""

# Fin del archivo backend/app/__init__.py
