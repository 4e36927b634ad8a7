# -*- coding: utf-8 -*-
"""
backend/app/shared/__init__.py

Infraestructura compartida: configuración, base de datos, middlewares,
integraciones externas y scheduler.

No inicializa settings en import-time.
"""
