# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/facades/__init__.py

Facades de rooms y stages.
"""

# Paquete liviano: importa los submódulos directamente
# (room_facade, stage_facade, phase_utils, assignment, ...).
