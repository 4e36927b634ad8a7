# -*- coding: utf-8 -*-
"""
backend/app/modules/clients/services/__init__.py
"""

from .clients_service import ClientsService

__all__ = ["ClientsService"]
