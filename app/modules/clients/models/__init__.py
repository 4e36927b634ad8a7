# -*- coding: utf-8 -*-
"""
backend/app/modules/clients/models/__init__.py
"""

from .client_models import Client

__all__ = ["Client"]
