# -*- coding: utf-8 -*-
"""
backend/app/modules/clients/schemas/__init__.py
"""

from .client_schemas import ClientCreateIn, ClientUpdateIn, ClientRead

__all__ = ["ClientCreateIn", "ClientUpdateIn", "ClientRead"]
