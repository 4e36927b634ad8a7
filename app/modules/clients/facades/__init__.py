# -*- coding: utf-8 -*-
"""
backend/app/modules/clients/facades/__init__.py
"""

from .errors import ClientNotFound, ClientHasProjects
from .client_facade import ClientFacade

__all__ = ["ClientNotFound", "ClientHasProjects", "ClientFacade"]
