# -*- coding: utf-8 -*-
"""
backend/app/modules/clients/routes/__init__.py
"""

from fastapi import APIRouter

from .clients_routes import router as clients_router


def get_clients_router() -> APIRouter:
    return clients_router
