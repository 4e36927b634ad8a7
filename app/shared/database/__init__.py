# -*- coding: utf-8 -*-
"""
backend/app/shared/database/__init__.py

Re-exporta utilidades comunes de base de datos.

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

from .database import (
    engine,
    SessionLocal,
    get_async_session,
    get_db,
    session_scope,
    create_all_tables,
    check_database_health,
)
from .base import Base, NAMING_CONVENTION, TimestampMixin, as_str_enum, new_id
from .transactions import commit_or_raise, now_utc

__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "NAMING_CONVENTION",
    "TimestampMixin",
    "as_str_enum",
    "new_id",
    "get_async_session",
    "get_db",
    "session_scope",
    "create_all_tables",
    "check_database_health",
    "commit_or_raise",
    "now_utc",
]

# Fin del archivo backend/app/shared/database/__init__.py
