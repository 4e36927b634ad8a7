# -*- coding: utf-8 -*-
"""
backend/app/shared/database/base.py

Base declarativa y convención de nombres para modelos ORM.

Este módulo proporciona:
- Base: clase base declarativa de SQLAlchemy
- NAMING_CONVENTION: convención de nombres para constraints
- as_str_enum: helper para mapear enums Python a columnas VARCHAR con CHECK
- new_id: generador de identificadores (uuid4 hex)
- TimestampMixin: columnas created_at / updated_at

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import uuid
from datetime import datetime
from enum import Enum
from typing import Type

from sqlalchemy import DateTime, Enum as SQLEnum, MetaData, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from app.shared.database.transactions import now_utc

# ===== NAMING CONVENTION =====
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


# ===== BASE DECLARATIVA =====
class Base(DeclarativeBase):
    """
    Base declarativa para todos los modelos ORM de Atelier.
    Incluye convención de nombres para constraints.
    """
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def new_id() -> str:
    """Identificador opaco de 32 caracteres (uuid4 en hex)."""
    return uuid.uuid4().hex


class TimestampMixin:
    """Columnas de auditoría temporal comunes a casi todas las tablas."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=now_utc, server_default=func.now(), index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=now_utc,
        server_default=func.now(),
        onupdate=now_utc,
    )


# ===== HELPER GENÉRICO PARA ENUMS =====
def as_str_enum(enum_cls: Type[Enum], name: str | None = None) -> SQLEnum:
    """
    Devuelve un tipo Enum de SQLAlchemy portable (VARCHAR + CHECK) basado en un Enum de Python.

    Uso típico:

        from app.shared.database.base import Base, as_str_enum
        from .enums import StageStatus

        class Stage(Base):
            status: Mapped[StageStatus] = mapped_column(
                as_str_enum(StageStatus), nullable=False,
            )

    - No usa ENUM nativo de PostgreSQL: la misma definición funciona en SQLite (tests).
    - Persiste el `.value` del enum, no el nombre del miembro.
    """
    enum_name = name or getattr(enum_cls, "__db_enum_name__", enum_cls.__name__.lower())

    def _values(_: object) -> list[str]:
        return [e.value for e in enum_cls]  # type: ignore[arg-type]

    return SQLEnum(
        enum_cls,
        name=enum_name,
        native_enum=False,
        create_constraint=True,
        length=32,
        values_callable=_values,
        validate_strings=True,
    )


__all__ = ["Base", "NAMING_CONVENTION", "as_str_enum", "new_id", "TimestampMixin"]

# Fin del archivo backend/app/shared/database/base.py
