# -*- coding: utf-8 -*-
"""
backend/app/shared/database/transactions.py

Utilidades base compartidas por los facades de todos los módulos.
Helpers de timestamps y operaciones transaccionales async.

Autor: Atelier
Fecha: 12/08/2026
"""

import datetime as dt
from typing import Awaitable, Callable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


def now_utc() -> dt.datetime:
    """
    Retorna timestamp actual UTC.

    Centralizado para facilitar testing con mocks.
    """
    return dt.datetime.now(dt.timezone.utc)


async def commit_or_raise(db: AsyncSession, work: Callable[[], Awaitable[T]]) -> T:
    """
    Ejecuta work() dentro de un contexto transaccional.

    Aplica commit si work() tiene éxito.
    Aplica rollback y re-lanza si work() falla.

    Args:
        db: AsyncSession SQLAlchemy
        work: Corrutina (sin argumentos) a ejecutar dentro de la transacción

    Returns:
        Resultado de work()

    Raises:
        Cualquier excepción lanzada por work() o por el commit
    """
    try:
        result = await work()
        await db.commit()
        return result
    except Exception:
        await db.rollback()
        raise


__all__ = ["now_utc", "commit_or_raise"]
# Fin del archivo backend/app/shared/database/transactions.py
