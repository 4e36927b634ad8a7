# -*- coding: utf-8 -*-
"""
backend/app/shared/database/database.py

SQLAlchemy async para Atelier.
- PostgreSQL (asyncpg) en desarrollo/producción.
- SQLite (aiosqlite) en memoria para tests.

Provee:
- engine (create_async_engine)
- SessionLocal (async_sessionmaker)
- Base (DeclarativeBase con naming convention)
- Dependencias FastAPI: get_async_session / get_db
- context manager: session_scope()
- create_all_tables() para entornos sin migraciones
- check_database_health()

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.shared.config import settings
from app.shared.database.base import Base  # reutilizamos la Base única

logger = logging.getLogger(__name__)


def build_engine(url: str | None = None, echo: bool | None = None) -> AsyncEngine:
    """
    Construye el engine async según el driver de la URL.

    SQLite en memoria usa StaticPool para que todas las sesiones
    compartan la misma conexión (y por tanto la misma BD).
    """
    url = url or settings.database_url
    echo = settings.db_echo_sql if echo is None else echo

    if url.startswith("sqlite"):
        return create_async_engine(
            url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    return create_async_engine(
        url,
        echo=echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        pool_recycle=settings.db_pool_recycle,
        pool_pre_ping=settings.db_pool_pre_ping,
    )


engine: AsyncEngine = build_engine()
SessionLocal = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

logger.debug("[DB] Engine listo → %s", engine.url.render_as_string(hide_password=True))


# ── Dependencias FastAPI
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        try:
            yield session
        except SQLAlchemyError:
            # Importante: rollback para liberar cualquier transacción/lock
            await session.rollback()
            raise
        finally:
            if session.in_transaction():
                await session.rollback()


# Alias usado por las dependencias de los módulos
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async for session in get_async_session():
        yield session


# ── Context manager reutilizable en jobs/scripts
@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        try:
            yield session
            # Dejo el commit/rollback a quien use el scope; esto es solo un helper
        finally:
            if session.in_transaction():
                await session.rollback()


async def create_all_tables(bind: AsyncEngine | None = None) -> None:
    """Crea todas las tablas registradas en Base.metadata (solo dev/test)."""
    # Importa los modelos para registrarlos en la metadata
    import app.modules.models_registry  # noqa: F401

    target = bind or engine
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("[DB] Tablas creadas/verificadas (%d)", len(Base.metadata.tables))


# ── Health check
async def check_database_health(timeout_s: float = 3.0, sql: str = "SELECT 1") -> bool:
    """
    Verifica conectividad a la base de datos.

    Args:
        timeout_s: Tiempo máximo de espera en segundos
        sql: Query SQL a ejecutar (default: "SELECT 1")

    Returns:
        True si la conexión es exitosa, False en caso contrario
    """
    try:
        async with asyncio.timeout(timeout_s):
            async with engine.connect() as conn:
                await conn.execute(text(sql))
        return True
    except (SQLAlchemyError, OSError, TimeoutError) as e:
        logger.warning("[DB] Health check falló: %s", e)
        return False


__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "build_engine",
    "get_async_session",
    "get_db",
    "session_scope",
    "create_all_tables",
    "check_database_health",
]
# Fin del archivo backend/app/shared/database/database.py
