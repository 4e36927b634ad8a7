# -*- coding: utf-8 -*-
"""
backend/tests/conftest.py

Config global de tests para Atelier.

- Fuerza PYTHON_ENV=test antes de importar la app (SQLite en memoria,
  scheduler apagado, email en modo consola).
- Engine SQLite async por test con todas las tablas creadas.
- Factories para sembrar usuarios, clientes, proyectos y rooms.
- App completa + cliente httpx con ciclo de vida (asgi-lifespan).

Autor: Atelier
Fecha: 12/08/2026
"""

import os
from collections.abc import AsyncIterator

# -----------------------------------------------------------------------------
# 0) Entorno de pruebas (antes de cualquier import de app.*)
# -----------------------------------------------------------------------------
os.environ["PYTHON_ENV"] = "test"
os.environ.setdefault("SCHEDULER_ENABLED", "false")
os.environ.setdefault("EMAIL_MODE", "console")

import pytest
from httpx import ASGITransport, AsyncClient
from asgi_lifespan import LifespanManager
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.shared.config import get_settings
from app.shared.database.database import build_engine, create_all_tables
from app.shared.integrations.email_sender import StubEmailSender


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Cada test ve la configuración según sus propias env vars."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# -----------------------------------------------------------------------------
# 1) Base de datos
# -----------------------------------------------------------------------------
@pytest.fixture
async def db_engine():
    engine = build_engine("sqlite+aiosqlite:///:memory:", echo=False)
    await create_all_tables(bind=engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncIterator[AsyncSession]:
    maker = async_sessionmaker(bind=db_engine, class_=AsyncSession, expire_on_commit=False)
    async with maker() as session:
        yield session


@pytest.fixture
def email_sender() -> StubEmailSender:
    return StubEmailSender()


# -----------------------------------------------------------------------------
# 2) Factories de datos
# -----------------------------------------------------------------------------
@pytest.fixture
def create_user(db_session):
    """Inserta un User activo. Sin contraseña salvo que se pase password_hash."""
    from app.modules.auth.enums import UserRole
    from app.modules.auth.models import User

    counter = {"n": 0}

    async def _create(**overrides):
        counter["n"] += 1
        data = {
            "name": f"User {counter['n']}",
            "email": f"user{counter['n']}@example.com",
            "role": UserRole.DESIGNER,
            "email_notifications_enabled": True,
            "is_active": True,
        }
        data.update(overrides)
        user = User(**data)
        db_session.add(user)
        await db_session.commit()
        return user

    return _create


@pytest.fixture
def create_project(db_session):
    """Inserta Client + Project y devuelve el proyecto."""
    from app.modules.clients.models import Client
    from app.modules.projects.enums import ProjectStatus
    from app.modules.projects.models import Project

    async def _create(name: str = "Villa Serena", **overrides):
        client = Client(name=overrides.pop("client_name", "Ana Ortega"))
        db_session.add(client)
        await db_session.flush()
        project = Project(name=name, client_id=client.id, status=ProjectStatus.IN_PROGRESS, **overrides)
        db_session.add(project)
        await db_session.commit()
        return project

    return _create


@pytest.fixture
def create_room(db_session):
    """Crea un room con sus cinco fases mediante RoomFacade."""
    from app.modules.rooms.enums import RoomType
    from app.modules.rooms.facades.room_facade import RoomFacade

    async def _create(project_id: str, *, type=RoomType.KITCHEN, name=None, actor_id=None):
        return await RoomFacade(db_session).create_room(
            project_id, actor_id=actor_id, type=type, name=name
        )

    return _create


# -----------------------------------------------------------------------------
# 3) App completa
# -----------------------------------------------------------------------------
@pytest.fixture
def app():
    """Construye la app después de fijar las env vars de prueba."""
    from app.main import create_app
    return create_app()


@pytest.fixture
async def async_client(app) -> AsyncIterator[AsyncClient]:
    """Cliente HTTP asíncrono con startup/shutdown gestionados por asgi-lifespan."""
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client

# Fin del archivo backend/tests/conftest.py
