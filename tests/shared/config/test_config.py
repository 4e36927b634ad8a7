# -*- coding: utf-8 -*-
"""
backend/tests/shared/config/test_config.py

Selección de settings por PYTHON_ENV, URL de base de datos y validaciones
de seguridad.

Autor: Atelier
Fecha: 12/08/2026
"""

import pytest

from app.shared.config import get_settings, settings
from app.shared.config.settings_base import BaseAppSettings

STRONG_SECRET = "s" * 40


def test_test_environment_defaults():
    s = get_settings()
    assert s.is_test is True
    assert s.database_url == "sqlite+aiosqlite:///:memory:"
    assert s.scheduler_enabled is False
    assert s.email_mode == "console"


def test_settings_proxy_delegates():
    assert settings.python_env == "test"
    assert "test" in repr(settings)


def test_production_rejects_weak_jwt(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    monkeypatch.delenv("JWT_SECRET_KEY", raising=False)
    with pytest.raises(ValueError, match="JWT_SECRET_KEY"):
        get_settings()


def test_production_settings(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    monkeypatch.setenv("JWT_SECRET_KEY", STRONG_SECRET)
    s = get_settings()
    assert s.is_prod is True
    assert s.log_format == "json"
    assert s.db_create_all is False


def test_api_email_mode_requires_credentials(monkeypatch):
    monkeypatch.setenv("EMAIL_MODE", "api")
    monkeypatch.delenv("MAILERSEND_API_KEY", raising=False)
    with pytest.raises(ValueError, match="MAILERSEND"):
        get_settings()


@pytest.mark.parametrize(
    "db_url,expected",
    [
        ("postgres://u:p@db:5432/atelier", "postgresql+asyncpg://u:p@db:5432/atelier"),
        ("postgresql://u:p@db/atelier", "postgresql+asyncpg://u:p@db/atelier"),
        ("sqlite+aiosqlite:///./local.db", "sqlite+aiosqlite:///./local.db"),
    ],
)
def test_database_url_from_db_url(db_url, expected):
    s = BaseAppSettings(_env_file=None, DB_URL=db_url)
    assert s.database_url == expected


def test_database_url_from_components(monkeypatch):
    monkeypatch.delenv("DB_URL", raising=False)
    s = BaseAppSettings(
        _env_file=None, DB_USER="studio", DB_PASSWORD="p@ss word", DB_HOST="pg", DB_PORT=6543, DB_NAME="atelier"
    )
    assert s.database_url == "postgresql+asyncpg://studio:p%40ss+word@pg:6543/atelier"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("*", ["*"]),
        ("", ["*"]),
        ("https://a.example.com, 'https://b.example.com' ,", ["https://a.example.com", "https://b.example.com"]),
    ],
)
def test_cors_origins(raw, expected):
    assert BaseAppSettings(_env_file=None, CORS_ORIGINS=raw).get_cors_origins() == expected


def test_dropbox_configured(monkeypatch):
    for var in ("DROPBOX_ACCESS_TOKEN", "DROPBOX_REFRESH_TOKEN", "DROPBOX_APP_KEY", "DROPBOX_APP_SECRET"):
        monkeypatch.delenv(var, raising=False)

    assert BaseAppSettings(_env_file=None).dropbox_configured is False
    assert BaseAppSettings(_env_file=None, DROPBOX_ACCESS_TOKEN="tok").dropbox_configured is True
    assert BaseAppSettings(_env_file=None, DROPBOX_REFRESH_TOKEN="r", DROPBOX_APP_KEY="k").dropbox_configured is False
    assert (
        BaseAppSettings(
            _env_file=None, DROPBOX_REFRESH_TOKEN="r", DROPBOX_APP_KEY="k", DROPBOX_APP_SECRET="s"
        ).dropbox_configured
        is True
    )

# Fin del archivo backend/tests/shared/config/test_config.py
