# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_testing.py

Overrides para entorno de PRUEBAS (test) usando Pydantic v2.
Busca ser determinista: logging moderado, SQLite en memoria,
scheduler apagado y email en modo consola.

Autor: Atelier
Fecha: 12/08/2026
"""

from typing import Literal, Optional

from pydantic import SecretStr
from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class EnvTestingSettings(BaseAppSettings):
    # --- Identidad de entorno ---
    python_env: Literal["development", "test", "production"] = "test"

    # --- Logging en test: menos ruido ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["plain", "pretty", "json"] = "pretty"

    # --- Base de datos: SQLite async en memoria ---
    db_url: Optional[str] = "sqlite+aiosqlite:///:memory:"
    db_create_all: bool = True

    # --- Auth: secreto estable para firmar tokens en pruebas ---
    jwt_secret_key: SecretStr = SecretStr("test-secret-key-with-at-least-32-characters")

    # --- Integraciones apagadas ---
    email_mode: Literal["console", "api"] = "console"
    scheduler_enabled: bool = False
    http_metrics_enabled: bool = False

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]
# Fin del archivo backend/app/shared/config/settings_testing.py
