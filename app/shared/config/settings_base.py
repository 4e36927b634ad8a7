# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_base.py

Base de configuración (Pydantic v2) para Atelier.
- Esta clase NO instancia singletons ni resuelve .env; eso lo hace config_loader.
- Es la base para settings_dev.py, settings_testing.py y settings_prod.py.

Autor: Atelier
Fecha: 12/08/2026
"""

from typing import Literal, Optional
from pydantic import Field, SecretStr, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Tipos de entorno soportados
EnvName = Literal["development", "test", "production"]

DEFAULT_JWT_SECRET = "please-change-me"


class BaseAppSettings(BaseSettings):
    # =========================
    # Núcleo de la aplicación
    # =========================
    python_env: EnvName = Field(default="development", validation_alias="PYTHON_ENV")
    app_name: str = Field(default="Atelier", validation_alias="APP_NAME")
    app_version: str = Field(default="0.1.0", validation_alias="APP_VERSION")
    app_host: str = Field(default="0.0.0.0", validation_alias="APP_HOST")
    app_port: int = Field(default=8000, validation_alias="APP_PORT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", validation_alias="LOG_LEVEL"
    )
    log_format: Literal["plain", "pretty", "json"] = Field(default="plain", validation_alias="LOG_FORMAT")

    # =========================
    # Base de datos (PostgreSQL)
    # =========================
    db_user: str = Field(default="postgres", validation_alias="DB_USER")
    db_password: SecretStr = Field(default=SecretStr("postgres"), validation_alias="DB_PASSWORD")
    db_host: str = Field(default="localhost", validation_alias="DB_HOST")
    db_port: int = Field(default=5432, validation_alias="DB_PORT")
    db_name: str = Field(default="atelier", validation_alias="DB_NAME")
    db_pool_size: int = Field(default=5, validation_alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=5, validation_alias="DB_MAX_OVERFLOW")
    db_pool_timeout: int = Field(default=5, validation_alias="DB_POOL_TIMEOUT")
    db_pool_recycle: int = Field(default=1800, validation_alias="DB_POOL_RECYCLE")
    db_pool_pre_ping: bool = Field(default=True, validation_alias="DB_POOL_PRE_PING")
    db_echo_sql: bool = Field(default=False, validation_alias="DB_ECHO_SQL")
    db_url: Optional[str] = Field(default=None, validation_alias="DB_URL")
    db_create_all: bool = Field(default=False, validation_alias="DB_CREATE_ALL")

    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        """
        Genera la URL de conexión completa para SQLAlchemy async.
        Prioriza DB_URL si existe, sino construye desde componentes individuales.
        """
        from urllib.parse import quote_plus

        if self.db_url:
            url = self.db_url
            # SQLite (tests/desarrollo local) se respeta tal cual
            if url.startswith("sqlite"):
                return url
            return (
                url.replace("postgres://", "postgresql+asyncpg://")
                   .replace("postgresql://", "postgresql+asyncpg://")
            )

        pw = quote_plus(self.db_password.get_secret_value())
        return (
            f"postgresql+asyncpg://{self.db_user}:{pw}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    # =========================
    # HTTP Metrics (observabilidad)
    # =========================
    http_metrics_enabled: bool = Field(default=True, validation_alias="HTTP_METRICS_ENABLED")

    # =========================
    # CORS / Frontend
    # =========================
    allowed_origins: str = Field(default="*", validation_alias="CORS_ORIGINS")
    frontend_url: str = Field(default="http://localhost:3000", validation_alias="FRONTEND_URL")

    # =========================
    # Auth / JWT
    # =========================
    jwt_secret_key: SecretStr = Field(default=SecretStr(DEFAULT_JWT_SECRET), validation_alias="JWT_SECRET_KEY")
    jwt_algorithm: Literal["HS256"] = Field(default="HS256", validation_alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(default=60 * 12, validation_alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    # =========================
    # Email
    # =========================
    email_mode: Literal["console", "api"] = Field(default="console", validation_alias="EMAIL_MODE")
    email_timeout_sec: int = Field(default=30, validation_alias="EMAIL_TIMEOUT_SEC")
    mailersend_api_key: Optional[SecretStr] = Field(default=None, validation_alias="MAILERSEND_API_KEY")
    mailersend_from_email: Optional[str] = Field(default=None, validation_alias="MAILERSEND_FROM_EMAIL")
    mailersend_from_name: str = Field(default="Atelier", validation_alias="MAILERSEND_FROM_NAME")

    # =========================
    # Dropbox (Business / Team)
    # =========================
    dropbox_access_token: Optional[SecretStr] = Field(default=None, validation_alias="DROPBOX_ACCESS_TOKEN")
    dropbox_refresh_token: Optional[SecretStr] = Field(default=None, validation_alias="DROPBOX_REFRESH_TOKEN")
    dropbox_app_key: Optional[str] = Field(default=None, validation_alias="DROPBOX_APP_KEY")
    dropbox_app_secret: Optional[SecretStr] = Field(default=None, validation_alias="DROPBOX_APP_SECRET")
    # JSON con la lista de miembros; se interpreta en la integración de Dropbox
    dropbox_team_members: str = Field(default="", validation_alias="DROPBOX_TEAM_MEMBERS")
    dropbox_api_select_user: Optional[str] = Field(default=None, validation_alias="DROPBOX_API_SELECT_USER")
    dropbox_root_namespace_id: Optional[str] = Field(default=None, validation_alias="DROPBOX_ROOT_NAMESPACE_ID")
    dropbox_team_folder_name: str = Field(default="Atelier Team Folder", validation_alias="DROPBOX_TEAM_FOLDER_NAME")
    dropbox_team_namespace_id: Optional[str] = Field(default=None, validation_alias="DROPBOX_TEAM_NAMESPACE_ID")
    dropbox_timeout_sec: int = Field(default=30, validation_alias="DROPBOX_TIMEOUT_SEC")

    # =========================
    # Scheduler
    # =========================
    scheduler_enabled: bool = Field(default=True, validation_alias="SCHEDULER_ENABLED")
    due_date_reminder_cron: str = Field(default="0 8 * * *", validation_alias="DUE_DATE_REMINDER_CRON")
    due_date_reminder_window_days: int = Field(default=2, validation_alias="DUE_DATE_REMINDER_WINDOW_DAYS")

    # ===== Helpers de entorno =====
    @computed_field  # type: ignore[misc]
    @property
    def is_dev(self) -> bool:
        return self.python_env == "development"

    @computed_field  # type: ignore[misc]
    @property
    def is_test(self) -> bool:
        return self.python_env == "test"

    @computed_field  # type: ignore[misc]
    @property
    def is_prod(self) -> bool:
        return self.python_env == "production"

    @computed_field  # type: ignore[misc]
    @property
    def dropbox_configured(self) -> bool:
        """True si hay credenciales suficientes para hablar con Dropbox."""
        has_refresh = bool(self.dropbox_refresh_token and self.dropbox_app_key and self.dropbox_app_secret)
        return has_refresh or bool(self.dropbox_access_token)

    @computed_field  # type: ignore[misc]
    @property
    def jwt_secret(self) -> str:
        """Alias de conveniencia: jwt_secret_key -> jwt_secret"""
        return self.jwt_secret_key.get_secret_value()

    # ===== Utilidad para normalizar CORS =====
    def get_cors_origins(self) -> list[str]:
        """Convierte allowed_origins en lista procesable para CORS middleware."""
        if not self.allowed_origins or self.allowed_origins == "*":
            return ["*"]
        return [o.strip().strip('"').strip("'") for o in self.allowed_origins.split(",") if o.strip()]

    def _security_checks(self) -> None:
        """
        Validaciones mínimas de seguridad y coherencia.
        Se invoca desde config_loader tras instanciar el settings.
        """
        import logging
        logger = logging.getLogger(__name__)

        jwt_key = self.jwt_secret_key.get_secret_value()
        weak_jwt = not jwt_key or jwt_key == DEFAULT_JWT_SECRET or len(jwt_key) < 32

        if self.is_prod and weak_jwt:
            raise ValueError("JWT_SECRET_KEY debe tener ≥32 caracteres en producción")
        if self.is_dev and weak_jwt:
            logger.info("ℹ️ JWT_SECRET_KEY es débil o usa valor por defecto")

        if self.email_mode == "api":
            if not self.mailersend_api_key or not self.mailersend_from_email:
                raise ValueError("EMAIL_MODE=api requiere MAILERSEND_API_KEY y MAILERSEND_FROM_EMAIL.")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


__all__ = ["BaseAppSettings", "EnvName", "DEFAULT_JWT_SECRET"]
# Fin del archivo backend/app/shared/config/settings_base.py
