# -*- coding: utf-8 -*-
"""
backend/app/shared/config/__init__.py

Punto único de acceso a la configuración:
    from app.shared.config import settings

El objeto `settings` es un proxy perezoso: no instancia la configuración
al importar (evita validaciones prematuras en tests) y delega cada atributo
en config_loader.get_settings().

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

from typing import Any

from .config_loader import get_settings
from .logging_config import setup_logging
from .settings_base import BaseAppSettings


class _SettingsProxy:
    """Proxy que resuelve el singleton de settings en cada acceso."""

    __slots__ = ()

    def __getattr__(self, name: str) -> Any:
        return getattr(get_settings(), name)

    def __repr__(self) -> str:
        return f"<SettingsProxy env={get_settings().python_env!r}>"


# Singleton accesible como `settings` (lazy-load via get_settings)
settings = _SettingsProxy()

__all__ = ["settings", "get_settings", "setup_logging", "BaseAppSettings"]
# Fin del archivo backend/app/shared/config/__init__.py
