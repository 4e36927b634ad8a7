# -*- coding: utf-8 -*-
"""
backend/app/shared/config/config_loader.py

Elige la clase de settings según PYTHON_ENV, corre los chequeos de
seguridad y cachea la instancia.

Autor: Atelier
Actualizado: 12/08/2026
"""

import logging
import os
from functools import lru_cache
from typing import Dict, Type

from .settings_base import BaseAppSettings
from .settings_dev import DevSettings
from .settings_prod import ProdSettings
from .settings_testing import EnvTestingSettings

logger = logging.getLogger(__name__)

SETTINGS_BY_ENV: Dict[str, Type[BaseAppSettings]] = {
    "development": DevSettings,
    "test": EnvTestingSettings,
    "production": ProdSettings,
}


@lru_cache(maxsize=1)
def get_settings() -> BaseAppSettings:
    """
    Settings del entorno activo (singleton).

    Un PYTHON_ENV desconocido cae en DevSettings.

    Raises:
        ValueError: si falla algún chequeo de seguridad (JWT débil en
            producción, EMAIL_MODE=api sin credenciales)
    """
    env = os.getenv("PYTHON_ENV", "development").strip().lower()
    settings_cls = SETTINGS_BY_ENV.get(env)
    if settings_cls is None:
        logger.warning("[Config] PYTHON_ENV=%r desconocido; usando development", env)
        settings_cls = DevSettings

    settings = settings_cls()
    settings._security_checks()
    return settings


__all__ = ["get_settings", "SETTINGS_BY_ENV"]
# Fin del archivo backend/app/shared/config/config_loader.py
