# -*- coding: utf-8 -*-
"""
backend/app/shared/config/logging_config.py

Configuración centralizada de logging para Atelier.
Soporta formato plain (desarrollo), pretty (con timestamp) y json (producción).

Autor: Atelier
Fecha: 12/08/2026
"""

import logging.config
from typing import Iterable, Literal

from pythonjsonlogger.json import JsonFormatter

# Librerías ruidosas que se limitan a WARNING salvo que se pida DEBUG
NOISY_LOGGERS: tuple[str, ...] = (
    "httpx",
    "httpcore",
    "apscheduler",
    "sqlalchemy.engine",
    "aiosqlite",
)


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    fmt: Literal["plain", "pretty", "json"] = "plain",
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """
    Configura el sistema de logging de la aplicación.

    Args:
        level: Nivel de logging del root logger
        fmt: Formato de salida (plain, pretty, json)
        quiet: Loggers de terceros que se fijan en WARNING (salvo level=DEBUG)

    Ejemplos:
        >>> setup_logging("INFO", "plain")
        >>> setup_logging("WARNING", "json")
    """
    formatter = {"plain": "default", "pretty": "pretty", "json": "json"}.get(fmt, "default")

    formatters = {
        "default": {
            "format": "%(levelname)s [%(name)s]: %(message)s",
        },
        "pretty": {
            "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "json": {
            "()": JsonFormatter,
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
        },
    }

    third_party_level = "DEBUG" if level.upper() == "DEBUG" else "WARNING"
    loggers = {name: {"level": third_party_level} for name in quiet}

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": loggers,
        "root": {
            "handlers": ["console"],
            "level": level.upper(),
        },
    })


__all__ = ["setup_logging", "NOISY_LOGGERS"]
# Fin del archivo backend/app/shared/config/logging_config.py
