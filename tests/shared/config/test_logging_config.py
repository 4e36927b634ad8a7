# -*- coding: utf-8 -*-
"""
backend/tests/shared/config/test_logging_config.py

setup_logging: formatter según formato y niveles de librerías ruidosas.

Autor: Atelier
Fecha: 12/08/2026
"""

import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from app.shared.config.logging_config import NOISY_LOGGERS, setup_logging


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    setup_logging("WARNING", "pretty")


def _console_handler():
    return next(h for h in logging.getLogger().handlers if h.name == "console")


def test_json_format_uses_json_formatter():
    setup_logging("INFO", "json")
    assert isinstance(_console_handler().formatter, JsonFormatter)
    assert logging.getLogger().level == logging.INFO


def test_plain_format():
    setup_logging("WARNING", "plain")
    assert _console_handler().formatter._fmt == "%(levelname)s [%(name)s]: %(message)s"


def test_noisy_loggers_are_quieted():
    setup_logging("INFO", "plain")
    for name in NOISY_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_debug_lets_noisy_loggers_through():
    setup_logging("DEBUG", "pretty")
    assert logging.getLogger("httpx").level == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG

# Fin del archivo backend/tests/shared/config/test_logging_config.py
