# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/__init__.py

Exportación de utilidades comunes.

Autor: Atelier
Fecha: 12/08/2026
"""

from .base_models import UTF8SafeModel, EmailStr, Field
from .security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
    verify_token_type,
)

__all__ = [
    "UTF8SafeModel",
    "EmailStr",
    "Field",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
    "verify_token_type",
]
