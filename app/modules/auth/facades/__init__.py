# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/facades/__init__.py

Exporta fachadas y errores de dominio del módulo Auth.
"""

from .errors import (
    InvalidCredentials,
    UserNotFound,
    EmailAlreadyExists,
    PermissionDenied,
    CannotDeleteSelf,
)
from .auth_facade import AuthFacade, get_user_by_email, get_user_by_id
from .team_facade import TeamFacade, ALLOWED_UPDATE_FIELDS

__all__ = [
    "InvalidCredentials",
    "UserNotFound",
    "EmailAlreadyExists",
    "PermissionDenied",
    "CannotDeleteSelf",
    "AuthFacade",
    "get_user_by_email",
    "get_user_by_id",
    "TeamFacade",
    "ALLOWED_UPDATE_FIELDS",
]
