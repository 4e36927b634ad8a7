# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/schemas/__init__.py
"""

from .auth_schemas import LoginRequest, UserSummary, UserRead, LoginResponse
from .team_schemas import TeamMemberCreate, TeamMemberUpdate, MessageResponse

__all__ = [
    "LoginRequest",
    "UserSummary",
    "UserRead",
    "LoginResponse",
    "TeamMemberCreate",
    "TeamMemberUpdate",
    "MessageResponse",
]
