# -*- coding: utf-8 -*-
"""
backend/app/modules/activity/facades/__init__.py

Exporta helpers de formato, de atribución y de consulta del registro de actividad.
"""

from .formatting import (
    get_type_meta,
    get_stage_display_name,
    format_description,
    get_activities_by_category,
    sanitize_context,
)
from .activity_logger import (
    log_activity,
    log_project_activity,
    log_room_activity,
    log_stage_activity,
    log_asset_activity,
    log_chat_activity,
)
from .activity_query_facade import ActivityQueryFacade, decorate_activity, list_activity_types

__all__ = [
    "get_type_meta",
    "get_stage_display_name",
    "format_description",
    "get_activities_by_category",
    "sanitize_context",
    "log_activity",
    "log_project_activity",
    "log_room_activity",
    "log_stage_activity",
    "log_asset_activity",
    "log_chat_activity",
    "ActivityQueryFacade",
    "decorate_activity",
    "list_activity_types",
]
