# -*- coding: utf-8 -*-
"""
backend/app/modules/activity/enums/activity_type_enum.py

Vocabulario único del registro de actividad:
- ActivityType: acciones registradas
- EntityType: entidades a las que apunta cada registro
- ActivityCategory: agrupación para filtros de UI
- ACTIVITY_TYPE_META: etiqueta, icono, color y categoría por acción

Autor: Atelier
Fecha: 12/08/2026
"""
from enum import StrEnum
from typing import NamedTuple


class ActivityType(StrEnum):
    # Proyectos
    PROJECT_CREATED = "PROJECT_CREATED"
    PROJECT_UPDATED = "PROJECT_UPDATED"
    PROJECT_STATUS_CHANGED = "PROJECT_STATUS_CHANGED"
    PROJECT_DELETED = "PROJECT_DELETED"
    # Rooms
    ROOM_CREATED = "ROOM_CREATED"
    ROOM_UPDATED = "ROOM_UPDATED"
    ROOM_STATUS_CHANGED = "ROOM_STATUS_CHANGED"
    ROOM_DELETED = "ROOM_DELETED"
    # Stages
    STAGE_STARTED = "STAGE_STARTED"
    STAGE_COMPLETED = "STAGE_COMPLETED"
    STAGE_REOPENED = "STAGE_REOPENED"
    STAGE_ASSIGNED = "STAGE_ASSIGNED"
    STAGE_STATUS_CHANGED = "STAGE_STATUS_CHANGED"
    STAGE_UPDATED = "STAGE_UPDATED"
    # Assets
    ASSET_UPLOADED = "ASSET_UPLOADED"
    ASSET_DELETED = "ASSET_DELETED"
    # Chat
    CHAT_MESSAGE_SENT = "CHAT_MESSAGE_SENT"
    CHAT_MESSAGE_EDITED = "CHAT_MESSAGE_EDITED"
    CHAT_MESSAGE_DELETED = "CHAT_MESSAGE_DELETED"
    CHAT_MENTION = "CHAT_MENTION"
    # Equipo
    USER_CREATED = "USER_CREATED"
    USER_UPDATED = "USER_UPDATED"
    USER_ROLE_CHANGED = "USER_ROLE_CHANGED"
    # Sesión
    LOGIN = "LOGIN"
    # Clientes
    CLIENT_CREATED = "CLIENT_CREATED"
    CLIENT_UPDATED = "CLIENT_UPDATED"
    CLIENT_DELETED = "CLIENT_DELETED"


class EntityType(StrEnum):
    PROJECT = "PROJECT"
    ROOM = "ROOM"
    STAGE = "STAGE"
    ASSET = "ASSET"
    CHAT_MESSAGE = "CHAT_MESSAGE"
    USER = "USER"
    CLIENT = "CLIENT"


class ActivityCategory(StrEnum):
    PROJECTS = "Projects"
    ROOMS = "Rooms"
    STAGES = "Stages"
    ASSETS = "Assets"
    CHAT = "Chat"
    TEAM = "Team"
    CLIENTS = "Clients"
    SYSTEM = "System"


class ActivityTypeMeta(NamedTuple):
    label: str
    icon: str
    color: str
    category: ActivityCategory


_C = ActivityCategory

ACTIVITY_TYPE_META: dict[ActivityType, ActivityTypeMeta] = {
    ActivityType.PROJECT_CREATED: ActivityTypeMeta("Project created", "FolderPlus", "text-blue-600", _C.PROJECTS),
    ActivityType.PROJECT_UPDATED: ActivityTypeMeta("Project updated", "Edit", "text-blue-600", _C.PROJECTS),
    ActivityType.PROJECT_STATUS_CHANGED: ActivityTypeMeta("Project status changed", "GitBranch", "text-blue-600", _C.PROJECTS),
    ActivityType.PROJECT_DELETED: ActivityTypeMeta("Project deleted", "Trash2", "text-red-600", _C.PROJECTS),

    ActivityType.ROOM_CREATED: ActivityTypeMeta("Room created", "Plus", "text-green-600", _C.ROOMS),
    ActivityType.ROOM_UPDATED: ActivityTypeMeta("Room updated", "Edit", "text-green-600", _C.ROOMS),
    ActivityType.ROOM_STATUS_CHANGED: ActivityTypeMeta("Room status changed", "GitBranch", "text-green-600", _C.ROOMS),
    ActivityType.ROOM_DELETED: ActivityTypeMeta("Room deleted", "Trash2", "text-red-600", _C.ROOMS),

    ActivityType.STAGE_STARTED: ActivityTypeMeta("Stage started", "Play", "text-indigo-600", _C.STAGES),
    ActivityType.STAGE_COMPLETED: ActivityTypeMeta("Stage completed", "CheckCircle2", "text-green-600", _C.STAGES),
    ActivityType.STAGE_REOPENED: ActivityTypeMeta("Stage reopened", "RotateCcw", "text-orange-600", _C.STAGES),
    ActivityType.STAGE_ASSIGNED: ActivityTypeMeta("Stage assigned", "UserPlus", "text-purple-600", _C.STAGES),
    ActivityType.STAGE_STATUS_CHANGED: ActivityTypeMeta("Stage status changed", "GitBranch", "text-indigo-600", _C.STAGES),
    ActivityType.STAGE_UPDATED: ActivityTypeMeta("Stage updated", "Edit", "text-indigo-600", _C.STAGES),

    ActivityType.ASSET_UPLOADED: ActivityTypeMeta("Asset uploaded", "Upload", "text-green-600", _C.ASSETS),
    ActivityType.ASSET_DELETED: ActivityTypeMeta("Asset deleted", "Trash2", "text-red-600", _C.ASSETS),

    ActivityType.CHAT_MESSAGE_SENT: ActivityTypeMeta("Message sent", "MessageCircle", "text-blue-600", _C.CHAT),
    ActivityType.CHAT_MESSAGE_EDITED: ActivityTypeMeta("Message edited", "Edit", "text-blue-600", _C.CHAT),
    ActivityType.CHAT_MESSAGE_DELETED: ActivityTypeMeta("Message deleted", "Trash2", "text-red-600", _C.CHAT),
    ActivityType.CHAT_MENTION: ActivityTypeMeta("Mentioned in chat", "AtSign", "text-indigo-600", _C.CHAT),

    ActivityType.USER_CREATED: ActivityTypeMeta("User created", "UserPlus", "text-green-600", _C.TEAM),
    ActivityType.USER_UPDATED: ActivityTypeMeta("User updated", "Edit", "text-blue-600", _C.TEAM),
    ActivityType.USER_ROLE_CHANGED: ActivityTypeMeta("User role changed", "Shield", "text-purple-600", _C.TEAM),

    ActivityType.LOGIN: ActivityTypeMeta("Logged in", "LogIn", "text-green-600", _C.SYSTEM),

    ActivityType.CLIENT_CREATED: ActivityTypeMeta("Client created", "UserPlus", "text-teal-600", _C.CLIENTS),
    ActivityType.CLIENT_UPDATED: ActivityTypeMeta("Client updated", "Edit", "text-teal-600", _C.CLIENTS),
    ActivityType.CLIENT_DELETED: ActivityTypeMeta("Client deleted", "Trash2", "text-red-600", _C.CLIENTS),
}

# Meta usada cuando la acción no pertenece al vocabulario
FALLBACK_META = ActivityTypeMeta("Activity", "Activity", "text-gray-600", _C.SYSTEM)


__all__ = [
    "ActivityType",
    "EntityType",
    "ActivityCategory",
    "ActivityTypeMeta",
    "ACTIVITY_TYPE_META",
    "FALLBACK_META",
]

# Fin del archivo backend/app/modules/activity/enums/activity_type_enum.py
