# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/enums/notification_type_enum.py

Tipos de notificación in-app y tipos de entidad relacionada.

Autor: Atelier
Fecha: 12/08/2026
"""
from enum import StrEnum


class NotificationType(StrEnum):
    STAGE_ASSIGNED = "STAGE_ASSIGNED"
    STAGE_COMPLETED = "STAGE_COMPLETED"
    MENTION = "MENTION"
    CHAT_MESSAGE = "CHAT_MESSAGE"
    MESSAGE_REACTION = "MESSAGE_REACTION"
    DUE_DATE_REMINDER = "DUE_DATE_REMINDER"
    PROJECT_UPDATE = "PROJECT_UPDATE"


class RelatedType(StrEnum):
    STAGE = "STAGE"
    PROJECT = "PROJECT"
    ROOM = "ROOM"
    CHAT_MESSAGE = "CHAT_MESSAGE"


__all__ = ["NotificationType", "RelatedType"]

# Fin del archivo backend/app/modules/notifications/enums/notification_type_enum.py
