# -*- coding: utf-8 -*-
"""
backend/app/modules/models_registry.py

Importa todos los modelos ORM para registrarlos en Base.metadata.
Lo usan create_all_tables() (dev/test) y los fixtures de pruebas.

Autor: Atelier
Fecha: 12/08/2026
"""

from app.modules.auth.models import User  # noqa: F401
from app.modules.clients.models import Client  # noqa: F401
from app.modules.projects.models import Project  # noqa: F401
from app.modules.rooms.models import Room, Stage  # noqa: F401
from app.modules.activity.models import ActivityLog  # noqa: F401
from app.modules.notifications.models import Notification  # noqa: F401
from app.modules.chat.models import ChatMention, ChatMessage, ChatMessageReaction  # noqa: F401

__all__ = [
    "User",
    "Client",
    "Project",
    "Room",
    "Stage",
    "ActivityLog",
    "Notification",
    "ChatMessage",
    "ChatMention",
    "ChatMessageReaction",
]

# Fin del archivo backend/app/modules/models_registry.py
