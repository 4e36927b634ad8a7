# -*- coding: utf-8 -*-
"""
backend/app/modules/activity/facades/formatting.py

Funciones puras de presentación del registro de actividad:
metadatos por tipo, nombres de fase y descripciones legibles.

Las plantillas de texto quedan en inglés (producto), los `details`
usan claves camelCase tal como se persisten (projectName, roomName, ...).

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from app.modules.activity.enums import (
    ACTIVITY_TYPE_META,
    FALLBACK_META,
    ActivityCategory,
    ActivityType,
    ActivityTypeMeta,
)

_STAGE_DISPLAY_NAMES = {
    "DESIGN_CONCEPT": "Design Concept",
    "THREE_D": "3D Rendering",
    "CLIENT_APPROVAL": "Client Approval",
    "DRAWINGS": "Drawings",
    "FFE": "FFE",
    # Registros antiguos
    "DESIGN": "Design Concept",
}


def get_type_meta(action: str) -> ActivityTypeMeta:
    """Metadatos del tipo; acciones desconocidas caen en la categoría System."""
    try:
        return ACTIVITY_TYPE_META[ActivityType(action)]
    except ValueError:
        return FALLBACK_META


def get_stage_display_name(stage_type: Optional[str]) -> str:
    if not stage_type:
        return "stage"
    return _STAGE_DISPLAY_NAMES.get(str(stage_type), str(stage_type))


def _context_suffix(details: Mapping[str, Any]) -> str:
    parts: list[str] = []
    if details.get("roomName"):
        parts.append(f'"{details["roomName"]}" room')
    if details.get("stageName"):
        parts.append(f"{get_stage_display_name(details['stageName'])} stage")
    if details.get("projectName"):
        parts.append(f'project "{details["projectName"]}"')
    return " in " + " - ".join(parts) if parts else ""


def _in_project(details: Mapping[str, Any]) -> str:
    project = details.get("projectName")
    return f' in project "{project}"' if project else ""


def format_description(
    action: str,
    details: Optional[Mapping[str, Any]] = None,
    actor_name: Optional[str] = None,
    actor_email: Optional[str] = None,
) -> str:
    """
    Construye la frase legible de un registro de actividad.

    Ejemplo:
        >>> format_description("PROJECT_CREATED", {"projectName": "Casa Roma"}, "Ana")
        'Ana created project "Casa Roma"'
    """
    actor = actor_name or actor_email or "Someone"
    d = details or {}
    context = _context_suffix(d)
    stage = get_stage_display_name(d.get("stageName"))

    if action == ActivityType.ASSET_UPLOADED:
        asset = d.get("assetName") or d.get("fileName") or "a file"
        return f"{actor} uploaded {asset}{context}"
    if action == ActivityType.ASSET_DELETED:
        return f"{actor} deleted {d.get('assetName') or 'a file'}{context}"
    if action == ActivityType.PROJECT_CREATED:
        return f'{actor} created project "{d.get("projectName") or "Untitled"}"'
    if action == ActivityType.PROJECT_UPDATED:
        return f'{actor} updated project "{d.get("projectName") or "Untitled"}"'
    if action == ActivityType.PROJECT_STATUS_CHANGED:
        prev = d.get("previousStatus") or "unknown"
        new = d.get("newStatus") or "unknown"
        return f"{actor} changed project status from {prev} to {new}"
    if action == ActivityType.ROOM_CREATED:
        return f'{actor} created room "{d.get("roomName") or "Untitled"}"{_in_project(d)}'
    if action == ActivityType.ROOM_UPDATED:
        return f'{actor} updated room "{d.get("roomName") or "Untitled"}"{_in_project(d)}'
    if action == ActivityType.STAGE_STARTED:
        return f"{actor} started {stage} stage{context}"
    if action == ActivityType.STAGE_COMPLETED:
        return f"{actor} completed {stage} stage{context}"
    if action == ActivityType.STAGE_UPDATED:
        return f"{actor} updated {stage} stage{context}"
    if action == ActivityType.STAGE_ASSIGNED:
        return f"{actor} was assigned to {stage} stage{context}"
    if action == ActivityType.CHAT_MESSAGE_SENT:
        preview = f': "{d["messagePreview"]}"' if d.get("messagePreview") else ""
        return f"{actor} sent a message{context}{preview}"

    # Fallback genérico
    meta = get_type_meta(action)
    if meta.label and meta.label != FALLBACK_META.label:
        action_text = meta.label.lower()
    else:
        action_text = " ".join(w.capitalize() for w in str(action).lower().split("_") if w)

    description = f"{actor} - {action_text}"
    if d.get("itemName"):
        description += f' "{d["itemName"]}"'
    elif d.get("fileName"):
        description += f' "{d["fileName"]}"'
    elif d.get("title"):
        description += f' "{d["title"]}"'
    elif d.get("message"):
        message = str(d["message"])
        ellipsis = "..." if len(message) > 50 else ""
        description += f': "{message[:50]}{ellipsis}"'
    return description + context


def get_activities_by_category() -> dict[ActivityCategory, list[ActivityType]]:
    by_category: dict[ActivityCategory, list[ActivityType]] = {c: [] for c in ActivityCategory}
    for activity_type, meta in ACTIVITY_TYPE_META.items():
        by_category[meta.category].append(activity_type)
    return by_category


def sanitize_context(ctx: Mapping[str, Any]) -> dict[str, Any]:
    """Copia serializable del contexto sin valores None ni callables."""
    return {k: v for k, v in ctx.items() if v is not None and not callable(v)}


__all__ = [
    "get_type_meta",
    "get_stage_display_name",
    "format_description",
    "get_activities_by_category",
    "sanitize_context",
]

# Fin del archivo backend/app/modules/activity/facades/formatting.py
