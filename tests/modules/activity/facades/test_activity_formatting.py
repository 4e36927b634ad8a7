# -*- coding: utf-8 -*-
"""
backend/tests/modules/activity/facades/test_activity_formatting.py

Descripciones legibles y metadatos del registro de actividad.

Autor: Atelier
Fecha: 12/08/2026
"""

import pytest

from app.modules.activity.enums import ActivityCategory, ActivityType, FALLBACK_META
from app.modules.activity.facades import (
    format_description,
    get_activities_by_category,
    get_stage_display_name,
    get_type_meta,
    sanitize_context,
)


@pytest.mark.parametrize(
    "action,details,expected",
    [
        ("PROJECT_CREATED", {"projectName": "Casa Roma"}, 'Ana created project "Casa Roma"'),
        ("PROJECT_UPDATED", {}, 'Ana updated project "Untitled"'),
        (
            "PROJECT_STATUS_CHANGED",
            {"previousStatus": "DRAFT", "newStatus": "IN_PROGRESS"},
            "Ana changed project status from DRAFT to IN_PROGRESS",
        ),
        (
            "ROOM_CREATED",
            {"roomName": "Kitchen", "projectName": "Casa Roma"},
            'Ana created room "Kitchen" in project "Casa Roma"',
        ),
        (
            "STAGE_COMPLETED",
            {"stageName": "THREE_D", "roomName": "Kitchen", "projectName": "Casa Roma"},
            'Ana completed 3D Rendering stage in "Kitchen" room - 3D Rendering stage - project "Casa Roma"',
        ),
        ("ASSET_UPLOADED", {"fileName": "plan.pdf"}, "Ana uploaded plan.pdf"),
        ("ASSET_DELETED", {}, "Ana deleted a file"),
        (
            "CHAT_MESSAGE_SENT",
            {"stageName": "DRAWINGS", "messagePreview": "hola"},
            'Ana sent a message in Drawings stage: "hola"',
        ),
    ],
)
def test_format_description(action, details, expected):
    assert format_description(action, details, "Ana") == expected


def test_format_description_actor_fallbacks():
    assert format_description("PROJECT_CREATED", {"projectName": "X"}, None, "ana@example.com").startswith(
        "ana@example.com"
    )
    assert format_description("PROJECT_CREATED", {"projectName": "X"}).startswith("Someone")


def test_generic_fallback_uses_label_and_details():
    assert format_description("CLIENT_CREATED", {"itemName": "Ana Ortega"}, "Olga") == 'Olga - client created "Ana Ortega"'
    long = "x" * 60
    assert format_description("SOMETHING_ODD", {"message": long}, "Olga") == f'Olga - Something Odd: "{"x" * 50}..."'


def test_type_meta_and_categories():
    assert get_type_meta("STAGE_ASSIGNED").category == ActivityCategory.STAGES
    assert get_type_meta("legacy_action") == FALLBACK_META

    by_category = get_activities_by_category()
    assert set(by_category) == set(ActivityCategory)
    assert ActivityType.CHAT_MENTION in by_category[ActivityCategory.CHAT]
    assert sum(len(v) for v in by_category.values()) == len(ActivityType)


def test_stage_display_names():
    assert get_stage_display_name("DESIGN") == "Design Concept"
    assert get_stage_display_name(None) == "stage"
    assert get_stage_display_name("CUSTOM") == "CUSTOM"


def test_sanitize_context_drops_none_and_callables():
    assert sanitize_context({"a": 1, "b": None, "c": print, "d": ""}) == {"a": 1, "d": ""}

# Fin del archivo backend/tests/modules/activity/facades/test_activity_formatting.py
