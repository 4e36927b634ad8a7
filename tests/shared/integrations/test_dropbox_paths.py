# -*- coding: utf-8 -*-
"""
backend/tests/shared/integrations/test_dropbox_paths.py

Helpers puros de rutas Dropbox.

Autor: Atelier
Fecha: 12/08/2026
"""

import pytest

from app.shared.integrations.dropbox_paths import (
    MAX_NAME_LENGTH,
    PROJECT_SUBFOLDERS,
    join_path,
    normalize_path,
    project_folder_path,
    resolve_team_namespace,
    sanitize_folder_name,
)


@pytest.mark.parametrize("raw,expected", [(None, ""), ("", ""), ("Team", "/Team"), ("/Team/A", "/Team/A")])
def test_normalize_path(raw, expected):
    assert normalize_path(raw) == expected


def test_join_path():
    assert join_path("/Team/", "/Villa", None, "", "a.pdf") == "/Team/Villa/a.pdf"
    assert join_path("", "/") == ""


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("  Villa   Serena  ", "Villa Serena"),
        ('Casa "Roma": fase 1/2?', "Casa Roma fase 12"),
        ("Smith Residence.", "Smith Residence"),
        ("a<b>c|d*e\\f", "abcdef"),
    ],
)
def test_sanitize_folder_name(raw, expected):
    assert sanitize_folder_name(raw) == expected


def test_sanitize_truncates_long_names():
    assert len(sanitize_folder_name("x" * 400)) == MAX_NAME_LENGTH


def test_project_folder_path():
    assert project_folder_path("/Atelier Team Folder/", "Villa: Serena") == "/Atelier Team Folder/Villa Serena"
    with pytest.raises(ValueError):
        project_folder_path("Team", ' <>:"/ ')


def test_project_subfolders_are_ordered():
    assert len(PROJECT_SUBFOLDERS) == 10
    assert PROJECT_SUBFOLDERS[0] == "1- CAD"
    assert PROJECT_SUBFOLDERS[-1] == "10- SOFTWARE UPLOADS"


def test_resolve_team_namespace():
    namespaces = [
        {"name": "Shared", "namespace_id": "1"},
        {"name": "Atelier Team Folder", "namespace_id": "42"},
    ]
    assert resolve_team_namespace(namespaces, "Atelier Team Folder", None) == "42"
    assert resolve_team_namespace(namespaces, "Other", "fallback") == "fallback"
    assert resolve_team_namespace([], "Other", None) is None

# Fin del archivo backend/tests/shared/integrations/test_dropbox_paths.py
