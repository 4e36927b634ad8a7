# -*- coding: utf-8 -*-
"""
backend/app/shared/integrations/dropbox_paths.py

Helpers puros de rutas Dropbox (sin red):
- normalización de rutas
- saneado de nombres de carpeta
- estructura estándar de carpetas de proyecto
- resolución del namespace de la carpeta de equipo

IMPORTANTE: Este módulo NO debe importar nada de app.modules.* para evitar ciclos.

Autor: Atelier
Fecha: 12/08/2026
"""

import re
from typing import Any, Iterable, Mapping, Optional

# Dropbox limita los nombres a 255 caracteres
MAX_NAME_LENGTH = 255

_INVALID_CHARS = re.compile(r'[<>:"/\\|?*]')
_WHITESPACE = re.compile(r"\s+")

# Subcarpetas estándar de cada proyecto (el orden importa: se crean en secuencia)
PROJECT_SUBFOLDERS: tuple[str, ...] = (
    "1- CAD",
    "2- MAX",
    "3- RENDERING",
    "4- SENT",
    "5- RECIEVED",
    "6- SHOPPING",
    "7- SOURCES",
    "8- DRAWINGS",
    "9- SKP",
    "10- SOFTWARE UPLOADS",
)


def normalize_path(path: Optional[str]) -> str:
    """
    "" / None → "" (raíz para list_folder); en otro caso garantiza "/" inicial.
    """
    if not path:
        return ""
    return path if path.startswith("/") else f"/{path}"


def join_path(*parts: Optional[str]) -> str:
    """Une segmentos ignorando vacíos y barras duplicadas."""
    cleaned = [p.strip("/") for p in parts if p and p.strip("/")]
    return "/" + "/".join(cleaned) if cleaned else ""


def sanitize_folder_name(name: str) -> str:
    """
    Sanea un nombre para usarlo como carpeta:
    strip, quita <>:"/\\|?*, colapsa espacios, quita un punto final y trunca a 255.
    """
    cleaned = _INVALID_CHARS.sub("", name.strip())
    cleaned = _WHITESPACE.sub(" ", cleaned)
    if cleaned.endswith("."):
        cleaned = cleaned[:-1]
    return cleaned[:MAX_NAME_LENGTH]


def project_folder_path(team_folder: str, project_name: str) -> str:
    """
    Ruta de la carpeta principal de un proyecto: /<team folder>/<nombre saneado>.

    Raises:
        ValueError: si el nombre queda vacío tras el saneado
    """
    sanitized = sanitize_folder_name(project_name)
    if not sanitized:
        raise ValueError("Project name resulted in empty folder name after sanitization")
    return f"/{team_folder.strip('/')}/{sanitized}"


def resolve_team_namespace(
    namespaces: Iterable[Mapping[str, Any]],
    folder_name: str,
    fallback_id: Optional[str],
) -> Optional[str]:
    """Devuelve el namespace_id cuyo `name` coincide con folder_name, o fallback_id."""
    for ns in namespaces:
        if ns.get("name") == folder_name and ns.get("namespace_id"):
            return str(ns["namespace_id"])
    return fallback_id


__all__ = [
    "MAX_NAME_LENGTH",
    "PROJECT_SUBFOLDERS",
    "normalize_path",
    "join_path",
    "sanitize_folder_name",
    "project_folder_path",
    "resolve_team_namespace",
]

# Fin del archivo backend/app/shared/integrations/dropbox_paths.py
