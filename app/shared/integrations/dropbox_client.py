# -*- coding: utf-8 -*-
"""
backend/app/shared/integrations/dropbox_client.py

Cliente async (httpx) para la API HTTP de Dropbox Business.

- Actúa en nombre de un miembro del equipo (Dropbox-API-Select-User).
- Para miembros team_admin fija la raíz del namespace del equipo
  (Dropbox-API-Path-Root); los member_only reciben 422 con ese header.
- Autenticación por refresh token (renovación automática con cache)
  o, en su defecto, por access token fijo.

IMPORTANTE: Este módulo NO debe importar nada de app.modules.* para evitar ciclos.

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Optional, TYPE_CHECKING

import httpx

from app.observability.prom import DROPBOX_CALLS
from app.shared.integrations.dropbox_paths import (
    PROJECT_SUBFOLDERS,
    join_path,
    normalize_path,
    project_folder_path,
    resolve_team_namespace,
)

if TYPE_CHECKING:
    from app.shared.config.settings_base import BaseAppSettings

logger = logging.getLogger(__name__)

API_URL = "https://api.dropboxapi.com/2"
CONTENT_URL = "https://content.dropboxapi.com/2"
OAUTH_TOKEN_URL = "https://api.dropbox.com/oauth2/token"

CAD_EXTENSIONS = ["dwg", "dxf", "step", "stp", "iges", "igs", "ctb"]

# Margen para renovar el token antes de que expire
TOKEN_REFRESH_MARGIN_SEC = 300


# ===== ERRORES =====

class DropboxError(Exception):
    """Fallo de una llamada a Dropbox (HTTP, red o respuesta de error de la API)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        error_summary: Optional[str] = None,
        error: Optional[dict] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.error_summary = error_summary
        self.error = error or {}

    def has_tag(self, outer: str, inner: str) -> bool:
        """True si el error es {".tag": outer, outer: {".tag": inner}}."""
        if self.error.get(".tag") != outer:
            return False
        nested = self.error.get(outer) or {}
        return isinstance(nested, dict) and nested.get(".tag") == inner


class DropboxConfigError(Exception):
    """Dropbox no está configurado (sin credenciales o sin miembro seleccionado)."""


# ===== TIPOS =====

@dataclass
class DropboxTeamMember:
    name: str
    email: str
    member_id: str
    role: str = "member_only"  # team_admin | member_only

    @property
    def is_team_admin(self) -> bool:
        return self.role == "team_admin"

    def to_dict(self) -> dict:
        return {"name": self.name, "email": self.email, "memberId": self.member_id, "role": self.role}


@dataclass
class DropboxEntry:
    id: str
    name: str
    path: str
    size: int
    last_modified: datetime
    revision: str
    is_folder: bool

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class DropboxFolder:
    files: list[DropboxEntry] = field(default_factory=list)
    folders: list[DropboxEntry] = field(default_factory=list)
    has_more: bool = False
    cursor: Optional[str] = None


def load_team_members(raw: Optional[str]) -> list[DropboxTeamMember]:
    """
    Parsea DROPBOX_TEAM_MEMBERS (lista JSON de {name, email, memberId, role}).
    JSON inválido → [] y log de error; entradas incompletas se omiten.
    """
    if not raw or not raw.strip():
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error("[Dropbox] DROPBOX_TEAM_MEMBERS no es JSON válido: %s", e)
        return []
    if not isinstance(data, list):
        logger.error("[Dropbox] DROPBOX_TEAM_MEMBERS debe ser una lista JSON")
        return []

    members: list[DropboxTeamMember] = []
    for item in data:
        if not isinstance(item, dict) or not item.get("memberId") or not item.get("email"):
            logger.warning("[Dropbox] miembro de equipo ignorado (incompleto): %r", item)
            continue
        members.append(
            DropboxTeamMember(
                name=str(item.get("name") or item["email"]),
                email=str(item["email"]),
                member_id=str(item["memberId"]),
                role=str(item.get("role") or "member_only"),
            )
        )
    return members


def _parse_ts(value: Optional[str]) -> datetime:
    if not value:
        return datetime.now(timezone.utc)
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _file_entry(meta: dict, fallback_path: str = "") -> DropboxEntry:
    return DropboxEntry(
        id=meta.get("id") or "",
        name=meta.get("name") or "",
        path=meta.get("path_lower") or meta.get("path_display") or fallback_path,
        size=int(meta.get("size") or 0),
        last_modified=_parse_ts(meta.get("client_modified") or meta.get("server_modified")),
        revision=meta.get("rev") or "",
        is_folder=False,
    )


def _folder_entry(meta: dict) -> DropboxEntry:
    return DropboxEntry(
        id=meta.get("id") or "",
        name=meta.get("name") or "",
        path=meta.get("path_lower") or meta.get("path_display") or "",
        size=0,
        last_modified=datetime.now(timezone.utc),
        revision="",
        is_folder=True,
    )


# ===== AUTENTICACIÓN =====

class DropboxTokenProvider:
    """
    Entrega el bearer token vigente.

    Con refresh token + app key/secret obtiene tokens de corta vida y los
    cachea hasta poco antes de `expires_in`. Sin ellos usa el access token fijo.
    """

    def __init__(
        self,
        *,
        access_token: Optional[str] = None,
        refresh_token: Optional[str] = None,
        app_key: Optional[str] = None,
        app_secret: Optional[str] = None,
        timeout: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.access_token = access_token
        self.refresh_token = refresh_token
        self.app_key = app_key
        self.app_secret = app_secret
        self.timeout = timeout
        self._transport = transport
        self._cached_token: Optional[str] = None
        self._expires_at: float = 0.0
        self._lock = asyncio.Lock()

    @property
    def uses_refresh(self) -> bool:
        return bool(self.refresh_token and self.app_key and self.app_secret)

    async def get_token(self) -> str:
        if self.uses_refresh:
            async with self._lock:
                if self._cached_token and time.monotonic() < self._expires_at:
                    return self._cached_token
                return await self._refresh()
        if self.access_token:
            return self.access_token
        raise DropboxConfigError(
            "Either DROPBOX_ACCESS_TOKEN or DROPBOX_REFRESH_TOKEN (with app credentials) is required"
        )

    async def _refresh(self) -> str:
        data = {
            "grant_type": "refresh_token",
            "refresh_token": self.refresh_token,
            "client_id": self.app_key,
            "client_secret": self.app_secret,
        }
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                resp = await client.post(OAUTH_TOKEN_URL, data=data)
            except httpx.HTTPError as e:
                DROPBOX_CALLS.labels("oauth_refresh", "error").inc()
                raise DropboxError(f"Dropbox token refresh failed: {e}") from e

        if resp.status_code != 200:
            DROPBOX_CALLS.labels("oauth_refresh", "error").inc()
            raise DropboxError(
                f"Dropbox token refresh failed: {resp.status_code} {resp.text[:200]}",
                status_code=resp.status_code,
            )

        payload = resp.json()
        token = payload["access_token"]
        expires_in = int(payload.get("expires_in") or 14400)
        self._cached_token = token
        self._expires_at = time.monotonic() + max(expires_in - TOKEN_REFRESH_MARGIN_SEC, 0)
        DROPBOX_CALLS.labels("oauth_refresh", "ok").inc()
        logger.info("[Dropbox] 🔑 access token renovado (expira en %ss)", expires_in)
        return token


# ===== CLIENTE =====

class DropboxClient:
    """Operaciones de archivos sobre la carpeta de equipo del estudio."""

    def __init__(
        self,
        *,
        token_provider: DropboxTokenProvider,
        team_members: Optional[list[DropboxTeamMember]] = None,
        default_member_id: Optional[str] = None,
        root_namespace_id: Optional[str] = None,
        team_folder_name: str = "Atelier Team Folder",
        team_namespace_id: Optional[str] = None,
        timeout: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token_provider = token_provider
        self.team_members = list(team_members or [])
        self.default_member_id = default_member_id
        self.root_namespace_id = root_namespace_id
        self.team_folder_name = team_folder_name
        self.team_namespace_id = team_namespace_id
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: BaseAppSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "DropboxClient":
        def _secret(value) -> Optional[str]:
            return value.get_secret_value() if value else None

        provider = DropboxTokenProvider(
            access_token=_secret(settings.dropbox_access_token),
            refresh_token=_secret(settings.dropbox_refresh_token),
            app_key=settings.dropbox_app_key,
            app_secret=_secret(settings.dropbox_app_secret),
            timeout=settings.dropbox_timeout_sec,
            transport=transport,
        )
        return cls(
            token_provider=provider,
            team_members=load_team_members(settings.dropbox_team_members),
            default_member_id=settings.dropbox_api_select_user,
            root_namespace_id=settings.dropbox_root_namespace_id,
            team_folder_name=settings.dropbox_team_folder_name,
            team_namespace_id=settings.dropbox_team_namespace_id,
            timeout=settings.dropbox_timeout_sec,
            transport=transport,
        )

    # ---- Miembros del equipo ----
    def get_team_members(self) -> list[DropboxTeamMember]:
        return list(self.team_members)

    def get_team_member_by_email(self, email: str) -> Optional[DropboxTeamMember]:
        target = (email or "").lower()
        return next((m for m in self.team_members if m.email.lower() == target), None)

    def get_team_member_by_id(self, member_id: str) -> Optional[DropboxTeamMember]:
        return next((m for m in self.team_members if m.member_id == member_id), None)

    # ---- Headers ----
    async def build_headers(self, member_id: Optional[str] = None) -> dict[str, str]:
        """
        Headers de autenticación para actuar como un miembro del equipo.

        Raises:
            DropboxConfigError: sin miembro (ni explícito ni por defecto) o sin credenciales
        """
        member = member_id or self.default_member_id
        if not member:
            raise DropboxConfigError("No team member ID specified and no default member ID configured")

        token = await self.token_provider.get_token()
        headers = {
            "Authorization": f"Bearer {token}",
            "Dropbox-API-Select-User": member,
        }

        info = self.get_team_member_by_id(member)
        if self.root_namespace_id and info is not None and info.is_team_admin:
            headers["Dropbox-API-Path-Root"] = json.dumps({".tag": "root", "root": self.root_namespace_id})
        return headers

    # ---- Transporte ----
    async def _send(
        self,
        operation: str,
        url: str,
        headers: dict[str, str],
        *,
        json_body: Any = None,
        content: Optional[bytes] = None,
    ) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                if content is not None:
                    resp = await client.post(url, headers=headers, content=content)
                elif json_body is not None:
                    resp = await client.post(url, headers=headers, json=json_body)
                else:
                    resp = await client.post(url, headers=headers)
            except httpx.HTTPError as e:
                DROPBOX_CALLS.labels(operation, "error").inc()
                raise DropboxError(f"{operation}: request error: {e}") from e

        if resp.status_code >= 400:
            DROPBOX_CALLS.labels(operation, "error").inc()
            summary, error = None, None
            try:
                body = resp.json()
                summary, error = body.get("error_summary"), body.get("error")
            except ValueError:
                pass
            raise DropboxError(
                f"{operation}: {resp.status_code} {summary or resp.text[:200]}",
                status_code=resp.status_code,
                error_summary=summary,
                error=error if isinstance(error, dict) else None,
            )

        DROPBOX_CALLS.labels(operation, "ok").inc()
        return resp

    async def _rpc(self, operation: str, endpoint: str, payload: Optional[dict], member_id: Optional[str] = None) -> dict:
        headers = await self.build_headers(member_id)
        resp = await self._send(operation, f"{API_URL}{endpoint}", headers, json_body=payload)
        return resp.json() if resp.content else {}

    # ---- Lectura ----
    async def list_folder(
        self,
        path: str = "",
        member_id: Optional[str] = None,
        cursor: Optional[str] = None,
    ) -> DropboxFolder:
        logger.debug("[Dropbox] list_folder path=%r member=%s cursor=%s", path, member_id or "default", bool(cursor))
        try:
            if cursor:
                result = await self._rpc("list_folder", "/files/list_folder/continue", {"cursor": cursor}, member_id)
            else:
                result = await self._rpc(
                    "list_folder",
                    "/files/list_folder",
                    {
                        "path": normalize_path(path),
                        "recursive": False,
                        "include_media_info": False,
                        "include_deleted": False,
                        "include_mounted_folders": True,
                    },
                    member_id,
                )
        except DropboxError as e:
            logger.error("[Dropbox] error listando %r: %s", path, e)
            raise DropboxError(
                f"Failed to list Dropbox folder: {e}", status_code=e.status_code, error=e.error
            ) from e

        folder = DropboxFolder(has_more=bool(result.get("has_more")), cursor=result.get("cursor"))
        for entry in result.get("entries", []):
            tag = entry.get(".tag")
            if tag == "file":
                folder.files.append(_file_entry(entry))
            elif tag == "folder":
                folder.folders.append(_folder_entry(entry))

        logger.debug("[Dropbox] %d archivo(s), %d carpeta(s) en %r", len(folder.files), len(folder.folders), path)
        return folder

    async def download_file(self, path: str, member_id: Optional[str] = None) -> bytes:
        headers = await self.build_headers(member_id)
        headers["Dropbox-API-Arg"] = json.dumps({"path": path})
        try:
            resp = await self._send("download", f"{CONTENT_URL}/files/download", headers)
        except DropboxError as e:
            raise DropboxError(
                f"Failed to download file from Dropbox: {e}", status_code=e.status_code, error=e.error
            ) from e
        logger.debug("[Dropbox] descargados %d bytes de %r", len(resp.content), path)
        return resp.content

    async def get_file_metadata(self, path: str, member_id: Optional[str] = None) -> Optional[DropboxEntry]:
        """Metadata de un archivo; None si es carpeta o si la llamada falla."""
        try:
            meta = await self._rpc("get_metadata", "/files/get_metadata", {"path": path}, member_id)
        except DropboxError as e:
            logger.warning("[Dropbox] metadata no disponible para %r: %s", path, e)
            return None
        if meta.get(".tag") != "file":
            return None
        return _file_entry(meta, fallback_path=path)

    async def get_temporary_link(self, path: str, member_id: Optional[str] = None) -> Optional[str]:
        """Link de descarga temporal (4 h); None si falla."""
        try:
            result = await self._rpc("temporary_link", "/files/get_temporary_link", {"path": path}, member_id)
        except DropboxError as e:
            logger.warning("[Dropbox] sin link temporal para %r: %s", path, e)
            return None
        return result.get("link") or None

    async def check_file_updated(
        self, path: str, last_known_revision: str, member_id: Optional[str] = None
    ) -> bool:
        metadata = await self.get_file_metadata(path, member_id)
        return metadata is not None and metadata.revision != last_known_revision

    async def search_cad_files(
        self, query: str, member_id: Optional[str] = None, max_results: int = 50
    ) -> list[DropboxEntry]:
        payload = {
            "query": query,
            "options": {"max_results": max_results, "file_extensions": CAD_EXTENSIONS},
        }
        try:
            result = await self._rpc("search", "/files/search_v2", payload, member_id)
        except DropboxError as e:
            logger.error("[Dropbox] búsqueda CAD falló (%r): %s", query, e)
            return []

        files: list[DropboxEntry] = []
        for match in result.get("matches", []):
            match_type = (match.get("match_type") or {}).get(".tag")
            meta = (match.get("metadata") or {}).get("metadata") or {}
            if match_type == "filename" and meta.get(".tag") == "file":
                files.append(_file_entry(meta))
        return files

    # ---- Escritura ----
    async def create_folder(self, path: str, member_id: Optional[str] = None) -> dict:
        """Crea una carpeta. Si ya existe se considera éxito: {"path", "exists": True}."""
        try:
            result = await self._rpc(
                "create_folder", "/files/create_folder_v2", {"path": path, "autorename": False}, member_id
            )
        except DropboxError as e:
            if e.has_tag("path", "conflict"):
                logger.info("[Dropbox] ℹ️ carpeta ya existe: %s", path)
                return {"path": path, "exists": True}
            logger.error("[Dropbox] ❌ no se pudo crear carpeta %s: %s", path, e)
            raise DropboxError(
                f"Failed to create Dropbox folder: {e}", status_code=e.status_code, error=e.error
            ) from e
        logger.info("[Dropbox] ✅ carpeta creada: %s", path)
        return result.get("metadata", result)

    async def upload_file(
        self,
        path: str,
        content: bytes,
        mode: str = "add",
        member_id: Optional[str] = None,
    ) -> dict:
        headers = await self.build_headers(member_id)
        headers["Content-Type"] = "application/octet-stream"
        headers["Dropbox-API-Arg"] = json.dumps(
            {"path": path, "mode": {".tag": mode}, "autorename": True, "mute": False}
        )
        try:
            resp = await self._send("upload", f"{CONTENT_URL}/files/upload", headers, content=content)
        except DropboxError as e:
            logger.error("[Dropbox] ❌ upload falló %s: %s", path, e)
            raise DropboxError(
                f"Failed to upload file to Dropbox: {e}", status_code=e.status_code, error=e.error
            ) from e
        logger.info("[Dropbox] ✅ archivo subido: %s (%d bytes)", path, len(content))
        return resp.json()

    async def delete_path(self, path: str, member_id: Optional[str] = None) -> dict:
        """Borra archivo o carpeta. Si no existe se considera éxito: {"path", "not_found": True}."""
        try:
            result = await self._rpc("delete", "/files/delete_v2", {"path": path}, member_id)
        except DropboxError as e:
            if e.has_tag("path_lookup", "not_found"):
                logger.info("[Dropbox] ℹ️ no encontrado (ya borrado): %s", path)
                return {"path": path, "not_found": True}
            logger.error("[Dropbox] ❌ no se pudo borrar %s: %s", path, e)
            raise DropboxError(
                f"Failed to delete from Dropbox: {e}", status_code=e.status_code, error=e.error
            ) from e
        logger.info("[Dropbox] 🗑️ borrado: %s", path)
        return result.get("metadata", result)

    async def create_project_folder_structure(self, project_name: str) -> str:
        """
        Crea /<team folder>/<proyecto> y las subcarpetas estándar.
        Un fallo en una subcarpeta se loguea y no detiene el resto.

        Returns:
            Ruta de la carpeta principal.
        """
        main_path = project_folder_path(self.team_folder_name, project_name)
        await self.create_folder(main_path)

        for subfolder in PROJECT_SUBFOLDERS:
            try:
                await self.create_folder(join_path(main_path, subfolder))
            except DropboxError as e:
                logger.warning("[Dropbox] ⚠️ subcarpeta %s no creada: %s", subfolder, e)

        logger.info("[Dropbox] ✅ estructura de proyecto lista: %s", main_path)
        return main_path

    # ---- Equipo ----
    async def list_team_namespaces(self) -> list[dict]:
        """Namespaces del equipo (carpetas de equipo y compartidas). [] si falla."""
        token = await self.token_provider.get_token()
        headers = {"Authorization": f"Bearer {token}"}
        try:
            resp = await self._send("namespaces", f"{API_URL}/team/namespaces/list", headers, json_body={"limit": 50})
        except DropboxError as e:
            logger.error("[Dropbox] no se pudieron listar namespaces: %s", e)
            return []
        return resp.json().get("namespaces", [])

    async def get_team_folder_namespace(self) -> Optional[str]:
        namespaces = await self.list_team_namespaces()
        return resolve_team_namespace(namespaces, self.team_folder_name, self.team_namespace_id)

    async def test_connection(self, member_id: Optional[str] = None) -> dict:
        member = member_id or self.default_member_id
        try:
            await self.list_folder("", member)
        except (DropboxError, DropboxConfigError) as e:
            return {"success": False, "error": str(e)}
        info = self.get_team_member_by_id(member) if member else None
        return {
            "success": True,
            "member": info.to_dict() if info else None,
            "root_namespace_id": self.root_namespace_id,
        }


@lru_cache(maxsize=1)
def get_dropbox_client() -> DropboxClient:
    """Cliente compartido (conserva el token renovado entre requests)."""
    from app.shared.config import get_settings
    return DropboxClient.from_settings(get_settings())


__all__ = [
    "DropboxError",
    "DropboxConfigError",
    "DropboxTeamMember",
    "DropboxEntry",
    "DropboxFolder",
    "DropboxTokenProvider",
    "DropboxClient",
    "load_team_members",
    "get_dropbox_client",
    "CAD_EXTENSIONS",
]

# Fin del archivo backend/app/shared/integrations/dropbox_client.py
