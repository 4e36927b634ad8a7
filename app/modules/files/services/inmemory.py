# -*- coding: utf-8 -*-
"""
Servicio in-memory para pruebas de rutas del módulo Files.
Simula un árbol Dropbox plano {ruta: bytes} y carpetas de proyecto.
Autor: Atelier
Fecha: 12/08/2026
"""

import posixpath
from datetime import datetime, timezone
from typing import Dict, List, Optional

from app.modules.files.facades import ProjectFolderMissing, ProjectNotFound, clean_filename, upload_target
from app.shared.integrations.dropbox_client import DropboxEntry, DropboxFolder, DropboxTeamMember


class InMemoryFilesService:
    def __init__(self, project_folders: Optional[Dict[str, Optional[str]]] = None, members: Optional[List[DropboxTeamMember]] = None):
        self.project_folders = dict(project_folders if project_folders is not None else {"p1": "/Team/Villa"})
        self.members = list(members or [DropboxTeamMember("Ana", "ana@studio.test", "dbmid:1", "team_admin")])
        self.files: Dict[str, bytes] = {}
        self.activity: List[tuple] = []

    def _entry(self, path: str) -> DropboxEntry:
        return DropboxEntry(
            id=f"id:{path}",
            name=posixpath.basename(path),
            path=path.lower(),
            size=len(self.files[path]),
            last_modified=datetime.now(timezone.utc),
            revision="rev1",
            is_folder=False,
        )

    async def browse(self, path=None, *, cursor=None, member_id=None):
        prefix = (path or "").rstrip("/") + "/"
        files = [self._entry(p) for p in self.files if p.startswith(prefix) and "/" not in p[len(prefix):]]
        return DropboxFolder(files=files, folders=[], has_more=False, cursor=None)

    async def metadata(self, path: str):
        return self._entry(path) if path in self.files else None

    async def temporary_link(self, path: str):
        return f"https://dl.example.test{path}" if path in self.files else None

    async def search_cad(self, query: str, *, max_results: int = 50):
        hits = [self._entry(p) for p in self.files if query.lower() in posixpath.basename(p).lower()]
        return hits[:max_results]

    def team_members(self):
        return self.members

    async def test_connection(self, member_id=None):
        member = self.members[0] if self.members else None
        return {"success": True, "member": member.to_dict() if member else None, "root_namespace_id": "ns1"}

    async def upload(self, project_id, *, actor_id, filename, content, path=None):
        if project_id not in self.project_folders:
            raise ProjectNotFound(project_id)
        folder = self.project_folders[project_id]
        if not folder:
            raise ProjectFolderMissing(project_id)
        name = clean_filename(filename)
        target = upload_target(folder, path, name)
        self.files[target] = content
        self.activity.append(("ASSET_UPLOADED", project_id, target))
        return {"id": f"id:{target}", "name": name, "path": target, "size": len(content), "revision": "rev1"}

    async def delete(self, path, *, actor_id, project_id=None):
        not_found = self.files.pop(path, None) is None
        if project_id:
            self.activity.append(("ASSET_DELETED", project_id, path))
        return {"path": path, "deleted": True, "not_found": not_found}
