# -*- coding: utf-8 -*-
"""
Servicio in-memory para pruebas de rutas del módulo Activity.
No toca DB: decora registros sintéticos con el mismo formateador real.
Autor: Atelier
Fecha: 12/08/2026
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Tuple

from app.modules.activity.facades import decorate_activity, get_activities_by_category, list_activity_types


class InMemoryActivityQueryService:
    """Implementa solo lo que las rutas usan en tests."""

    def __init__(self, entries: Optional[List[Dict[str, Any]]] = None):
        self.entries = entries or []
        self.calls: List[Dict[str, Any]] = []

    async def list_activities(self, **filters) -> Tuple[List[Dict[str, Any]], int]:
        self.calls.append(filters)
        items = []
        for raw in self.entries:
            if filters.get("project_id") and raw.get("project_id") != filters["project_id"]:
                continue
            if filters.get("action") and raw.get("action") != filters["action"]:
                continue
            category = filters.get("category")
            if category and raw.get("action") not in {t.value for t in get_activities_by_category()[category]}:
                continue
            entry = SimpleNamespace(
                id=raw.get("id", "act-1"),
                action=raw["action"],
                entity=raw.get("entity", "PROJECT"),
                entity_id=raw.get("entity_id", "p1"),
                project_id=raw.get("project_id"),
                details=raw.get("details", {}),
                created_at=raw.get("created_at", datetime.now(timezone.utc)),
            )
            actor = raw.get("actor")
            items.append(decorate_activity(entry, SimpleNamespace(**actor) if actor else None))
        offset = filters.get("offset", 0)
        limit = filters.get("limit", 50)
        return items[offset:offset + limit], len(items)

    def list_types(self) -> List[Dict[str, Any]]:
        return list_activity_types()
