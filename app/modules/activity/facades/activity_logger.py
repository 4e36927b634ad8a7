# -*- coding: utf-8 -*-
"""
backend/app/modules/activity/facades/activity_logger.py

Helpers de atribución: registran ActivityLog con contexto enriquecido.

- Los helpers NO hacen commit: agregan la fila a la sesión y la transacción
  del llamador la persiste junto con el cambio de dominio.
- El enriquecimiento (nombres de proyecto/room/fase) solo consulta la DB
  cuando el llamador no los proporcionó. Un fallo al enriquecer se registra
  en el log y no interrumpe la operación principal.

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.activity.enums import EntityType
from app.modules.activity.facades.formatting import sanitize_context
from app.modules.activity.models import ActivityLog
from app.modules.projects.models import Project
from app.modules.rooms.models import Room, Stage

logger = logging.getLogger(__name__)


async def log_activity(
    db: AsyncSession,
    *,
    actor_id: Optional[str],
    action: str,
    entity: str,
    entity_id: str,
    details: Optional[dict[str, Any]] = None,
    ip_address: Optional[str] = None,
) -> ActivityLog:
    """Agrega un registro de actividad a la sesión (sin commit)."""
    clean = sanitize_context(details or {})
    project_id = clean.get("projectId")
    if project_id is None and entity == EntityType.PROJECT:
        project_id = entity_id

    entry = ActivityLog(
        actor_id=actor_id,
        action=str(action),
        entity=str(entity),
        entity_id=str(entity_id),
        project_id=project_id,
        details=clean,
        ip_address=ip_address,
    )
    db.add(entry)
    logger.debug("[Activity] %s %s:%s actor=%s", action, entity, entity_id, actor_id)
    return entry


# ===== ENRIQUECIMIENTO =====

async def _enrich_project(db: AsyncSession, ctx: dict[str, Any]) -> dict[str, Any]:
    if ctx.get("projectName"):
        return ctx
    try:
        name = await db.scalar(select(Project.name).where(Project.id == ctx["projectId"]))
        if name:
            ctx["projectName"] = name
    except SQLAlchemyError:
        logger.warning("[Activity] No se pudo enriquecer contexto de proyecto %s", ctx.get("projectId"), exc_info=True)
    return ctx


async def _enrich_room(db: AsyncSession, ctx: dict[str, Any]) -> dict[str, Any]:
    if ctx.get("roomName") and ctx.get("projectName"):
        return ctx
    try:
        row = (
            await db.execute(
                select(Room.name, Room.type, Project.id, Project.name)
                .join(Project, Project.id == Room.project_id)
                .where(Room.id == ctx["roomId"])
            )
        ).first()
        if row:
            room_name, room_type, project_id, project_name = row
            ctx["roomName"] = ctx.get("roomName") or room_name or str(room_type)
            ctx["projectId"] = ctx.get("projectId") or project_id
            ctx["projectName"] = ctx.get("projectName") or project_name
    except SQLAlchemyError:
        logger.warning("[Activity] No se pudo enriquecer contexto de room %s", ctx.get("roomId"), exc_info=True)
    return ctx


async def _enrich_stage(db: AsyncSession, ctx: dict[str, Any]) -> dict[str, Any]:
    if ctx.get("stageName") and ctx.get("roomName") and ctx.get("projectName"):
        return ctx
    try:
        row = (
            await db.execute(
                select(Stage.type, Room.id, Room.name, Room.type, Project.id, Project.name)
                .join(Room, Room.id == Stage.room_id)
                .join(Project, Project.id == Room.project_id)
                .where(Stage.id == ctx["stageId"])
            )
        ).first()
        if row:
            stage_type, room_id, room_name, room_type, project_id, project_name = row
            ctx["stageName"] = ctx.get("stageName") or str(stage_type)
            ctx["roomId"] = ctx.get("roomId") or room_id
            ctx["roomName"] = ctx.get("roomName") or room_name or str(room_type)
            ctx["projectId"] = ctx.get("projectId") or project_id
            ctx["projectName"] = ctx.get("projectName") or project_name
    except SQLAlchemyError:
        logger.warning("[Activity] No se pudo enriquecer contexto de stage %s", ctx.get("stageId"), exc_info=True)
    return ctx


# ===== HELPERS POR DOMINIO =====

async def log_project_activity(
    db: AsyncSession,
    *,
    actor_id: Optional[str],
    action: str,
    project_id: str,
    ip_address: Optional[str] = None,
    **context: Any,
) -> ActivityLog:
    ctx = await _enrich_project(db, {"projectId": project_id, **context})
    return await log_activity(
        db,
        actor_id=actor_id,
        action=action,
        entity=EntityType.PROJECT,
        entity_id=project_id,
        details=ctx,
        ip_address=ip_address,
    )


async def log_room_activity(
    db: AsyncSession,
    *,
    actor_id: Optional[str],
    action: str,
    room_id: str,
    ip_address: Optional[str] = None,
    **context: Any,
) -> ActivityLog:
    ctx = await _enrich_room(db, {"roomId": room_id, **context})
    return await log_activity(
        db,
        actor_id=actor_id,
        action=action,
        entity=EntityType.ROOM,
        entity_id=room_id,
        details=ctx,
        ip_address=ip_address,
    )


async def log_stage_activity(
    db: AsyncSession,
    *,
    actor_id: Optional[str],
    action: str,
    stage_id: str,
    ip_address: Optional[str] = None,
    **context: Any,
) -> ActivityLog:
    ctx = await _enrich_stage(db, {"stageId": stage_id, **context})
    return await log_activity(
        db,
        actor_id=actor_id,
        action=action,
        entity=EntityType.STAGE,
        entity_id=stage_id,
        details=ctx,
        ip_address=ip_address,
    )


async def log_asset_activity(
    db: AsyncSession,
    *,
    actor_id: Optional[str],
    action: str,
    asset_id: str,
    ip_address: Optional[str] = None,
    **context: Any,
) -> ActivityLog:
    """Assets de Dropbox: asset_id es la ruta (o el id de Dropbox) del archivo."""
    ctx: dict[str, Any] = {"assetId": asset_id, **context}
    if ctx.get("projectId"):
        ctx = await _enrich_project(db, ctx)
    return await log_activity(
        db,
        actor_id=actor_id,
        action=action,
        entity=EntityType.ASSET,
        entity_id=asset_id,
        details=ctx,
        ip_address=ip_address,
    )


async def log_chat_activity(
    db: AsyncSession,
    *,
    actor_id: Optional[str],
    action: str,
    message_id: str,
    ip_address: Optional[str] = None,
    **context: Any,
) -> ActivityLog:
    ctx: dict[str, Any] = {"messageId": message_id, **context}
    if ctx.get("stageId"):
        ctx = await _enrich_stage(db, ctx)
    return await log_activity(
        db,
        actor_id=actor_id,
        action=action,
        entity=EntityType.CHAT_MESSAGE,
        entity_id=message_id,
        details=ctx,
        ip_address=ip_address,
    )


__all__ = [
    "log_activity",
    "log_project_activity",
    "log_room_activity",
    "log_stage_activity",
    "log_asset_activity",
    "log_chat_activity",
]

# Fin del archivo backend/app/modules/activity/facades/activity_logger.py
