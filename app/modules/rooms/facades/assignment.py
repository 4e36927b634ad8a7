# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/facades/assignment.py

Asignación de fases por rol:
- find_default_assignees: primer miembro activo de cada rol por defecto
- reassign_phases_on_role_change: reacomoda fases cuando cambia el rol de un miembro

Ninguna función hace commit; corren dentro de la transacción del llamador.

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.enums import UserRole
from app.modules.auth.models import User
from app.modules.rooms.enums import StageStatus, StageType
from app.modules.rooms.facades.phase_utils import DEFAULT_PHASE_ROLES
from app.modules.rooms.models import Stage

logger = logging.getLogger(__name__)


def phases_for_role(role: Optional[UserRole]) -> list[StageType]:
    if role is None:
        return []
    return [phase for phase, phase_role in DEFAULT_PHASE_ROLES.items() if phase_role == role]


async def find_default_assignees(db: AsyncSession) -> dict[StageType, Optional[str]]:
    """{fase: user_id} con el primer miembro activo (por alta) del rol de cada fase."""
    roles = sorted(set(DEFAULT_PHASE_ROLES.values()))
    rows = (
        await db.execute(
            select(User.id, User.role)
            .where(User.is_active.is_(True), User.role.in_(roles))
            .order_by(User.created_at.asc(), User.id.asc())
        )
    ).all()

    first_by_role: dict[UserRole, str] = {}
    for user_id, role in rows:
        first_by_role.setdefault(UserRole(role), user_id)

    return {phase: first_by_role.get(role) for phase, role in DEFAULT_PHASE_ROLES.items()}


async def reassign_phases_on_role_change(
    db: AsyncSession,
    user_id: str,
    old_role: Optional[UserRole],
    new_role: Optional[UserRole],
) -> dict[str, int]:
    """
    Reacomoda asignaciones cuando `user_id` pasa de `old_role` a `new_role`.

    - Fases de `new_role` no completadas y sin asignar → se asignan al usuario.
    - Fases de `old_role` asignadas al usuario → quedan sin asignar.

    Returns:
        {"assigned": n, "unassigned": m}
    """
    stats = {"assigned": 0, "unassigned": 0}
    if old_role == new_role:
        return stats

    old_phases = [p for p in phases_for_role(old_role) if p not in phases_for_role(new_role)]
    if old_phases:
        result = await db.execute(
            update(Stage)
            .where(Stage.assigned_to == user_id, Stage.type.in_(old_phases))
            .values(assigned_to=None)
            .execution_options(synchronize_session=False)
        )
        stats["unassigned"] = result.rowcount or 0

    new_phases = phases_for_role(new_role)
    if new_phases:
        result = await db.execute(
            update(Stage)
            .where(
                Stage.assigned_to.is_(None),
                Stage.type.in_(new_phases),
                Stage.status != StageStatus.COMPLETED,
            )
            .values(assigned_to=user_id)
            .execution_options(synchronize_session=False)
        )
        stats["assigned"] = result.rowcount or 0

    logger.info(
        "[Stages] reasignación por cambio de rol user=%s %s→%s assigned=%d unassigned=%d",
        user_id, old_role, new_role, stats["assigned"], stats["unassigned"],
    )
    return stats


__all__ = ["phases_for_role", "find_default_assignees", "reassign_phases_on_role_change"]

# Fin del archivo backend/app/modules/rooms/facades/assignment.py
