# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/facades/phase_notifications.py

Flujo de avisos al completar una fase de un room.

Al completar una fase se avisa a los responsables de la(s) fase(s)
siguiente(s) del mismo room (CLIENT_APPROVAL habilita DRAWINGS y FFE):
- notificación in-app STAGE_ASSIGNED ("<Fase> Phase Ready")
- email opcional si el responsable tiene activados los correos

Nada de este flujo lanza excepciones: los errores se acumulan en el
resultado para que la acción principal (completar la fase) no falle.
Las notificaciones se agregan a la sesión sin commit.

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.models import User
from app.modules.notifications.enums import NotificationType, RelatedType
from app.modules.notifications.facades.notification_facade import create_notification
from app.modules.projects.models import Project
from app.modules.rooms.enums import StageType
from app.modules.rooms.facades.phase_utils import (
    format_room_display_name,
    get_next_phases_to_notify,
    get_phase_display_name,
)
from app.modules.rooms.models import Room, Stage
from app.shared.integrations.email_sender import IEmailSender, get_email_sender

logger = logging.getLogger(__name__)


@dataclass
class PhaseNotificationResult:
    success: bool = True
    notifications_sent: int = 0
    emails_sent: int = 0
    errors: list[str] = field(default_factory=list)
    next_phase_info: list[dict[str, Any]] = field(default_factory=list)


def _completion_prefix(completed_type: str, room_name: str) -> str:
    if completed_type == StageType.CLIENT_APPROVAL:
        return f"Client approval for {room_name}"
    return f"{get_phase_display_name(completed_type)} for {room_name}"


def build_phase_ready_texts(
    completed_type: str,
    next_type: str,
    room_name: str,
    project_name: str,
) -> dict[str, str]:
    """Textos de la notificación y del email de "fase lista"."""
    next_display = get_phase_display_name(next_type)
    prefix = _completion_prefix(completed_type, room_name)
    tail = f"has been completed. You can now start the {next_display} phase."
    return {
        "title": f"{next_display} Phase Ready",
        "message": f"{prefix} in {project_name} {tail}",
        "subject": f"{next_display} Phase Ready to Start - {project_name}",
        "preview": f"{prefix} {tail}",
    }


async def handle_phase_completion(
    db: AsyncSession,
    stage: Stage,
    completed_by: Optional[str],
    auto_email: bool = True,
    email_sender: Optional[IEmailSender] = None,
) -> PhaseNotificationResult:
    """
    Notifica a los responsables de las fases habilitadas por `stage`.

    Args:
        db: sesión activa (el llamador hace commit)
        stage: fase recién completada
        completed_by: id del usuario que la completó (solo para el log)
        auto_email: enviar también email de "fase lista"
        email_sender: sender inyectable; por defecto el de la configuración
    """
    result = PhaseNotificationResult()
    completed_type = str(stage.type)
    next_types = get_next_phases_to_notify(completed_type)
    if not next_types:
        logger.debug("[PhaseNotify] %s es la última fase; sin avisos", completed_type)
        return result

    try:
        room = await db.get(Room, stage.room_id)
        project = await db.get(Project, room.project_id) if room else None
        if room is None or project is None:
            result.success = False
            result.errors.append("Room or project not found")
            return result

        rows = (
            await db.execute(
                select(Stage, User)
                .join(User, User.id == Stage.assigned_to)
                .where(
                    Stage.room_id == room.id,
                    Stage.type.in_(next_types),
                    User.is_active.is_(True),
                )
            )
        ).all()
    except SQLAlchemyError as exc:
        logger.exception("[PhaseNotify] error cargando fases siguientes stage=%s", stage.id)
        result.success = False
        result.errors.append(str(exc))
        return result

    room_name = format_room_display_name(room.name, room.type)
    order = {t: i for i, t in enumerate(next_types)}
    rows = sorted(rows, key=lambda r: order.get(str(r[0].type), 99))

    sender = email_sender
    for next_stage, assignee in rows:
        texts = build_phase_ready_texts(completed_type, str(next_stage.type), room_name, project.name)

        await create_notification(
            db,
            user_id=assignee.id,
            type=NotificationType.STAGE_ASSIGNED,
            title=texts["title"],
            message=texts["message"],
            related_id=next_stage.id,
            related_type=RelatedType.STAGE,
        )
        result.notifications_sent += 1
        result.next_phase_info.append(
            {
                "stage_id": next_stage.id,
                "stage_type": str(next_stage.type),
                "assignee": {"id": assignee.id, "name": assignee.name, "email": assignee.email},
                "email_preview": {"subject": texts["subject"], "preview": texts["preview"]},
            }
        )

        if not (auto_email and assignee.email_notifications_enabled and assignee.email):
            continue
        try:
            if sender is None:
                sender = get_email_sender()
            await sender.send_phase_ready_email(
                to_email=assignee.email,
                to_name=assignee.name or assignee.email,
                subject=texts["subject"],
                body_text=texts["message"],
            )
            result.emails_sent += 1
        except Exception as exc:
            logger.warning("[PhaseNotify] email a %s falló: %s", assignee.email, exc)
            result.errors.append(f"Email to {assignee.email} failed: {exc}")

    logger.info(
        "[PhaseNotify] stage=%s type=%s by=%s notifications=%d emails=%d errors=%d",
        stage.id,
        completed_type,
        completed_by,
        result.notifications_sent,
        result.emails_sent,
        len(result.errors),
    )
    return result


__all__ = ["PhaseNotificationResult", "build_phase_ready_texts", "handle_phase_completion"]

# Fin del archivo backend/app/modules/notifications/facades/phase_notifications.py
