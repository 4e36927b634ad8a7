# -*- coding: utf-8 -*-
"""
backend/app/modules/activity/models/activity_log_models.py

Registro de actividad (atribución de acciones a usuarios).

- actor_id es NULL para acciones del sistema (jobs programados).
- action/entity se guardan como texto libre: el vocabulario vive en enums,
  pero registros antiguos con acciones desconocidas siguen siendo legibles.
- project_id se desnormaliza desde details para filtrar el feed por proyecto.
  No es FK: el historial sobrevive al borrado del proyecto.

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, ForeignKey, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, new_id
from app.shared.database.transactions import now_utc


class ActivityLog(Base):
    __tablename__ = "activity_logs"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    actor_id: Mapped[Optional[str]] = mapped_column(
        String(32), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    action: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    entity: Mapped[str] = mapped_column(String(32), nullable=False)
    entity_id: Mapped[str] = mapped_column(String(64), nullable=False)
    project_id: Mapped[Optional[str]] = mapped_column(String(32), nullable=True, index=True)
    details: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    ip_address: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=now_utc, server_default=func.now(), index=True
    )

    __table_args__ = (
        Index("ix_activity_logs_entity_entity_id", "entity", "entity_id"),
    )

    def __repr__(self) -> str:
        return f"<ActivityLog {self.action} {self.entity}:{self.entity_id}>"


__all__ = ["ActivityLog"]

# Fin del archivo backend/app/modules/activity/models/activity_log_models.py
