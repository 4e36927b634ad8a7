# -*- coding: utf-8 -*-
"""
backend/app/modules/rooms/models/room_models.py

Modelos de rooms (espacios de un proyecto) y stages (fases por room).

- Cada room nace con las 5 fases de PHASE_SEQUENCE.
- (room_id, type) es único: una fase por tipo y room.
- current_stage apunta a la fase activa (o la próxima pendiente).

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, TimestampMixin, as_str_enum, new_id
from app.modules.rooms.enums import RoomStatus, RoomType, StageStatus, StageType


class Room(TimestampMixin, Base):
    __tablename__ = "rooms"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    project_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type: Mapped[RoomType] = mapped_column(as_str_enum(RoomType, name="room_type"), nullable=False)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    order: Mapped[int] = mapped_column("order", Integer, nullable=False, default=0)
    status: Mapped[RoomStatus] = mapped_column(
        as_str_enum(RoomStatus, name="room_status"),
        nullable=False,
        default=RoomStatus.NOT_STARTED,
    )
    current_stage: Mapped[Optional[StageType]] = mapped_column(
        as_str_enum(StageType, name="room_current_stage"), nullable=True
    )
    start_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    due_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<Room id={self.id} type={self.type} name={self.name!r}>"


class Stage(TimestampMixin, Base):
    __tablename__ = "stages"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    room_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type: Mapped[StageType] = mapped_column(as_str_enum(StageType, name="stage_type"), nullable=False)
    status: Mapped[StageStatus] = mapped_column(
        as_str_enum(StageStatus, name="stage_status"),
        nullable=False,
        default=StageStatus.NOT_STARTED,
        index=True,
    )
    assigned_to: Mapped[Optional[str]] = mapped_column(
        String(32), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    due_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    start_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    started_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_by_id: Mapped[Optional[str]] = mapped_column(
        String(32), ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )

    __table_args__ = (
        UniqueConstraint("room_id", "type", name="uq_stages_room_id_type"),
        Index("idx_stages_due_date_status", "due_date", "status"),
    )

    def __repr__(self) -> str:
        return f"<Stage id={self.id} type={self.type} status={self.status}>"


__all__ = ["Room", "Stage"]

# Fin del archivo backend/app/modules/rooms/models/room_models.py
