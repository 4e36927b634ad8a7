# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/models/notification_models.py

Notificaciones in-app por usuario.

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, as_str_enum, new_id
from app.shared.database.transactions import now_utc
from app.modules.notifications.enums import NotificationType


class Notification(Base):
    __tablename__ = "notifications"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type: Mapped[NotificationType] = mapped_column(
        as_str_enum(NotificationType, name="notification_type"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    related_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    related_type: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=now_utc, server_default=func.now(), index=True
    )

    __table_args__ = (
        Index("idx_notifications_user_read", "user_id", "read"),
        Index("idx_notifications_type_related", "type", "related_id"),
    )

    def __repr__(self) -> str:
        return f"<Notification {self.type} user={self.user_id} read={self.read}>"


__all__ = ["Notification"]

# Fin del archivo backend/app/modules/notifications/models/notification_models.py
