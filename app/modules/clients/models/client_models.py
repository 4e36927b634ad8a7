# -*- coding: utf-8 -*-
"""
backend/app/modules/clients/models/client_models.py

Clientes del estudio (dueños de los proyectos).

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, TimestampMixin, new_id


class Client(TimestampMixin, Base):
    __tablename__ = "clients"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[Optional[str]] = mapped_column(String(320), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    company: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Client id={self.id} name={self.name!r}>"


__all__ = ["Client"]

# Fin del archivo backend/app/modules/clients/models/client_models.py
