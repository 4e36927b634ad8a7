# -*- coding: utf-8 -*-
"""
backend/app/modules/clients/schemas/client_schemas.py

Esquemas de entrada/salida de clientes.

Autor: Atelier
Fecha: 12/08/2026
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.shared.utils.base_models import UTF8SafeModel, EmailStr


class ClientCreateIn(UTF8SafeModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=64)
    company: Optional[str] = Field(default=None, max_length=255)


class ClientUpdateIn(UTF8SafeModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=64)
    company: Optional[str] = Field(default=None, max_length=255)


class ClientRead(UTF8SafeModel):
    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


__all__ = ["ClientCreateIn", "ClientUpdateIn", "ClientRead"]

# Fin del archivo backend/app/modules/clients/schemas/client_schemas.py
