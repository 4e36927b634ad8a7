# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/base_models.py

Modelo base para los esquemas Pydantic de la API de Atelier.

- Elimina espacios en strings (`str_strip_whitespace`)
- Lee atributos de objetos ORM (`from_attributes`)
- Acepta alias y nombre de campo (`populate_by_name`)

Autor: Atelier
Fecha: 12/08/2026
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UTF8SafeModel(BaseModel):
    """Base de todos los esquemas de entrada/salida."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


__all__ = ["UTF8SafeModel", "EmailStr", "Field"]
# Fin del archivo backend/app/shared/utils/base_models.py
