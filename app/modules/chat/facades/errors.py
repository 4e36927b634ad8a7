# -*- coding: utf-8 -*-
"""
backend/app/modules/chat/facades/errors.py

Errores de dominio del chat por fase.

Autor: Atelier
Fecha: 12/08/2026
"""


class StageNotFound(Exception):
    def __init__(self, stage_id):
        self.stage_id = stage_id
        super().__init__(f"Fase no encontrada: {stage_id}")


class MessageNotFound(Exception):
    def __init__(self, message_id):
        self.message_id = message_id
        super().__init__(f"Mensaje no encontrado: {message_id}")


class InvalidMessage(Exception):
    """Contenido vacío sin adjuntos, padre inválido o mensaje ya borrado."""
    def __init__(self, message: str):
        super().__init__(message)


class ChatPermissionDenied(Exception):
    def __init__(self, message: str = "No tienes permiso sobre este mensaje"):
        super().__init__(message)


__all__ = ["StageNotFound", "MessageNotFound", "InvalidMessage", "ChatPermissionDenied"]

# Fin del archivo backend/app/modules/chat/facades/errors.py
