# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/facades/errors.py

Autor: Atelier
Fecha: 12/08/2026
"""


class NotificationNotFound(Exception):
    """No existe la notificación o no pertenece al usuario."""
    def __init__(self, notification_id):
        self.notification_id = notification_id
        super().__init__(f"Notificación no encontrada: {notification_id}")


__all__ = ["NotificationNotFound"]

# Fin del archivo backend/app/modules/notifications/facades/errors.py
