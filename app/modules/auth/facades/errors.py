# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/facades/errors.py

Excepciones de dominio del módulo Auth (login y equipo).

Autor: Atelier
Fecha: 12/08/2026
"""


class InvalidCredentials(Exception):
    """Email/contraseña incorrectos o usuario inactivo al iniciar sesión."""
    def __init__(self, message: str = "Credenciales inválidas"):
        super().__init__(message)


class UserNotFound(Exception):
    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"Usuario no encontrado: {user_id}")


class EmailAlreadyExists(Exception):
    def __init__(self, email: str):
        self.email = email
        super().__init__(f"El email ya está registrado: {email}")


class PermissionDenied(Exception):
    """Se lanza cuando el actor no tiene permisos para la operación."""
    def __init__(self, message: str):
        super().__init__(message)


class CannotDeleteSelf(Exception):
    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__("No puedes eliminar tu propia cuenta")


__all__ = [
    "InvalidCredentials",
    "UserNotFound",
    "EmailAlreadyExists",
    "PermissionDenied",
    "CannotDeleteSelf",
]

# Fin del archivo backend/app/modules/auth/facades/errors.py
