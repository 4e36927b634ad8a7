# -*- coding: utf-8 -*-
"""
backend/app/shared/integrations/__init__.py

Clientes de integración con servicios externos (correo, Dropbox).
"""

from .email_sender import EmailSender, IEmailSender, StubEmailSender, get_email_sender

__all__ = [
    "EmailSender",
    "IEmailSender",
    "StubEmailSender",
    "get_email_sender",
]
