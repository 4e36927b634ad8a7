# -*- coding: utf-8 -*-
"""
backend/app/shared/integrations/email_sender.py

Factory unificado para EmailSender.
Soporta dos modos:
- console: stub que solo loguea (desarrollo/tests)
- api: envío via MailerSend

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import logging
from typing import Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from app.shared.config.settings_base import BaseAppSettings

logger = logging.getLogger(__name__)


class IEmailSender(Protocol):
    """Protocolo para implementaciones de email sender."""
    async def send_mention_email(
        self,
        to_email: str,
        to_name: str,
        author_name: str,
        stage_label: str,
        message_preview: str,
        link: str,
    ) -> None: ...

    async def send_phase_ready_email(
        self,
        to_email: str,
        to_name: str,
        subject: str,
        body_text: str,
    ) -> None: ...


class StubEmailSender:
    """No envía correos; solo hace logging (modo console). Guarda lo enviado en `sent`."""

    def __init__(self) -> None:
        self.sent: list[dict] = []

    async def send_mention_email(
        self,
        to_email: str,
        to_name: str,
        author_name: str,
        stage_label: str,
        message_preview: str,
        link: str,
    ) -> None:
        self.sent.append({"kind": "mention", "to": to_email, "stage_label": stage_label})
        logger.info("[CONSOLE EMAIL] Mención → %s | de=%s | %s", to_email, author_name, stage_label)

    async def send_phase_ready_email(
        self,
        to_email: str,
        to_name: str,
        subject: str,
        body_text: str,
    ) -> None:
        self.sent.append({"kind": "phase_ready", "to": to_email, "subject": subject})
        logger.info("[CONSOLE EMAIL] Fase lista → %s | %s", to_email, subject)


class EmailSender:
    """
    Selección de email sender según settings.

    Variables de entorno:
    - EMAIL_MODE: console | api
    - MAILERSEND_API_KEY / MAILERSEND_FROM_EMAIL / MAILERSEND_FROM_NAME (modo api)
    """

    @staticmethod
    def from_settings(settings: BaseAppSettings) -> IEmailSender:
        """
        Crea el email sender apropiado.

        Raises:
            ValueError: si EMAIL_MODE=api pero faltan credenciales, o si el
                modo no se reconoce en producción
        """
        mode = (settings.email_mode or "console").strip().lower()

        if mode in ("console", "stub", ""):
            logger.debug("[EmailSender] Usando StubEmailSender (modo console)")
            return StubEmailSender()

        if mode == "api":
            from app.shared.integrations.mailersend_email_sender import MailerSendEmailSender
            logger.info("[EmailSender] Usando MailerSendEmailSender")
            return MailerSendEmailSender.from_settings(settings)

        if settings.is_prod:
            raise ValueError(f"EMAIL_MODE '{mode}' no reconocido. Configure EMAIL_MODE=console|api")

        logger.warning("[EmailSender] EMAIL_MODE=%r no reconocido, usando console (solo dev)", mode)
        return StubEmailSender()

    @staticmethod
    def from_env() -> IEmailSender:
        """Carga settings y delega a from_settings()."""
        from app.shared.config import get_settings
        return EmailSender.from_settings(get_settings())


def get_email_sender() -> IEmailSender:
    """Dependencia/atajo: sender según la configuración activa."""
    return EmailSender.from_env()


__all__ = ["IEmailSender", "StubEmailSender", "EmailSender", "get_email_sender"]

# Fin del archivo backend/app/shared/integrations/email_sender.py
