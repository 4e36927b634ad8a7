# -*- coding: utf-8 -*-
"""
backend/app/shared/integrations/mailersend_email_sender.py

Envío de correos transaccionales usando la API de MailerSend.

Notas:
- MailerSend responde 202 Accepted cuando encola el correo.
- Timeouts y errores de red se convierten en RuntimeError; el llamador
  decide si el fallo es tolerable (los correos de notificación lo son).

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

import httpx

from app.shared.integrations.email_templates import (
    render_mention_email,
    render_phase_ready_email,
)

if TYPE_CHECKING:
    from app.shared.config.settings_base import BaseAppSettings

logger = logging.getLogger(__name__)

MAILERSEND_API_URL = "https://api.mailersend.com/v1/email"


class MailerSendEmailSender:
    """Envío de correos usando MailerSend API."""

    def __init__(
        self,
        api_key: str,
        from_email: str,
        from_name: str = "Atelier",
        timeout: int = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key:
            raise ValueError("MAILERSEND_API_KEY es requerido")
        if not from_email:
            raise ValueError("MAILERSEND_FROM_EMAIL es requerido")

        self.api_key = api_key
        self.from_email = from_email
        self.from_name = from_name
        self.timeout = timeout
        # Permite inyectar httpx.MockTransport en tests
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: BaseAppSettings) -> "MailerSendEmailSender":
        api_key = ""
        if settings.mailersend_api_key:
            api_key = settings.mailersend_api_key.get_secret_value().strip()
        from_email = (settings.mailersend_from_email or "").strip()

        if not api_key or not from_email:
            raise ValueError("[MailerSend] MAILERSEND_API_KEY y MAILERSEND_FROM_EMAIL son requeridos")

        logger.info("[MailerSend] config: from=%s timeout=%ss", from_email, settings.email_timeout_sec)
        return cls(
            api_key=api_key,
            from_email=from_email,
            from_name=(settings.mailersend_from_name or "Atelier").strip(),
            timeout=settings.email_timeout_sec or 30,
        )

    async def _send_email(self, to_email: str, to_name: str, subject: str, html: str, text: str) -> str:
        """POST a MailerSend. Retorna el message id (o "accepted")."""
        payload = {
            "from": {"email": self.from_email, "name": self.from_name},
            "to": [{"email": to_email, "name": to_name or to_email}],
            "subject": subject,
            "html": html,
            "text": text,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.post(MAILERSEND_API_URL, json=payload, headers=headers)
            except httpx.TimeoutException as e:
                logger.error("[MailerSend] timeout: to=%s error=%s", to_email, e)
                raise RuntimeError(f"MailerSend timeout: {e}") from e
            except httpx.RequestError as e:
                logger.error("[MailerSend] request error: to=%s error=%s", to_email, e)
                raise RuntimeError(f"MailerSend request error: {e}") from e

        if response.status_code == 202:
            message_id = response.headers.get("X-Message-Id", "accepted")
            logger.info("[MailerSend] ✉️ enviado: to=%s message_id=%s", to_email, message_id)
            return message_id

        body = response.text[:500]
        logger.error("[MailerSend] envío falló: to=%s status=%d body=%s", to_email, response.status_code, body)
        raise RuntimeError(f"MailerSend API error: {response.status_code} - {body[:200]}")

    async def send_mention_email(
        self,
        to_email: str,
        to_name: str,
        author_name: str,
        stage_label: str,
        message_preview: str,
        link: str,
    ) -> None:
        subject, html, text = render_mention_email(
            to_name=to_name,
            author_name=author_name,
            stage_label=stage_label,
            message_preview=message_preview,
            link=link,
        )
        await self._send_email(to_email, to_name, subject, html, text)

    async def send_phase_ready_email(
        self,
        to_email: str,
        to_name: str,
        subject: str,
        body_text: str,
    ) -> None:
        html, text = render_phase_ready_email(to_name=to_name, body_text=body_text)
        await self._send_email(to_email, to_name, subject, html, text)


__all__ = ["MailerSendEmailSender", "MAILERSEND_API_URL"]

# Fin del archivo backend/app/shared/integrations/mailersend_email_sender.py
