# -*- coding: utf-8 -*-
"""
backend/app/shared/integrations/email_templates.py

Plantillas (texto y HTML) de los correos transaccionales del estudio:
- mención en el chat de una fase
- fase lista para iniciar

Los valores se escapan para HTML; el texto plano se usa tal cual.

Autor: Atelier
Fecha: 12/08/2026
"""

from html import escape
from typing import Any, Dict, Tuple

MENTION_TEXT = """Hi {to_name},

{author_name} mentioned you in {stage_label}:

"{message_preview}"

Open the conversation: {link}

-- Atelier
"""

MENTION_HTML = """<p>Hi {to_name},</p>
<p><strong>{author_name}</strong> mentioned you in <strong>{stage_label}</strong>:</p>
<blockquote>{message_preview}</blockquote>
<p><a href="{link}">Open the conversation</a></p>
<p>Atelier</p>
"""

PHASE_READY_HTML = """<p>Hi {to_name},</p>
<p>{body_html}</p>
<p>Atelier</p>
"""


def _format(template: str, context: Dict[str, Any], *, html: bool) -> str:
    values = {k: (escape(str(v)) if html else str(v)) for k, v in context.items()}
    return template.format(**values)


def render_mention_email(
    *,
    to_name: str,
    author_name: str,
    stage_label: str,
    message_preview: str,
    link: str,
) -> Tuple[str, str, str]:
    """Devuelve (subject, html, text) del correo de mención."""
    context = {
        "to_name": to_name or "there",
        "author_name": author_name,
        "stage_label": stage_label,
        "message_preview": message_preview,
        "link": link,
    }
    subject = f"{author_name} mentioned you in {stage_label}"
    return subject, _format(MENTION_HTML, context, html=True), _format(MENTION_TEXT, context, html=False)


def render_phase_ready_email(*, to_name: str, body_text: str) -> Tuple[str, str]:
    """Devuelve (html, text) del correo de fase lista."""
    text = f"Hi {to_name or 'there'},\n\n{body_text}\n\n-- Atelier\n"
    html = PHASE_READY_HTML.format(
        to_name=escape(to_name or "there"),
        body_html=escape(body_text).replace("\n", "<br>"),
    )
    return html, text


__all__ = ["render_mention_email", "render_phase_ready_email"]

# Fin del archivo backend/app/shared/integrations/email_templates.py
