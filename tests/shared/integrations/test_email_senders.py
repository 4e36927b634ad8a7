# -*- coding: utf-8 -*-
"""
backend/tests/shared/integrations/test_email_senders.py

Factory de EmailSender, plantillas y MailerSendEmailSender con
httpx.MockTransport.

Autor: Atelier
Fecha: 12/08/2026
"""

import json
from types import SimpleNamespace

import httpx
import pytest
from pydantic import SecretStr

from app.shared.integrations.email_sender import EmailSender, StubEmailSender, get_email_sender
from app.shared.integrations.email_templates import render_mention_email, render_phase_ready_email
from app.shared.integrations.mailersend_email_sender import MAILERSEND_API_URL, MailerSendEmailSender


def _settings(**overrides):
    data = dict(
        email_mode="console",
        is_prod=False,
        mailersend_api_key=SecretStr(" key-123 "),
        mailersend_from_email="studio@example.com",
        mailersend_from_name="Atelier",
        email_timeout_sec=10,
    )
    data.update(overrides)
    return SimpleNamespace(**data)


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------
def test_console_mode_returns_stub():
    assert isinstance(EmailSender.from_settings(_settings()), StubEmailSender)
    assert isinstance(get_email_sender(), StubEmailSender)


def test_api_mode_returns_mailersend():
    sender = EmailSender.from_settings(_settings(email_mode="api"))
    assert isinstance(sender, MailerSendEmailSender)
    assert sender.api_key == "key-123"
    assert sender.timeout == 10


def test_api_mode_without_credentials():
    with pytest.raises(ValueError):
        EmailSender.from_settings(_settings(email_mode="api", mailersend_api_key=None))


def test_unknown_mode():
    assert isinstance(EmailSender.from_settings(_settings(email_mode="smtp")), StubEmailSender)
    with pytest.raises(ValueError):
        EmailSender.from_settings(_settings(email_mode="smtp", is_prod=True))


async def test_stub_records_sent_mail():
    stub = StubEmailSender()
    await stub.send_phase_ready_email(to_email="a@example.com", to_name="A", subject="Ready", body_text="x")
    assert stub.sent == [{"kind": "phase_ready", "to": "a@example.com", "subject": "Ready"}]


# ---------------------------------------------------------------------------
# Plantillas
# ---------------------------------------------------------------------------
def test_mention_template_escapes_html():
    subject, html, text = render_mention_email(
        to_name="Rui",
        author_name="Dana",
        stage_label="3D Rendering - Kitchen (Villa)",
        message_preview="<b>look</b> & review",
        link="https://studio.example.com/projects/p1",
    )
    assert subject == "Dana mentioned you in 3D Rendering - Kitchen (Villa)"
    assert "&lt;b&gt;look&lt;/b&gt; &amp; review" in html
    assert '"<b>look</b> & review"' in text
    assert "https://studio.example.com/projects/p1" in text


def test_phase_ready_template():
    html, text = render_phase_ready_email(to_name="", body_text="Line one\nLine <two>")
    assert text.startswith("Hi there,")
    assert "Line one<br>Line &lt;two&gt;" in html


# ---------------------------------------------------------------------------
# MailerSend
# ---------------------------------------------------------------------------
def _mailersend(handler) -> MailerSendEmailSender:
    return MailerSendEmailSender(
        api_key="key-123",
        from_email="studio@example.com",
        transport=httpx.MockTransport(handler),
    )


def test_constructor_requires_credentials():
    with pytest.raises(ValueError):
        MailerSendEmailSender(api_key="", from_email="studio@example.com")
    with pytest.raises(ValueError):
        MailerSendEmailSender(api_key="k", from_email="")


async def test_send_phase_ready_email():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(202, headers={"X-Message-Id": "msg-1"})

    await _mailersend(handler).send_phase_ready_email(
        to_email="rui@example.com", to_name="Rui", subject="3D Rendering Phase Ready to Start - Villa", body_text="Go"
    )

    [request] = seen
    assert str(request.url) == MAILERSEND_API_URL
    assert request.headers["Authorization"] == "Bearer key-123"
    payload = json.loads(request.content)
    assert payload["from"] == {"email": "studio@example.com", "name": "Atelier"}
    assert payload["to"] == [{"email": "rui@example.com", "name": "Rui"}]
    assert payload["subject"] == "3D Rendering Phase Ready to Start - Villa"
    assert "Go" in payload["text"]


async def test_send_mention_email_subject():
    seen = []

    def handler(request):
        seen.append(json.loads(request.content))
        return httpx.Response(202)

    await _mailersend(handler).send_mention_email(
        to_email="rui@example.com",
        to_name="Rui",
        author_name="Dana",
        stage_label="Drawings - Den (Casa)",
        message_preview="hola",
        link="https://studio.example.com",
    )
    assert seen[0]["subject"] == "Dana mentioned you in Drawings - Den (Casa)"


async def test_api_error_raises_runtime_error():
    sender = _mailersend(lambda r: httpx.Response(422, json={"message": "invalid from"}))
    with pytest.raises(RuntimeError, match="422"):
        await sender.send_phase_ready_email(to_email="a@example.com", to_name="A", subject="s", body_text="b")


async def test_network_error_raises_runtime_error():
    def handler(request):
        raise httpx.ConnectError("boom", request=request)

    with pytest.raises(RuntimeError, match="request error"):
        await _mailersend(handler).send_phase_ready_email(to_email="a@example.com", to_name="A", subject="s", body_text="b")

# Fin del archivo backend/tests/shared/integrations/test_email_senders.py
