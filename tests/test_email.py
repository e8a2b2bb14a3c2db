"""Unit tests for the SendGrid transport."""

from __future__ import annotations

import json
import logging
import types

import pytest

from conftest import FakeSettings, FakeTemplates, FakeTickets, make_ticket, make_user, template
from helpdesk.application.use_cases.notifications import notify_ticket_updated
from helpdesk.config import Settings
from helpdesk.infrastructure import email as email_module
from helpdesk.infrastructure.email import SendGridTransport, TransportError


class _StubSendGridAPIClient:
    """Default stub client that returns a successful response."""

    sent: list = []

    def __init__(self, api_key: str):
        self.api_key = api_key

    def send(self, message):
        _StubSendGridAPIClient.sent.append(message)
        return types.SimpleNamespace(status_code=202, body=None)


@pytest.fixture
def transport() -> SendGridTransport:
    return SendGridTransport("SG.fake", "sender@example.com", sender_name="Support")


def test_send_without_configuration_raises() -> None:
    """Missing SendGrid settings must be reported, not silently ignored."""

    with pytest.raises(TransportError, match="configuration incomplete"):
        SendGridTransport(None, None).send("user@example.com", "Subject", "<p>Body</p>")


def test_send_success(monkeypatch: pytest.MonkeyPatch, transport) -> None:
    """A 2xx SendGrid response completes without error."""

    _StubSendGridAPIClient.sent = []
    monkeypatch.setattr(email_module, "SendGridAPIClient", _StubSendGridAPIClient)

    transport.send("user@example.com", "Subject", "<p>Body</p>")

    assert len(_StubSendGridAPIClient.sent) == 1
    payload = _StubSendGridAPIClient.sent[0].get()
    assert payload["from"] == {"email": "sender@example.com", "name": "Support"}
    assert payload["subject"] == "Subject"


def test_forbidden_error_surfaces_sendgrid_details(monkeypatch: pytest.MonkeyPatch, transport):
    """Forbidden responses from SendGrid should carry meaningful details."""

    class FakeForbiddenError(Exception):
        status_code = 403
        body = json.dumps(
            {
                "errors": [
                    {
                        "message": "The provided authorization grant is invalid.",
                        "help": "https://sendgrid.com/docs/for-developers/sending-email/authentication/",
                    }
                ]
            }
        ).encode()

    class FailingClient(_StubSendGridAPIClient):
        def send(self, message):
            raise FakeForbiddenError()

    monkeypatch.setattr(email_module, "SendGridAPIClient", FailingClient)

    with pytest.raises(TransportError) as excinfo:
        transport.send("user@example.com", "Subject", "<p>Body</p>")

    assert excinfo.value.status_code == 403
    assert "status 403" in str(excinfo.value)
    assert "authorization grant is invalid" in str(excinfo.value)


def test_non_success_status_is_an_error(monkeypatch: pytest.MonkeyPatch, transport):
    class RejectingClient(_StubSendGridAPIClient):
        def send(self, message):
            return types.SimpleNamespace(status_code=400, body=b'{"errors": [{"message": "Bad to"}]}')

    monkeypatch.setattr(email_module, "SendGridAPIClient", RejectingClient)

    with pytest.raises(TransportError, match="responded with status 400: Bad to"):
        transport.send("user@example.com", "Subject", "<p>Body</p>")


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        (None, None),
        (b"", None),
        ("plain text failure", "plain text failure"),
        ({"errors": [{"message": "A"}, {"message": "B", "help": "url"}]}, "A; B (help: url)"),
        (["x", "y"], "x; y"),
    ],
)
def test_extract_sendgrid_error_details(body, expected) -> None:
    assert email_module._extract_sendgrid_error_details(body) == expected


def test_from_settings_uses_the_sender_name() -> None:
    settings = Settings(
        sendgrid_api_key="SG.key",
        sendgrid_sender="noreply@example.com",
        mail_from_name="Acme Support",
    )

    transport = SendGridTransport.from_settings(settings)

    assert transport.configured is True


def test_settings_require_both_sendgrid_values() -> None:
    with pytest.raises(ValueError):
        Settings(sendgrid_api_key="SG.key", sendgrid_sender=None)


def test_failed_send_during_dispatch_is_logged_once(monkeypatch: pytest.MonkeyPatch, harness, caplog):
    """A SendGrid failure yields a single error record, written by the dispatcher."""

    class NetworkDownClient(_StubSendGridAPIClient):
        def send(self, message):
            raise RuntimeError("network down")

    monkeypatch.setattr(email_module, "SendGridAPIClient", NetworkDownClient)
    owner = make_user(3, "Owner", "owner@example.com")
    harness.settings = FakeSettings(preferences={"status_priority_changes": True})
    harness.tickets = FakeTickets([make_ticket(user=owner)])
    harness.templates = FakeTemplates([template("ticket_updated")])
    harness.transport = SendGridTransport("SG.fake", "sender@example.com")

    with caplog.at_level("ERROR"):
        report = notify_ticket_updated(harness.ctx, {"ticket_id": 7})

    errors = [record for record in caplog.records if record.levelno >= logging.ERROR]
    assert [recipient.email for recipient in report.failed] == ["owner@example.com"]
    assert len(errors) == 1
    assert errors[0].name == "helpdesk.application.use_cases.notifications.pipeline"
    assert "SendGrid API request failed: network down" in errors[0].getMessage()
