"""SendGrid transport used to deliver rendered notification emails."""

from __future__ import annotations

import json
import logging
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import From, Mail

from helpdesk.config import Settings, get_settings

logger = logging.getLogger(__name__)


class TransportError(RuntimeError):
    """Raised when SendGrid refuses or fails to accept a message."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a human readable description for a SendGrid error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list):
            messages: list[str] = []
            for item in errors:
                if not isinstance(item, dict):
                    continue
                message = item.get("message")
                help_link = item.get("help")
                if message and help_link:
                    messages.append(f"{message} (help: {help_link})")
                elif message:
                    messages.append(str(message))
            if messages:
                return "; ".join(messages)
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    if isinstance(parsed, list):
        return "; ".join(str(item) for item in parsed)

    return None


def _describe_failure(prefix: str, status_code: Any, details: str | None) -> str:
    if status_code and details:
        return f"{prefix} with status {status_code}: {details}"
    if status_code:
        return f"{prefix} with status {status_code}"
    if details:
        return f"{prefix}: {details}"
    return prefix


class SendGridTransport:
    """Send HTML emails through the SendGrid REST API."""

    def __init__(
        self,
        api_key: str | None,
        sender: str | None,
        *,
        sender_name: str | None = None,
    ) -> None:
        self._api_key = api_key
        self._sender = sender
        self._sender_name = sender_name

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SendGridTransport":
        settings = settings or get_settings()
        return cls(
            settings.sendgrid_api_key,
            settings.sendgrid_sender,
            sender_name=settings.mail_from_name,
        )

    @property
    def configured(self) -> bool:
        return bool(self._api_key and self._sender)

    def send(self, to: str, subject: str, html: str) -> None:
        """Deliver one message, raising :class:`TransportError` on failure."""

        if not self.configured:
            raise TransportError("SendGrid configuration incomplete; cannot deliver email")

        message = Mail(
            from_email=From(self._sender, self._sender_name),
            to_emails=to,
            subject=subject,
            html_content=html,
        )

        try:
            client = SendGridAPIClient(self._api_key)
            response = client.send(message)
        except Exception as exc:
            status_code = getattr(exc, "status_code", None)
            details = _extract_sendgrid_error_details(getattr(exc, "body", None))
            description = _describe_failure(
                "SendGrid API request failed", status_code, details or str(exc) or None
            )
            raise TransportError(description, status_code=status_code) from exc

        status_code = getattr(response, "status_code", None)
        if not isinstance(status_code, int) or not 200 <= status_code < 300:
            details = _extract_sendgrid_error_details(getattr(response, "body", None))
            description = _describe_failure("SendGrid API responded", status_code, details)
            raise TransportError(
                description,
                status_code=status_code if isinstance(status_code, int) else None,
            )

        logger.debug("SendGrid accepted message for %s", to)


__all__ = ["SendGridTransport", "TransportError"]
