"""Celery tasks delivering queued notification emails."""

from __future__ import annotations

import logging

from helpdesk.infrastructure.email import SendGridTransport, TransportError

from .celery_app import celery_app

logger = logging.getLogger(__name__)


@celery_app.task(name="helpdesk.send_mail_job")
def send_mail_job(to: str, subject: str, html: str) -> bool:
    """Send one queued email; failures are logged, never retried."""

    transport = SendGridTransport.from_settings()
    try:
        transport.send(to, subject, html)
    except TransportError as exc:
        logger.error(
            "Queued email to %s failed: %s",
            to,
            exc,
            extra={"context": {"recipient": to, "subject": subject}},
        )
        return False
    logger.info("Queued email delivered to %s", to, extra={"context": {"recipient": to}})
    return True


__all__ = ["send_mail_job"]
