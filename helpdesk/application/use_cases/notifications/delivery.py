"""Choose between sending an email inline and submitting it to the queue."""

from __future__ import annotations

import logging
from enum import Enum

from helpdesk.domain.entities import MailJob, Recipient, RenderedMessage

from .errors import DeliveryError
from .ports import MailQueue, MailTransport

logger = logging.getLogger(__name__)


class DeliveryMode(str, Enum):
    SYNC = "sync"
    QUEUED = "queued"


class DeliverySelector:
    """Hand rendered messages to the transport or the mail queue.

    The mode is decided by a single flag (``QUEUE_ENABLE``). Whatever the
    transport or queue raises is converted into :class:`DeliveryError` so
    callers never depend on SendGrid or Celery exception types.
    """

    def __init__(
        self,
        transport: MailTransport,
        queue: MailQueue,
        *,
        queue_enabled: bool,
    ) -> None:
        self._transport = transport
        self._queue = queue
        self._queue_enabled = queue_enabled

    @property
    def mode(self) -> DeliveryMode:
        return DeliveryMode.QUEUED if self._queue_enabled else DeliveryMode.SYNC

    def deliver(
        self,
        message: RenderedMessage,
        recipient: Recipient,
        mode: DeliveryMode | None = None,
    ) -> DeliveryMode:
        """Deliver ``message`` to ``recipient`` and return the mode used."""

        mode = mode or self.mode
        if not recipient.is_deliverable:
            raise DeliveryError(
                "Recipient has no email address", recipient=recipient, mode=mode.value
            )

        try:
            if mode is DeliveryMode.QUEUED:
                self._queue.enqueue(
                    MailJob(to=recipient.email, subject=message.subject, html=message.html)
                )
            else:
                self._transport.send(recipient.email, message.subject, message.html)
        except Exception as exc:
            raise DeliveryError(
                str(exc) or exc.__class__.__name__, recipient=recipient, mode=mode.value
            ) from exc

        logger.debug("Message for %s handed over (%s)", recipient.email, mode.value)
        return mode


__all__ = ["DeliveryMode", "DeliverySelector"]
