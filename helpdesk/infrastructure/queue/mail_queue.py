"""Queue submission interface for notification emails."""

from __future__ import annotations

import logging

from helpdesk.domain.entities import MailJob

logger = logging.getLogger(__name__)


class CeleryMailQueue:
    """Submit :class:`MailJob` payloads to the Celery ``mail`` queue."""

    def __init__(self, task=None) -> None:
        if task is None:
            from .tasks import send_mail_job

            task = send_mail_job
        self._task = task

    def enqueue(self, job: MailJob) -> None:
        result = self._task.delay(**job.as_dict())
        logger.debug("Mail job %s queued for %s", getattr(result, "id", None), job.to)


__all__ = ["CeleryMailQueue"]
