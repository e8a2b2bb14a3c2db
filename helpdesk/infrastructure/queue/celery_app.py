"""Celery application that runs queued notification emails."""

from __future__ import annotations

from celery import Celery

from helpdesk.config import get_settings

MAIL_QUEUE = "mail"

settings = get_settings()

celery_app = Celery(
    "helpdesk",
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend,
    include=["helpdesk.infrastructure.queue.tasks"],
)

# Mail jobs get a dedicated queue so a shared broker does not mix them with
# other workloads.
celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    worker_prefetch_multiplier=1,
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    task_ignore_result=True,
    task_default_queue=MAIL_QUEUE,
)


__all__ = ["MAIL_QUEUE", "celery_app"]
