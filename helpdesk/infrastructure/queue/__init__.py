"""Mail queue backed by Celery."""

from .celery_app import MAIL_QUEUE, celery_app
from .mail_queue import CeleryMailQueue

__all__ = ["CeleryMailQueue", "MAIL_QUEUE", "celery_app"]
