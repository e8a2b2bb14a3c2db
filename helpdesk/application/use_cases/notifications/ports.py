"""Interfaces the dispatch pipeline depends on.

The SQLAlchemy repositories, the SendGrid transport and the Celery queue
satisfy these protocols in production; tests pass in-memory fakes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from helpdesk.domain.entities import (
    EmailTemplate,
    FrontPage,
    MailJob,
    NotificationPreferences,
    Ticket,
    User,
)


class SettingsReader(Protocol):
    def get(self, name: str, default: str | None = None) -> str | None:
        ...

    def get_notification_preferences(self) -> NotificationPreferences:
        ...


class UserReader(Protocol):
    def get(self, user_id: int) -> User | None:
        ...

    def get_first(self) -> User | None:
        ...

    def list_by_role_alias(self, alias: str) -> Sequence[User]:
        ...


class TicketReader(Protocol):
    def get_with_relations(self, ticket_id: int) -> Ticket | None:
        ...


class TemplateReader(Protocol):
    def get_by_slug(self, slug: str) -> EmailTemplate | None:
        ...


class PageReader(Protocol):
    def get_by_slug(self, slug: str) -> FrontPage | None:
        ...


class MailTransport(Protocol):
    """Synchronous send; raises on failure."""

    def send(self, to: str, subject: str, html: str) -> None:
        ...


class MailQueue(Protocol):
    """Fire-and-forget submission of a mail job."""

    def enqueue(self, job: MailJob) -> None:
        ...


__all__ = [
    "MailQueue",
    "MailTransport",
    "PageReader",
    "SettingsReader",
    "TemplateReader",
    "TicketReader",
    "UserReader",
]
