"""Domain entities exposed by the application."""

from .domain_event import DomainEvent, EventKind
from .email_template import EmailTemplate
from .front_page import FrontPage
from .notification import (
    NOTIFICATION_KEYS,
    MailJob,
    NotificationPreferences,
    Recipient,
    RenderedMessage,
)
from .role import Role
from .ticket import UID_OFFSET, NamedReference, Ticket
from .user import User

__all__ = [
    "DomainEvent",
    "EventKind",
    "EmailTemplate",
    "FrontPage",
    "MailJob",
    "NOTIFICATION_KEYS",
    "NotificationPreferences",
    "Recipient",
    "RenderedMessage",
    "Role",
    "NamedReference",
    "Ticket",
    "UID_OFFSET",
    "User",
]
