"""Turn an event and its fetched entity into the list of people to email."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from helpdesk.domain.entities import (
    DomainEvent,
    FrontPage,
    Recipient,
    Ticket,
    User,
)

from .ports import SettingsReader, UserReader

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"
DEFAULT_RECIPIENT_SETTING = "default_recipient"
APP_NAME_SETTING = "app_name"


class RecipientStrategy(str, Enum):
    SINGLE_FROM_ID = "single_from_id"
    ASSIGNEE = "assignee"
    CONTACT = "contact"
    OWNER_OR_DEFAULT_OR_FIRST = "owner_or_default_or_first"
    DEFAULT_OR_FIRST = "default_or_first"
    OWNER_PLUS_ASSIGNEE = "owner_plus_assignee"
    COMMENT_AUDIENCE = "comment_audience"
    PAGE_OR_ROLE = "page_or_role"


@dataclass
class ContactSubmission:
    """Message sent from the public contact form."""

    email: str
    name: str
    phone: str
    message: str
    page: FrontPage | None = None


def as_recipient(user: User) -> Recipient:
    return Recipient(id=user.id, display_name=user.display_name, email=(user.email or "").strip())


def page_recipient_email(content: Mapping[str, Any]) -> str | None:
    """Return the address configured on the contact page, if any.

    Lookup order: ``contact_form.recipient_email``, ``email.address``,
    ``contact_recipient`` and finally ``email`` when it is a plain string.
    """

    contact_form = content.get("contact_form")
    if isinstance(contact_form, Mapping) and contact_form.get("recipient_email"):
        return str(contact_form["recipient_email"])

    email = content.get("email")
    if isinstance(email, Mapping) and email.get("address"):
        return str(email["address"])

    if content.get("contact_recipient"):
        return str(content["contact_recipient"])

    if isinstance(email, str) and email.strip():
        return email
    return None


def comment_author(event: DomainEvent) -> tuple[int | None, str | None]:
    """Return ``(commenter_id, commenter_name)`` from a ticket comment payload."""

    comment = event.get("comment")
    commenter_id = event.get("commenter_id")
    commenter_name = event.get("commenter_name")
    if isinstance(comment, Mapping):
        author = comment.get("user")
        if isinstance(author, Mapping):
            commenter_id = commenter_id if commenter_id is not None else author.get("id")
            commenter_name = commenter_name or author.get("name")
    return coerce_id(commenter_id), commenter_name


def coerce_id(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class RecipientResolver:
    """Resolve recipients according to a :class:`RecipientStrategy`.

    Results keep insertion order, never contain the same user (or address)
    twice and only include entries with a usable email address.
    """

    def __init__(
        self,
        users: UserReader,
        settings: SettingsReader,
        *,
        app_name: str = "",
    ) -> None:
        self._users = users
        self._settings = settings
        self._app_name = app_name
        self._handlers: dict[
            RecipientStrategy, Callable[[DomainEvent, Any], list[Recipient]]
        ] = {
            RecipientStrategy.SINGLE_FROM_ID: self._single_from_id,
            RecipientStrategy.ASSIGNEE: self._assignee,
            RecipientStrategy.CONTACT: self._contact,
            RecipientStrategy.OWNER_OR_DEFAULT_OR_FIRST: self._owner_or_default_or_first,
            RecipientStrategy.DEFAULT_OR_FIRST: self._default_or_first,
            RecipientStrategy.OWNER_PLUS_ASSIGNEE: self._owner_plus_assignee,
            RecipientStrategy.COMMENT_AUDIENCE: self._comment_audience,
            RecipientStrategy.PAGE_OR_ROLE: self._page_or_role,
        }

    def resolve(
        self, strategy: RecipientStrategy, event: DomainEvent, entity: Any
    ) -> list[Recipient]:
        return self._handlers[RecipientStrategy(strategy)](event, entity)

    def collect(self, candidates: Iterable[User | Recipient | None]) -> list[Recipient]:
        """Convert ``candidates`` to recipients, dropping gaps and duplicates."""

        recipients: list[Recipient] = []
        seen_ids: set[int] = set()
        seen_emails: set[str] = set()
        for candidate in candidates:
            if candidate is None:
                continue
            recipient = candidate if isinstance(candidate, Recipient) else as_recipient(candidate)
            if not recipient.is_deliverable:
                logger.warning(
                    "Recipient %s has no email address; skipping",
                    recipient.id,
                    extra={"context": {"user_id": recipient.id}},
                )
                continue
            email_key = recipient.email.lower()
            if recipient.id is not None and recipient.id in seen_ids:
                continue
            if email_key in seen_emails:
                continue
            if recipient.id is not None:
                seen_ids.add(recipient.id)
            seen_emails.add(email_key)
            recipients.append(recipient)
        return recipients

    def first_available(self, *sources: Callable[[], User | None]) -> list[Recipient]:
        """Evaluate ``sources`` lazily and keep the first usable recipient."""

        for source in sources:
            recipients = self.collect([source()])
            if recipients:
                return recipients
        return []

    def default_recipient(self) -> User | None:
        """Return the user configured in the ``default_recipient`` setting."""

        raw = self._settings.get(DEFAULT_RECIPIENT_SETTING)
        if not raw:
            return None
        user_id = coerce_id(raw)
        if user_id is None:
            logger.warning(
                "Setting '%s' is not a user id: %r", DEFAULT_RECIPIENT_SETTING, raw
            )
            return None
        user = self._users.get(user_id)
        if user is None:
            logger.warning(
                "Default recipient %s does not exist",
                user_id,
                extra={"context": {"user_id": user_id}},
            )
        return user

    def first_with_role(self, alias: str) -> list[Recipient]:
        for user in self._users.list_by_role_alias(alias):
            recipients = self.collect([user])
            if recipients:
                return recipients
        return []

    def _single_from_id(self, event: DomainEvent, entity: Any) -> list[Recipient]:
        if isinstance(entity, User):
            return self.collect([entity])
        user_id = coerce_id(event.get("id"))
        user = self._users.get(user_id) if user_id is not None else None
        if user is None:
            logger.warning("User %s not found", event.get("id"))
            return []
        return self.collect([user])

    def _assignee(self, event: DomainEvent, ticket: Ticket) -> list[Recipient]:
        return self.collect([ticket.assigned_to])

    def _contact(self, event: DomainEvent, ticket: Ticket) -> list[Recipient]:
        return self.collect([ticket.contact])

    def _owner_or_default_or_first(self, event: DomainEvent, ticket: Ticket) -> list[Recipient]:
        return self.first_available(
            lambda: ticket.user,
            self.default_recipient,
            self._users.get_first,
        )

    def _default_or_first(self, event: DomainEvent, entity: Any) -> list[Recipient]:
        return self.first_available(self.default_recipient, self._users.get_first)

    def _owner_plus_assignee(self, event: DomainEvent, ticket: Ticket) -> list[Recipient]:
        return self.collect([ticket.user, ticket.assigned_to])

    def _comment_audience(self, event: DomainEvent, ticket: Ticket) -> list[Recipient]:
        commenter_id, _ = comment_author(event)
        contact = ticket.contact
        if commenter_id is not None and contact is not None and commenter_id != contact.id:
            # Staff replied: the customer is the one waiting for an answer.
            return self.collect([contact])

        team = self.collect([ticket.user, ticket.assigned_to])
        if team:
            return team
        return self.collect(self._users.list_by_role_alias(ADMIN_ROLE))

    def _page_or_role(self, event: DomainEvent, submission: ContactSubmission) -> list[Recipient]:
        page = submission.page
        address = page_recipient_email(page.content) if page is not None else None
        if address:
            name = self._settings.get(APP_NAME_SETTING) or self._app_name
            return self.collect([Recipient(id=None, display_name=name, email=address)])
        return self.first_with_role(ADMIN_ROLE)


__all__ = [
    "ADMIN_ROLE",
    "APP_NAME_SETTING",
    "ContactSubmission",
    "DEFAULT_RECIPIENT_SETTING",
    "RecipientResolver",
    "RecipientStrategy",
    "as_recipient",
    "coerce_id",
    "comment_author",
    "page_recipient_email",
]
