"""Value objects produced while dispatching a notification email."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

NOTIFICATION_KEYS: tuple[str, ...] = (
    "new_user",
    "user_assigned",
    "first_comment",
    "comment_reply",
    "status_priority_changes",
    "ticket_by_customer",
    "ticket_from_dashboard",
    "ticket_resolved",
)


@dataclass(frozen=True)
class Recipient:
    """Person or mailbox that should receive a message."""

    id: int | None
    display_name: str
    email: str

    @property
    def is_deliverable(self) -> bool:
        return bool(self.email and self.email.strip())


@dataclass(frozen=True)
class RenderedMessage:
    """Final HTML body and subject handed over for delivery."""

    html: str
    subject: str


@dataclass(frozen=True)
class MailJob:
    """Serializable payload submitted to the mail queue."""

    to: str
    subject: str
    html: str

    def as_dict(self) -> dict[str, str]:
        return {"to": self.to, "subject": self.subject, "html": self.html}


_FALSE_STRINGS = frozenset({"", "0", "false", "off", "no"})


def _as_flag(value: object) -> bool:
    # Toggles saved from HTML forms arrive as strings such as "0" or "false".
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


class NotificationPreferences(Mapping[str, bool]):
    """Read-only snapshot of the ``{notification_key: enabled}`` toggles."""

    def __init__(self, toggles: Mapping[str, object] | None = None) -> None:
        self._toggles = {str(key): _as_flag(value) for key, value in (toggles or {}).items()}

    @classmethod
    def defaults(cls) -> "NotificationPreferences":
        """Return preferences with every known notification disabled."""

        return cls({key: False for key in NOTIFICATION_KEYS})

    def __getitem__(self, key: str) -> bool:
        return self._toggles[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._toggles)

    def __len__(self) -> int:
        return len(self._toggles)

    def __repr__(self) -> str:
        return f"NotificationPreferences({self._toggles!r})"


__all__ = [
    "MailJob",
    "NOTIFICATION_KEYS",
    "NotificationPreferences",
    "Recipient",
    "RenderedMessage",
]
