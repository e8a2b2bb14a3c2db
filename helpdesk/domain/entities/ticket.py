"""Domain entity representing a support ticket."""

from __future__ import annotations

from dataclasses import dataclass

from .user import User

UID_OFFSET = 100000


@dataclass
class NamedReference:
    """Lookup value attached to a ticket (type, priority, status...)."""

    id: int
    name: str


@dataclass
class Ticket:
    """A support ticket together with the relations notifications need."""

    id: int
    uid: str | None
    subject: str | None
    user: User | None = None
    assigned_to: User | None = None
    contact: User | None = None
    ticket_type: NamedReference | None = None
    priority: NamedReference | None = None
    status: NamedReference | None = None
    department: NamedReference | None = None
    category: NamedReference | None = None

    @property
    def display_uid(self) -> str:
        """Return the public ticket number shown to customers."""

        if self.uid:
            return str(self.uid)
        return str(UID_OFFSET + self.id)


__all__ = ["NamedReference", "Ticket", "UID_OFFSET"]
