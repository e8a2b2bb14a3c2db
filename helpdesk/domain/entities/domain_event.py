"""Domain events that trigger email notifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class EventKind(str, Enum):
    """Business operations that can produce notification emails."""

    CONTACT_CREATED = "contact_created"
    CONTACT_MESSAGE = "contact_message"
    TICKET_ASSIGNED = "ticket_assigned"
    TICKET_COMMENT = "ticket_comment"
    TICKET_UPDATED = "ticket_updated"
    TICKET_CREATED = "ticket_created"
    TICKET_RESOLVED = "ticket_resolved"
    USER_CREATED = "user_created"


@dataclass(frozen=True)
class DomainEvent:
    """Immutable record of a committed business operation.

    ``payload`` carries identifiers rather than full entities, e.g.
    ``{"ticket_id": 7, "source": "dashboard"}`` for ``ticket_created``.
    """

    kind: EventKind
    payload: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", EventKind(self.kind))
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload or {})))

    def get(self, key: str, default: Any = None) -> Any:
        """Return the payload value stored under ``key``."""

        value = self.payload.get(key, default)
        return default if value is None else value


__all__ = ["DomainEvent", "EventKind"]
