"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

from .role import Role


@dataclass
class User:
    """Core attributes describing an application user or contact."""

    id: int | None
    role: Role | None
    name: str
    email: str | None
    first_name: str | None = None
    created_at: datetime | None = None
    is_active: bool = True

    @property
    def display_name(self) -> str:
        """Return the best available name for greetings."""

        return self.name or self.first_name or ""


__all__ = ["User"]
