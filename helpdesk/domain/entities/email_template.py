"""Domain entity representing a stored email template."""

from dataclasses import dataclass


@dataclass
class EmailTemplate:
    """HTML body with ``{placeholder}`` tokens, looked up by ``slug``."""

    id: int | None
    slug: str
    body: str
    subject: str | None = None
    name: str | None = None


__all__ = ["EmailTemplate"]
