"""Domain entity representing a configurable public page."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class FrontPage:
    """Public page whose ``content`` holds editable JSON configuration."""

    id: int | None
    slug: str
    title: str
    is_active: bool = True
    content: dict[str, Any] = field(default_factory=dict)


__all__ = ["FrontPage"]
