"""Pydantic models describing notification preferences."""

from __future__ import annotations

from pydantic import BaseModel, Field


class NotificationPreferencesRead(BaseModel):
    """Current on/off state of every email notification."""

    preferences: dict[str, bool] = Field(default_factory=dict)


__all__ = ["NotificationPreferencesRead"]
