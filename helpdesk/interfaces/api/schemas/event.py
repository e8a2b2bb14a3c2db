"""Pydantic models for the event ingress endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from helpdesk.domain.entities import EventKind


class EventCreate(BaseModel):
    """Domain event raised by the surrounding application."""

    kind: EventKind
    payload: dict[str, Any] = Field(
        default_factory=dict, description="Identifiers of the entities the event refers to"
    )


class DispatchReportRead(BaseModel):
    """Summary of the emails produced for one event."""

    notification: str
    sent: list[str] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)
    skipped_reason: str | None = None


__all__ = ["DispatchReportRead", "EventCreate"]
