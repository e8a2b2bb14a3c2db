"""Route domain events to their coordinator."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from helpdesk.domain.entities import DomainEvent, EventKind

from .account_events import CONTACT_CREATED, CONTACT_MESSAGE, USER_CREATED
from .context import DispatchContext
from .pipeline import Coordinator, DispatchReport, run_pipeline
from .ticket_events import (
    TICKET_ASSIGNED,
    TICKET_COMMENT,
    TICKET_CREATED,
    TICKET_RESOLVED,
    TICKET_UPDATED,
)

logger = logging.getLogger(__name__)

COORDINATORS: dict[EventKind, Coordinator] = {
    coordinator.kind: coordinator
    for coordinator in (
        CONTACT_CREATED,
        CONTACT_MESSAGE,
        TICKET_ASSIGNED,
        TICKET_COMMENT,
        TICKET_UPDATED,
        TICKET_CREATED,
        TICKET_RESOLVED,
        USER_CREATED,
    )
}


def dispatch_event(ctx: DispatchContext, event: DomainEvent) -> DispatchReport:
    """Send the notifications ``event`` calls for."""

    coordinator = COORDINATORS[event.kind]
    logger.debug("Dispatching %s", event.kind.value, extra={"context": {"kind": event.kind.value}})
    return run_pipeline(ctx, coordinator, event)


def _notify(kind: EventKind, ctx: DispatchContext, payload: Mapping[str, Any]) -> DispatchReport:
    return dispatch_event(ctx, DomainEvent(kind, payload))


def notify_contact_created(ctx: DispatchContext, payload: Mapping[str, Any]) -> DispatchReport:
    return _notify(EventKind.CONTACT_CREATED, ctx, payload)


def notify_contact_message(ctx: DispatchContext, payload: Mapping[str, Any]) -> DispatchReport:
    return _notify(EventKind.CONTACT_MESSAGE, ctx, payload)


def notify_ticket_assigned(ctx: DispatchContext, payload: Mapping[str, Any]) -> DispatchReport:
    return _notify(EventKind.TICKET_ASSIGNED, ctx, payload)


def notify_ticket_comment(ctx: DispatchContext, payload: Mapping[str, Any]) -> DispatchReport:
    return _notify(EventKind.TICKET_COMMENT, ctx, payload)


def notify_ticket_updated(ctx: DispatchContext, payload: Mapping[str, Any]) -> DispatchReport:
    return _notify(EventKind.TICKET_UPDATED, ctx, payload)


def notify_ticket_created(ctx: DispatchContext, payload: Mapping[str, Any]) -> DispatchReport:
    return _notify(EventKind.TICKET_CREATED, ctx, payload)


def notify_ticket_resolved(ctx: DispatchContext, payload: Mapping[str, Any]) -> DispatchReport:
    return _notify(EventKind.TICKET_RESOLVED, ctx, payload)


def notify_user_created(ctx: DispatchContext, payload: Mapping[str, Any]) -> DispatchReport:
    return _notify(EventKind.USER_CREATED, ctx, payload)


__all__ = [
    "COORDINATORS",
    "dispatch_event",
    "notify_contact_created",
    "notify_contact_message",
    "notify_ticket_assigned",
    "notify_ticket_comment",
    "notify_ticket_created",
    "notify_ticket_resolved",
    "notify_ticket_updated",
    "notify_user_created",
]
