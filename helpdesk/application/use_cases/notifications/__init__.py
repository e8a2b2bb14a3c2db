"""Public helpers for emitting notification emails from domain events."""

from .context import DispatchContext, build_dispatch_context
from .delivery import DeliveryMode, DeliverySelector
from .errors import DeliveryError
from .events import (
    COORDINATORS,
    dispatch_event,
    notify_contact_created,
    notify_contact_message,
    notify_ticket_assigned,
    notify_ticket_comment,
    notify_ticket_created,
    notify_ticket_resolved,
    notify_ticket_updated,
    notify_user_created,
)
from .gate import any_enabled, is_enabled
from .pipeline import Coordinator, DispatchReport, SubjectPolicy, run_pipeline
from .recipients import RecipientResolver, RecipientStrategy
from .renderer import find_tokens, render, render_body

__all__ = [
    "COORDINATORS",
    "Coordinator",
    "DeliveryError",
    "DeliveryMode",
    "DeliverySelector",
    "DispatchContext",
    "DispatchReport",
    "RecipientResolver",
    "RecipientStrategy",
    "SubjectPolicy",
    "any_enabled",
    "build_dispatch_context",
    "dispatch_event",
    "find_tokens",
    "is_enabled",
    "notify_contact_created",
    "notify_contact_message",
    "notify_ticket_assigned",
    "notify_ticket_comment",
    "notify_ticket_created",
    "notify_ticket_resolved",
    "notify_ticket_updated",
    "notify_user_created",
    "render",
    "render_body",
    "run_pipeline",
]
