"""Generic dispatch pipeline shared by every notification type.

Each event kind only describes *what* differs (gate keys, entity fetch,
recipient strategy, template slug, variables and subject) through a
:class:`Coordinator`; :func:`run_pipeline` owns the control flow:

1. gate check against the notification preferences,
2. primary entity fetch,
3. recipient resolution,
4. template lookup,
5. render and deliver, one recipient at a time.

Steps 1-4 end the dispatch with a log entry when they come up empty. In step
5 a failure for one recipient is logged and the loop moves on. Nothing is
raised to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from helpdesk.domain.entities import DomainEvent, EmailTemplate, EventKind, Recipient

from .context import DispatchContext
from .errors import DeliveryError
from .gate import any_enabled
from .recipients import RecipientStrategy
from .renderer import render, render_body

logger = logging.getLogger(__name__)

VariableBuilder = Callable[[DispatchContext, DomainEvent, Any, Recipient], dict[str, str]]
SubjectBuilder = Callable[[DispatchContext, DomainEvent, Any, Recipient], str]


class SubjectPolicy(str, Enum):
    """Where a coordinator takes the subject line from."""

    CONSTRUCTED = "constructed"
    TEMPLATE = "template"


def _no_gate(event: DomainEvent) -> tuple[str, ...]:
    return ()


def _default_entity_id(entity: Any) -> Any:
    return getattr(entity, "id", None)


@dataclass(frozen=True)
class Coordinator:
    """Parameters turning the generic pipeline into one event coordinator."""

    name: str
    kind: EventKind
    template_slug: str
    fetch: Callable[[DispatchContext, DomainEvent], Any]
    strategy: Callable[[DomainEvent], RecipientStrategy]
    build_variables: VariableBuilder
    build_subject: SubjectBuilder
    gate_keys: Callable[[DomainEvent], tuple[str, ...]] = _no_gate
    subject_policy: SubjectPolicy = SubjectPolicy.CONSTRUCTED
    entity_label: str = "ticket_id"
    entity_id: Callable[[Any], Any] = _default_entity_id


@dataclass
class DispatchReport:
    """Outcome of one dispatch, returned for callers that want to inspect it."""

    notification: str
    sent: list[Recipient] = field(default_factory=list)
    failed: list[Recipient] = field(default_factory=list)
    skipped_reason: str | None = None

    @property
    def attempted(self) -> int:
        return len(self.sent) + len(self.failed)


def run_pipeline(ctx: DispatchContext, coordinator: Coordinator, event: DomainEvent) -> DispatchReport:
    """Run ``coordinator`` for ``event``; always returns normally."""

    report = DispatchReport(notification=coordinator.name)
    try:
        _run(ctx, coordinator, event, report)
    except Exception:
        logger.exception(
            "%s: dispatch aborted by an unexpected error",
            coordinator.name,
            extra={"context": {"payload": _loggable_payload(event)}},
        )
        report.skipped_reason = "error"
    return report


def _run(
    ctx: DispatchContext, coordinator: Coordinator, event: DomainEvent, report: DispatchReport
) -> None:
    gate_keys = coordinator.gate_keys(event)
    if gate_keys:
        preferences = ctx.settings.get_notification_preferences()
        if not any_enabled(preferences, gate_keys):
            logger.info(
                "%s: %s notification is disabled",
                coordinator.name,
                " / ".join(gate_keys),
                extra={"context": {"keys": list(gate_keys)}},
            )
            report.skipped_reason = "disabled"
            return

    entity = coordinator.fetch(ctx, event)
    if entity is None:
        logger.warning(
            "%s: %s not found",
            coordinator.name,
            _entity_noun(coordinator),
            extra={"context": {"payload": _loggable_payload(event)}},
        )
        report.skipped_reason = "entity_missing"
        return

    entity_id = coordinator.entity_id(entity)
    recipients = ctx.resolver.resolve(coordinator.strategy(event), event, entity)
    if not recipients:
        logger.warning(
            "%s: no recipient with an email address found",
            coordinator.name,
            extra={"context": {coordinator.entity_label: entity_id}},
        )
        report.skipped_reason = "no_recipients"
        return

    template = ctx.templates.get_by_slug(coordinator.template_slug)
    if template is None:
        logger.warning(
            "%s: email template '%s' not found",
            coordinator.name,
            coordinator.template_slug,
            extra={"context": {"slug": coordinator.template_slug}},
        )
        report.skipped_reason = "template_missing"
        return

    for recipient in recipients:
        _deliver_to(ctx, coordinator, event, entity, template, recipient, report)


def _deliver_to(
    ctx: DispatchContext,
    coordinator: Coordinator,
    event: DomainEvent,
    entity: Any,
    template: EmailTemplate,
    recipient: Recipient,
    report: DispatchReport,
) -> None:
    context = {
        coordinator.entity_label: coordinator.entity_id(entity),
        "recipient": recipient.email,
        "recipient_id": recipient.id,
    }
    try:
        variables = coordinator.build_variables(ctx, event, entity, recipient)
        subject = _subject_for(ctx, coordinator, event, entity, template, recipient, variables)
        message = render(template, variables, subject=subject)
        mode = ctx.delivery.deliver(message, recipient)
    except DeliveryError as exc:
        logger.error(
            "%s: failed to send email to %s: %s",
            coordinator.name,
            recipient.email,
            exc,
            extra={"context": {**context, "error": str(exc), "mode": exc.mode}},
        )
        report.failed.append(recipient)
        return
    except Exception as exc:
        logger.error(
            "%s: could not prepare email for %s: %s",
            coordinator.name,
            recipient.email,
            exc,
            exc_info=True,
            extra={"context": {**context, "error": str(exc)}},
        )
        report.failed.append(recipient)
        return

    logger.info(
        "%s: email sent to %s",
        coordinator.name,
        recipient.email,
        extra={"context": {**context, "mode": mode.value}},
    )
    report.sent.append(recipient)


def _subject_for(
    ctx: DispatchContext,
    coordinator: Coordinator,
    event: DomainEvent,
    entity: Any,
    template: EmailTemplate,
    recipient: Recipient,
    variables: dict[str, str],
) -> str:
    if coordinator.subject_policy is SubjectPolicy.TEMPLATE and template.subject:
        return render_body(template.subject, variables)
    return coordinator.build_subject(ctx, event, entity, recipient)


_SECRET_KEYS = frozenset({"password"})


def _loggable_payload(event: DomainEvent) -> dict[str, Any]:
    return {key: value for key, value in event.payload.items() if key not in _SECRET_KEYS}


def _entity_noun(coordinator: Coordinator) -> str:
    return coordinator.entity_label.removesuffix("_id").replace("_", " ").capitalize()


__all__ = [
    "Coordinator",
    "DispatchReport",
    "SubjectPolicy",
    "run_pipeline",
]
