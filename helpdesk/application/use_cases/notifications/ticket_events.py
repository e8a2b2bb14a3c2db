"""Coordinators for the ticket lifecycle notifications."""

from __future__ import annotations

from collections.abc import Mapping

from helpdesk.domain.entities import DomainEvent, EventKind, Recipient, Ticket

from .context import DispatchContext
from .pipeline import Coordinator
from .recipients import RecipientStrategy, comment_author, coerce_id

CUSTOMER_SOURCES = frozenset({"public_form", "contact"})
AUTOCLOSE_VALUE_SETTING = "autoclose_value"
AUTOCLOSE_UNIT_SETTING = "autoclose_unit"


def fetch_ticket(ctx: DispatchContext, event: DomainEvent) -> Ticket | None:
    ticket_id = coerce_id(event.get("ticket_id"))
    if ticket_id is None:
        return None
    return ctx.tickets.get_with_relations(ticket_id)


def _name(reference) -> str:
    return reference.name if reference is not None else ""


def ticket_variables(
    ctx: DispatchContext,
    ticket: Ticket,
    recipient: Recipient,
    *,
    url_path: str | None = None,
) -> dict[str, str]:
    """Variables every ticket template can rely on."""

    uid = ticket.display_uid
    return {
        "name": recipient.display_name,
        "email": recipient.email,
        "url": ctx.url(url_path or f"/dashboard/tickets/{uid}"),
        "sender_name": ctx.mail_from_name,
        "ticket_id": str(ticket.id),
        "uid": uid,
        "subject": ticket.subject or "",
        "type": _name(ticket.ticket_type),
    }


# ticket_assigned

def _assigned_variables(ctx, event, ticket: Ticket, recipient: Recipient) -> dict[str, str]:
    variables = ticket_variables(ctx, ticket, recipient)
    variables["name"] = recipient.display_name or "Dear"
    return variables


def _assigned_subject(ctx, event, ticket: Ticket, recipient) -> str:
    return f"[Ticket#{ticket.display_uid}] - You got assigned"


TICKET_ASSIGNED = Coordinator(
    name="TicketAssignedNotification",
    kind=EventKind.TICKET_ASSIGNED,
    template_slug="assigned_ticket",
    gate_keys=lambda event: ("user_assigned",),
    fetch=fetch_ticket,
    strategy=lambda event: RecipientStrategy.ASSIGNEE,
    build_variables=_assigned_variables,
    build_subject=_assigned_subject,
)


# ticket_comment

def comment_text(event: DomainEvent) -> str:
    comment = event.get("comment", "")
    if isinstance(comment, Mapping):
        return str(comment.get("details") or "")
    return str(comment)


def _comment_variables(ctx, event, ticket: Ticket, recipient: Recipient) -> dict[str, str]:
    uid = ticket.display_uid
    is_contact = ticket.contact is not None and recipient.id == ticket.contact.id
    path = f"/contact/tickets/{uid}" if is_contact else f"/tickets/{uid}"
    _, commenter_name = comment_author(event)

    variables = ticket_variables(ctx, ticket, recipient, url_path=path)
    variables["comment"] = comment_text(event)
    variables["commenter_name"] = commenter_name or "Support Team"
    return variables


def _comment_subject(ctx, event, ticket: Ticket, recipient) -> str:
    return f"Re: [Ticket#{ticket.display_uid}] {ticket.subject or 'Ticket Reply'}"


TICKET_COMMENT = Coordinator(
    name="TicketNewCommentNotification",
    kind=EventKind.TICKET_COMMENT,
    template_slug="ticket_new_comment",
    gate_keys=lambda event: ("comment_reply", "first_comment"),
    fetch=fetch_ticket,
    strategy=lambda event: RecipientStrategy.COMMENT_AUDIENCE,
    build_variables=_comment_variables,
    build_subject=_comment_subject,
)


# ticket_updated

def update_message(event: DomainEvent) -> str:
    return str(event.get("update_message") or "Ticket has been updated")


def _updated_variables(ctx, event, ticket: Ticket, recipient: Recipient) -> dict[str, str]:
    variables = ticket_variables(ctx, ticket, recipient)
    variables.update(
        update_message=update_message(event),
        priority=_name(ticket.priority),
        status=_name(ticket.status),
        department=_name(ticket.department),
        category=_name(ticket.category),
    )
    return variables


def _updated_subject(ctx, event, ticket: Ticket, recipient) -> str:
    return f"[Ticket#{ticket.display_uid}] - {update_message(event)}"


TICKET_UPDATED = Coordinator(
    name="TicketUpdatedNotification",
    kind=EventKind.TICKET_UPDATED,
    template_slug="ticket_updated",
    gate_keys=lambda event: ("status_priority_changes",),
    fetch=fetch_ticket,
    strategy=lambda event: RecipientStrategy.OWNER_PLUS_ASSIGNEE,
    build_variables=_updated_variables,
    build_subject=_updated_subject,
)


# ticket_created

def is_customer_source(event: DomainEvent) -> bool:
    return str(event.get("source", "dashboard")) in CUSTOMER_SOURCES


def _created_gate(event: DomainEvent) -> tuple[str, ...]:
    if is_customer_source(event):
        return ("ticket_by_customer",)
    return ("ticket_from_dashboard",)


def _created_strategy(event: DomainEvent) -> RecipientStrategy:
    if is_customer_source(event):
        return RecipientStrategy.DEFAULT_OR_FIRST
    return RecipientStrategy.OWNER_OR_DEFAULT_OR_FIRST


def _created_variables(ctx, event, ticket: Ticket, recipient: Recipient) -> dict[str, str]:
    variables = ticket_variables(ctx, ticket, recipient)
    contact = ticket.contact if is_customer_source(event) else None
    if contact is not None:
        # Staff receive the notification but the template describes the customer.
        variables["name"] = contact.display_name
        variables["email"] = contact.email or ""
    variables.update(
        password=str(event.get("password", "")),
        contact_name=contact.display_name if contact is not None else "",
        contact_email=(contact.email or "") if contact is not None else "",
    )
    return variables


def _created_subject(ctx, event, ticket: Ticket, recipient) -> str:
    return f"[Ticket#{ticket.display_uid}] - {ticket.subject or ''}"


TICKET_CREATED = Coordinator(
    name="TicketCreatedNotification",
    kind=EventKind.TICKET_CREATED,
    template_slug="create_ticket_dashboard",
    gate_keys=_created_gate,
    fetch=fetch_ticket,
    strategy=_created_strategy,
    build_variables=_created_variables,
    build_subject=_created_subject,
)


# ticket_resolved

def _resolved_variables(ctx, event, ticket: Ticket, recipient: Recipient) -> dict[str, str]:
    uid = ticket.display_uid
    variables = ticket_variables(ctx, ticket, recipient, url_path=f"/contact/tickets/{uid}")
    variables.update(
        autoclose_value=ctx.settings.get(AUTOCLOSE_VALUE_SETTING) or "7",
        autoclose_unit=ctx.settings.get(AUTOCLOSE_UNIT_SETTING) or "days",
        resolution_details=str(event.get("resolution_details", "")),
    )
    return variables


def _resolved_subject(ctx, event, ticket: Ticket, recipient) -> str:
    return f"[Ticket#{ticket.display_uid}] - Your ticket has been resolved"


TICKET_RESOLVED = Coordinator(
    name="TicketResolvedNotification",
    kind=EventKind.TICKET_RESOLVED,
    template_slug="ticket_resolved",
    gate_keys=lambda event: ("ticket_resolved",),
    fetch=fetch_ticket,
    strategy=lambda event: RecipientStrategy.CONTACT,
    build_variables=_resolved_variables,
    build_subject=_resolved_subject,
)


__all__ = [
    "CUSTOMER_SOURCES",
    "TICKET_ASSIGNED",
    "TICKET_COMMENT",
    "TICKET_CREATED",
    "TICKET_RESOLVED",
    "TICKET_UPDATED",
    "comment_text",
    "fetch_ticket",
    "is_customer_source",
    "ticket_variables",
]
