"""Coordinators for account creation and the public contact form."""

from __future__ import annotations

from html import escape

from helpdesk.domain.entities import DomainEvent, EventKind, Recipient, User

from .context import DispatchContext
from .pipeline import Coordinator, SubjectPolicy
from .recipients import APP_NAME_SETTING, ContactSubmission, RecipientStrategy, coerce_id

CONTACT_PAGE_SLUG = "contact"
CONTACT_MESSAGE_SUBJECT = "A new message from the Contact Page"


def fetch_user(ctx: DispatchContext, event: DomainEvent) -> User | None:
    user_id = coerce_id(event.get("id"))
    if user_id is None:
        return None
    return ctx.users.get(user_id)


def app_name(ctx: DispatchContext) -> str:
    return ctx.settings.get(APP_NAME_SETTING) or ctx.app_name


def _account_variables(ctx, event, user: User, recipient: Recipient) -> dict[str, str]:
    return {
        "name": user.display_name,
        "email": recipient.email,
        "password": str(event.get("password", "")),
        "url": ctx.url("/login"),
        "sender_name": ctx.mail_from_name,
    }


def _account_subject(ctx, event, user, recipient) -> str:
    return f"{app_name(ctx)} - Your account has been created"


CONTACT_CREATED = Coordinator(
    name="ContactCreatedNotification",
    kind=EventKind.CONTACT_CREATED,
    template_slug="created_new_contact",
    fetch=fetch_user,
    strategy=lambda event: RecipientStrategy.SINGLE_FROM_ID,
    build_variables=_account_variables,
    build_subject=_account_subject,
    subject_policy=SubjectPolicy.TEMPLATE,
    entity_label="user_id",
)

USER_CREATED = Coordinator(
    name="UserCreatedNotification",
    kind=EventKind.USER_CREATED,
    template_slug="user_created",
    gate_keys=lambda event: ("new_user",),
    fetch=fetch_user,
    strategy=lambda event: RecipientStrategy.SINGLE_FROM_ID,
    build_variables=_account_variables,
    build_subject=_account_subject,
    subject_policy=SubjectPolicy.TEMPLATE,
    entity_label="user_id",
)


def fetch_submission(ctx: DispatchContext, event: DomainEvent) -> ContactSubmission:
    return ContactSubmission(
        email=str(event.get("email", "")),
        name=str(event.get("name", "")),
        phone=str(event.get("phone", "")),
        message=str(event.get("message", "")),
        page=ctx.pages.get_by_slug(CONTACT_PAGE_SLUG),
    )


def contact_message_body(submission: ContactSubmission) -> str:
    """HTML fragment quoting the visitor's message."""

    return (
        f"Send From: {escape(submission.email)}"
        f"<br><br>Phone: {escape(submission.phone)}"
        f"<br><br>Message: {escape(submission.message)}"
    )


def _contact_message_variables(
    ctx, event, submission: ContactSubmission, recipient: Recipient
) -> dict[str, str]:
    return {
        "name": recipient.display_name,
        "to": recipient.email,
        "subject": CONTACT_MESSAGE_SUBJECT,
        "sender_name": submission.name,
        "body": contact_message_body(submission),
    }


def _contact_message_subject(ctx, event, submission, recipient) -> str:
    return CONTACT_MESSAGE_SUBJECT


def _submission_sender(submission: ContactSubmission) -> str:
    return submission.email


CONTACT_MESSAGE = Coordinator(
    name="ContactMessageNotification",
    kind=EventKind.CONTACT_MESSAGE,
    template_slug="custom_mail",
    fetch=fetch_submission,
    strategy=lambda event: RecipientStrategy.PAGE_OR_ROLE,
    build_variables=_contact_message_variables,
    build_subject=_contact_message_subject,
    subject_policy=SubjectPolicy.TEMPLATE,
    entity_label="sender_email",
    entity_id=_submission_sender,
)


__all__ = [
    "CONTACT_CREATED",
    "CONTACT_MESSAGE",
    "CONTACT_PAGE_SLUG",
    "USER_CREATED",
    "app_name",
    "contact_message_body",
    "fetch_submission",
    "fetch_user",
]
