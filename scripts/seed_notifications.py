"""Utility script to seed the email templates and notification toggles."""

from __future__ import annotations

import argparse
import json

from sqlalchemy.exc import SQLAlchemyError

from helpdesk.domain.entities import NOTIFICATION_KEYS, EmailTemplate, Role, User
from helpdesk.infrastructure.database import SessionLocal, initialize_database
from helpdesk.infrastructure.repositories import (
    EMAIL_NOTIFICATIONS_SETTING,
    EmailTemplateRepository,
    RoleRepository,
    SettingRepository,
    UserRepository,
)

DEFAULT_TEMPLATES: tuple[EmailTemplate, ...] = (
    EmailTemplate(
        id=None,
        slug="created_new_contact",
        name="New contact",
        subject="Welcome {name}",
        body="<p>Hello {name},</p><p>Your account ({email}) is ready. Password: {password}</p>"
        '<p><a href="{url}">Sign in</a></p><p>{sender_name}</p>',
    ),
    EmailTemplate(
        id=None,
        slug="user_created",
        name="New user",
        subject="Welcome {name}",
        body="<p>Hello {name},</p><p>An account was created for {email}. Password: {password}</p>"
        '<p><a href="{url}">Sign in</a></p><p>{sender_name}</p>',
    ),
    EmailTemplate(
        id=None,
        slug="assigned_ticket",
        name="Ticket assigned",
        body="<p>{name}, ticket #{uid} ({subject}) was assigned to you.</p>"
        '<p><a href="{url}">Open ticket</a></p><p>{sender_name}</p>',
    ),
    EmailTemplate(
        id=None,
        slug="ticket_new_comment",
        name="New ticket comment",
        body="<p>Hello {name},</p><p>{commenter_name} wrote on ticket #{uid}:</p>"
        '<blockquote>{comment}</blockquote><p><a href="{url}">Reply</a></p>',
    ),
    EmailTemplate(
        id=None,
        slug="ticket_updated",
        name="Ticket updated",
        body="<p>{update_message}</p><p>Status: {status}<br>Priority: {priority}</p>"
        '<p><a href="{url}">Open ticket</a></p>',
    ),
    EmailTemplate(
        id=None,
        slug="create_ticket_dashboard",
        name="Ticket created",
        body="<p>Ticket #{uid} ({subject}) was opened for {name} ({email}).</p>"
        '<p><a href="{url}">Open ticket</a></p>',
    ),
    EmailTemplate(
        id=None,
        slug="ticket_resolved",
        name="Ticket resolved",
        body="<p>Hello {name},</p><p>Ticket #{uid} has been resolved. {resolution_details}</p>"
        "<p>It will close automatically in {autoclose_value} {autoclose_unit}.</p>"
        '<p><a href="{url}">View ticket</a></p>',
    ),
    EmailTemplate(
        id=None,
        slug="custom_mail",
        name="Contact form",
        subject="{subject}",
        body="<p>Hello {name},</p><p>{body}</p><p>{sender_name}</p>",
    ),
)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the seed run."""

    parser = argparse.ArgumentParser(
        description="Seed notification templates for the helpdesk application.",
    )
    parser.add_argument(
        "--enable-all",
        action="store_true",
        help="Turn every email notification on (default: leave them all off)",
    )
    parser.add_argument(
        "--admin-email",
        default=None,
        help="Create an admin user with this address to receive fallback notifications",
    )
    parser.add_argument(
        "--admin-name",
        default="Administrator",
        help="Name of the admin user created with --admin-email",
    )
    return parser.parse_args()


def main() -> None:
    """Upsert the default templates and notification toggles."""

    args = parse_args()
    initialize_database()

    session = SessionLocal()
    try:
        templates = EmailTemplateRepository(session)
        for template in DEFAULT_TEMPLATES:
            templates.upsert(template)

        toggles = {key: bool(args.enable_all) for key in NOTIFICATION_KEYS}
        SettingRepository(session).set(EMAIL_NOTIFICATIONS_SETTING, json.dumps(toggles))

        if args.admin_email:
            role: Role = RoleRepository(session).get_or_create(name="Administrator", alias="admin")
            UserRepository(session).create(
                User(id=None, role=role, name=args.admin_name, email=args.admin_email)
            )
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not seed the database: {exc}") from exc
    else:
        print(f"Seeded {len(DEFAULT_TEMPLATES)} email templates")
    finally:
        session.close()


if __name__ == "__main__":
    main()
