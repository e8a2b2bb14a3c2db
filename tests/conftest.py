"""Shared fixtures: in-memory collaborators for the dispatch pipeline."""

from __future__ import annotations

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from dataclasses import dataclass, field

import pytest

from helpdesk.application.use_cases.notifications import DeliverySelector, DispatchContext
from helpdesk.domain.entities import (
    EmailTemplate,
    FrontPage,
    MailJob,
    NamedReference,
    NotificationPreferences,
    Role,
    Ticket,
    User,
)

ADMIN = Role(id=1, name="Administrator", alias="admin")
AGENT = Role(id=2, name="Agent", alias="agent")
CUSTOMER = Role(id=3, name="Customer", alias="customer")


class FakeSettings:
    def __init__(self, values=None, preferences=None):
        self.values = dict(values or {})
        self.preferences = dict(preferences or {})
        self.preference_reads = 0

    def get(self, name, default=None):
        value = self.values.get(name)
        return default if value is None else value

    def get_notification_preferences(self):
        self.preference_reads += 1
        return NotificationPreferences(self.preferences)


class FakeUsers:
    def __init__(self, users=()):
        self.users = {user.id: user for user in users}
        self.calls: list[str] = []

    def get(self, user_id):
        self.calls.append("get")
        return self.users.get(user_id)

    def get_first(self):
        self.calls.append("get_first")
        if not self.users:
            return None
        return self.users[min(self.users)]

    def list_by_role_alias(self, alias):
        self.calls.append("list_by_role_alias")
        return [
            user
            for _, user in sorted(self.users.items())
            if user.role is not None and user.role.alias == alias
        ]


class FakeTickets:
    def __init__(self, tickets=()):
        self.tickets = {ticket.id: ticket for ticket in tickets}
        self.fetched: list[int] = []

    def get_with_relations(self, ticket_id):
        self.fetched.append(ticket_id)
        return self.tickets.get(ticket_id)


class FakeTemplates:
    def __init__(self, templates=()):
        self.templates = {template.slug: template for template in templates}

    def get_by_slug(self, slug):
        return self.templates.get(slug)


class FakePages:
    def __init__(self, pages=()):
        self.pages = {page.slug: page for page in pages}

    def get_by_slug(self, slug):
        return self.pages.get(slug)


class RecordingTransport:
    """Collects sent messages; raises for addresses listed in ``failing``."""

    def __init__(self, failing=()):
        self.failing = set(failing)
        self.sent: list[tuple[str, str, str]] = []

    def send(self, to, subject, html):
        if to in self.failing:
            raise RuntimeError(f"SendGrid API responded with status 500 for {to}")
        self.sent.append((to, subject, html))


class RecordingQueue:
    def __init__(self):
        self.jobs: list[MailJob] = []

    def enqueue(self, job):
        self.jobs.append(job)


@dataclass
class Harness:
    """Fakes plus the context built from them."""

    settings: FakeSettings = field(default_factory=FakeSettings)
    users: FakeUsers = field(default_factory=FakeUsers)
    tickets: FakeTickets = field(default_factory=FakeTickets)
    templates: FakeTemplates = field(default_factory=FakeTemplates)
    pages: FakePages = field(default_factory=FakePages)
    transport: RecordingTransport = field(default_factory=RecordingTransport)
    queue: RecordingQueue = field(default_factory=RecordingQueue)
    queue_enabled: bool = False

    @property
    def ctx(self) -> DispatchContext:
        return DispatchContext(
            settings=self.settings,
            users=self.users,
            tickets=self.tickets,
            templates=self.templates,
            pages=self.pages,
            delivery=DeliverySelector(
                self.transport, self.queue, queue_enabled=self.queue_enabled
            ),
            app_url="https://help.example.com/",
            app_name="Helpdesk Support",
            mail_from_name="Support",
        )


def make_user(user_id, name, email, role=AGENT) -> User:
    return User(id=user_id, role=role, name=name, email=email)


def make_ticket(ticket_id=7, **overrides) -> Ticket:
    values = dict(
        id=ticket_id,
        uid=None,
        subject="Printer on fire",
        ticket_type=NamedReference(1, "Incident"),
        priority=NamedReference(1, "High"),
        status=NamedReference(1, "Open"),
        department=NamedReference(1, "IT"),
        category=NamedReference(1, "Hardware"),
    )
    values.update(overrides)
    return Ticket(**values)


def template(slug, body="<p>{name}</p>", subject=None) -> EmailTemplate:
    return EmailTemplate(id=None, slug=slug, body=body, subject=subject)


def contact_page(**content) -> FrontPage:
    return FrontPage(id=1, slug="contact", title="Contact", content=content)


@pytest.fixture
def harness() -> Harness:
    return Harness()
