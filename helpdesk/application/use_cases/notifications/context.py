"""Read-only collaborators passed into every dispatch."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from helpdesk.config import Settings, get_settings

from .delivery import DeliverySelector
from .ports import (
    MailQueue,
    MailTransport,
    PageReader,
    SettingsReader,
    TemplateReader,
    TicketReader,
    UserReader,
)
from .recipients import RecipientResolver


@dataclass(frozen=True)
class DispatchContext:
    """Everything a coordinator may read, bundled so nothing is global."""

    settings: SettingsReader
    users: UserReader
    tickets: TicketReader
    templates: TemplateReader
    pages: PageReader
    delivery: DeliverySelector
    app_url: str = ""
    app_name: str = "Helpdesk Support"
    mail_from_name: str = "Support"

    @property
    def resolver(self) -> RecipientResolver:
        return RecipientResolver(self.users, self.settings, app_name=self.app_name)

    def url(self, path: str) -> str:
        """Return an absolute link to ``path`` inside the application."""

        return f"{self.app_url.rstrip('/')}/{path.lstrip('/')}"


def build_dispatch_context(
    session: Session,
    settings: Settings | None = None,
    *,
    transport: MailTransport | None = None,
    queue: MailQueue | None = None,
) -> DispatchContext:
    """Wire the SQLAlchemy repositories, SendGrid and Celery together."""

    from helpdesk.infrastructure.email import SendGridTransport
    from helpdesk.infrastructure.repositories import (
        EmailTemplateRepository,
        FrontPageRepository,
        SettingRepository,
        TicketRepository,
        UserRepository,
    )

    settings = settings or get_settings()
    if transport is None:
        transport = SendGridTransport.from_settings(settings)
    if queue is None:
        from helpdesk.infrastructure.queue import CeleryMailQueue

        queue = CeleryMailQueue()

    return DispatchContext(
        settings=SettingRepository(session),
        users=UserRepository(session),
        tickets=TicketRepository(session),
        templates=EmailTemplateRepository(session),
        pages=FrontPageRepository(session),
        delivery=DeliverySelector(transport, queue, queue_enabled=settings.queue_enable),
        app_url=settings.base_url,
        app_name=settings.app_name,
        mail_from_name=settings.mail_from_name,
    )


__all__ = ["DispatchContext", "build_dispatch_context"]
