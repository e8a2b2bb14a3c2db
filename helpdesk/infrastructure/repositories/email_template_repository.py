"""Persistence helpers for email templates."""

from __future__ import annotations

from sqlalchemy.orm import Session

from helpdesk.domain.entities import EmailTemplate
from helpdesk.infrastructure.models import EmailTemplateModel


class EmailTemplateRepository:
    """Look up notification templates by slug."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_slug(self, slug: str) -> EmailTemplate | None:
        model = self.session.query(EmailTemplateModel).filter_by(slug=slug).first()
        return self._to_entity(model) if model else None

    def upsert(self, template: EmailTemplate) -> EmailTemplate:
        """Create the template or overwrite the one stored under the same slug."""

        model = self.session.query(EmailTemplateModel).filter_by(slug=template.slug).first()
        if model is None:
            model = EmailTemplateModel(slug=template.slug)
        model.name = template.name
        model.subject = template.subject
        model.html = template.body
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: EmailTemplateModel) -> EmailTemplate:
        return EmailTemplate(
            id=model.id,
            slug=model.slug,
            body=model.html or "",
            subject=model.subject,
            name=model.name,
        )


__all__ = ["EmailTemplateRepository"]
