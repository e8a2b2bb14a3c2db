"""Persistence helpers for public pages."""

from __future__ import annotations

from sqlalchemy.orm import Session

from helpdesk.domain.entities import FrontPage
from helpdesk.infrastructure.models import FrontPageModel


class FrontPageRepository:
    """Look up public pages by slug."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_slug(self, slug: str) -> FrontPage | None:
        model = self.session.query(FrontPageModel).filter_by(slug=slug).first()
        return self._to_entity(model) if model else None

    @staticmethod
    def _to_entity(model: FrontPageModel) -> FrontPage:
        content = model.html if isinstance(model.html, dict) else {}
        return FrontPage(
            id=model.id,
            slug=model.slug,
            title=model.title,
            is_active=model.is_active,
            content=content,
        )


__all__ = ["FrontPageRepository"]
