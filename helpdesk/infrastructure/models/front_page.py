"""SQLAlchemy model for editable public pages."""

from sqlalchemy import Boolean, Column, Integer, JSON, String

from helpdesk.infrastructure.database import Base


class FrontPageModel(Base):
    """Database representation of a public page and its JSON configuration."""

    __tablename__ = "front_page"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(120), nullable=False, default="")
    slug = Column(String(80), nullable=False, unique=True, index=True)
    is_active = Column(Boolean, nullable=False, default=True)
    html = Column(JSON, nullable=True, default=dict)


__all__ = ["FrontPageModel"]
