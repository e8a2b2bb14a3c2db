"""SQLAlchemy model for stored email templates."""

from sqlalchemy import Column, Integer, String, Text

from helpdesk.infrastructure.database import Base


class EmailTemplateModel(Base):
    """Database representation of an editable notification template."""

    __tablename__ = "email_template"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=True)
    slug = Column(String(80), nullable=False, unique=True, index=True)
    subject = Column(String(255), nullable=True)
    html = Column(Text, nullable=False, default="")


__all__ = ["EmailTemplateModel"]
