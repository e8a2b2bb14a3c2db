"""SQLAlchemy model for name/value application settings."""

from sqlalchemy import Column, Integer, String, Text

from helpdesk.infrastructure.database import Base


class SettingModel(Base):
    """A single named setting managed from the admin panel."""

    __tablename__ = "settings"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False, unique=True, index=True)
    value = Column(Text, nullable=True)


__all__ = ["SettingModel"]
