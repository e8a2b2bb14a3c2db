"""SQLAlchemy model for the user table."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from helpdesk.infrastructure.database import Base


class UserModel(Base):
    """Database representation of staff users and customer contacts."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    role_id = Column(Integer, ForeignKey("role.id"), nullable=True, index=True)
    name = Column(String(120), nullable=False, default="")
    first_name = Column(String(60), nullable=True)
    email = Column(String(120), nullable=True, index=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    is_active = Column(Boolean, nullable=False, default=True)

    role = relationship("RoleModel", lazy="joined")


__all__ = ["UserModel"]
