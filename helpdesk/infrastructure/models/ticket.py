"""SQLAlchemy model for support tickets."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from helpdesk.infrastructure.database import Base


class TicketModel(Base):
    """Database representation of a support ticket."""

    __tablename__ = "ticket"

    id = Column(Integer, primary_key=True, index=True)
    uid = Column(String(40), nullable=True, index=True)
    subject = Column(String(255), nullable=True)
    details = Column(Text, nullable=True)
    source = Column(String(40), nullable=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=True, index=True)
    assigned_to = Column(Integer, ForeignKey("user.id"), nullable=True, index=True)
    contact_id = Column(Integer, ForeignKey("user.id"), nullable=True, index=True)
    type_id = Column(Integer, ForeignKey("ticket_type.id"), nullable=True)
    priority_id = Column(Integer, ForeignKey("priority.id"), nullable=True)
    status_id = Column(Integer, ForeignKey("status.id"), nullable=True)
    department_id = Column(Integer, ForeignKey("department.id"), nullable=True)
    category_id = Column(Integer, ForeignKey("category.id"), nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    user = relationship("UserModel", foreign_keys=[user_id])
    assignee = relationship("UserModel", foreign_keys=[assigned_to])
    contact = relationship("UserModel", foreign_keys=[contact_id])
    ticket_type = relationship("TicketTypeModel")
    priority = relationship("PriorityModel")
    status = relationship("StatusModel")
    department = relationship("DepartmentModel")
    category = relationship("CategoryModel")


__all__ = ["TicketModel"]
