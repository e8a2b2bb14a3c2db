"""SQLAlchemy models for the lookup tables referenced by tickets."""

from sqlalchemy import Column, Integer, String

from helpdesk.infrastructure.database import Base


class _NamedLookup:
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(80), nullable=False)


class TicketTypeModel(_NamedLookup, Base):
    __tablename__ = "ticket_type"


class PriorityModel(_NamedLookup, Base):
    __tablename__ = "priority"


class StatusModel(_NamedLookup, Base):
    __tablename__ = "status"


class DepartmentModel(_NamedLookup, Base):
    __tablename__ = "department"


class CategoryModel(_NamedLookup, Base):
    __tablename__ = "category"


__all__ = [
    "CategoryModel",
    "DepartmentModel",
    "PriorityModel",
    "StatusModel",
    "TicketTypeModel",
]
