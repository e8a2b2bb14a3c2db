"""Persistence layer for support tickets."""

from __future__ import annotations

from sqlalchemy.orm import Session, joinedload

from helpdesk.domain.entities import NamedReference, Ticket
from helpdesk.infrastructure.models import TicketModel
from helpdesk.infrastructure.repositories.user_repository import UserRepository

_RELATIONS = (
    TicketModel.user,
    TicketModel.assignee,
    TicketModel.contact,
    TicketModel.ticket_type,
    TicketModel.priority,
    TicketModel.status,
    TicketModel.department,
    TicketModel.category,
)


class TicketRepository:
    """Load tickets together with the relations used by notifications."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_with_relations(self, ticket_id: int) -> Ticket | None:
        query = self.session.query(TicketModel).options(
            *(joinedload(relation) for relation in _RELATIONS)
        )
        model = query.filter(TicketModel.id == ticket_id).first()
        return self._to_entity(model) if model else None

    @staticmethod
    def _to_entity(model: TicketModel) -> Ticket:
        return Ticket(
            id=model.id,
            uid=model.uid,
            subject=model.subject,
            user=TicketRepository._user(model.user),
            assigned_to=TicketRepository._user(model.assignee),
            contact=TicketRepository._user(model.contact),
            ticket_type=TicketRepository._reference(model.ticket_type),
            priority=TicketRepository._reference(model.priority),
            status=TicketRepository._reference(model.status),
            department=TicketRepository._reference(model.department),
            category=TicketRepository._reference(model.category),
        )

    @staticmethod
    def _user(model):
        return UserRepository._to_entity(model) if model is not None else None

    @staticmethod
    def _reference(model) -> NamedReference | None:
        if model is None:
            return None
        return NamedReference(id=model.id, name=model.name)


__all__ = ["TicketRepository"]
