"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session, joinedload

from helpdesk.domain.entities import Role, User
from helpdesk.infrastructure.models import RoleModel, UserModel


class UserRepository:
    """Provide read operations for users and contacts."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .filter(UserModel.id == user_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def get_first(self) -> User | None:
        """Return the user with the lowest identifier."""

        model = (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .order_by(UserModel.id.asc())
            .first()
        )
        return self._to_entity(model) if model else None

    def list_by_role_alias(self, alias: str) -> Sequence[User]:
        query = (
            self.session.query(UserModel)
            .join(RoleModel, UserModel.role_id == RoleModel.id)
            .options(joinedload(UserModel.role))
            .filter(RoleModel.alias.ilike(alias))
            .order_by(UserModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, user: User) -> User:
        model = UserModel(
            role_id=user.role.id if user.role else None,
            name=user.name,
            first_name=user.first_name,
            email=user.email,
            is_active=user.is_active,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            role=UserRepository._role_to_entity(model.role),
            name=model.name or "",
            first_name=model.first_name,
            email=model.email,
            created_at=model.created_at,
            is_active=model.is_active,
        )

    @staticmethod
    def _role_to_entity(model_role: RoleModel | None) -> Role | None:
        if model_role is None:
            return None
        return Role(id=model_role.id, name=model_role.name, alias=model_role.alias)


__all__ = ["UserRepository"]
