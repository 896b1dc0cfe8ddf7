"""Mapper for User ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.entities.user import User
from flashdeck.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        return User.create_with_id(
            id=UserId(orm_model.id),
            email=orm_model.email,
            hashed_password=orm_model.hashed_password,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: User) -> UserORM:
        """Build the row for a newly registered user; the database assigns the id."""
        return UserORM(email=domain_entity.email, hashed_password=domain_entity.hashed_password)

    def apply_changes(self, domain_entity: User, orm_model: UserORM) -> UserORM:
        """Copy mutable state onto a stored row. Emails are fixed at registration."""
        orm_model.hashed_password = domain_entity.hashed_password
        return orm_model
