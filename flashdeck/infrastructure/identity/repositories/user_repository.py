"""Repository for User domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.entities.user import User
from flashdeck.domain.identity.exceptions import EmailAlreadyExistsError, UserNotFoundError
from flashdeck.infrastructure.identity.mappers.user_mapper import UserMapper
from flashdeck.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.id == user_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_email(self, email: str) -> User | None:
        """
        Find a user by email.

        Args:
            email: The normalized email address

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.email == email)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def email_exists(self, email: str) -> bool:
        """Check if an email is already registered."""
        stmt = select(UserORM.id).where(UserORM.email == email)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def save(self, user: User) -> User:
        """
        Save a user entity. The caller's unit of work commits.

        Returns:
            Saved user entity with database-generated values

        Raises:
            EmailAlreadyExistsError: If email is already registered (for new users)
            UserNotFoundError: If an existing user to update is gone
        """
        if not user.id.is_persisted():
            orm_model = self.mapper.to_orm(user)
            self.db.add(orm_model)
            try:
                self.db.flush()
            except IntegrityError as e:
                if "email" in str(e.orig).lower():
                    raise EmailAlreadyExistsError(user.email) from e
                raise
            logger.info(f"Created user {orm_model.id}")
            return self.mapper.to_domain(orm_model)

        existing = self.db.get(UserORM, user.id.value)
        if not existing:
            raise UserNotFoundError(user.id.value)
        orm_model = self.mapper.apply_changes(user, existing)
        self.db.flush()
        logger.info(f"Updated user {user.id.value}")
        return self.mapper.to_domain(orm_model)
