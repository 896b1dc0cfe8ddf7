"""User entity for identity management."""

from dataclasses import dataclass
from datetime import datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects.ids import UserId

# Domain constraints
MAX_EMAIL_LENGTH = 100


def normalize_email(email: str) -> str:
    """Canonical form used for storage and lookup."""
    return email.strip().lower()


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    User entity representing a registered account.

    Business Rules:
    - Email must be unique (enforced at repository level)
    - Email must be non-empty and at most MAX_EMAIL_LENGTH characters
    - Password hashing is an infrastructure concern (never stored as plain text)
    """

    id: UserId
    email: str
    hashed_password: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.email:
            raise ValidationError("Email cannot be empty", field="email")
        if len(self.email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email cannot exceed {MAX_EMAIL_LENGTH} characters", field="email"
            )

    def update_password(self, new_hashed_password: str) -> None:
        """
        Update the user's password.

        Args:
            new_hashed_password: The new hashed password (hashing done by infrastructure)
        """
        self.hashed_password = new_hashed_password

    @classmethod
    def create(cls, email: str, hashed_password: str | None = None) -> "User":
        """
        Create a new user.

        Raises:
            ValidationError: If email is invalid
        """
        return cls(
            id=UserId.generate(),
            email=normalize_email(email),
            hashed_password=hashed_password,
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        email: str,
        hashed_password: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            email=email,
            hashed_password=hashed_password,
            created_at=created_at,
            updated_at=updated_at,
        )
