"""Identity domain exceptions."""

from flashdeck.domain.common.exceptions import DomainError, EntityNotFoundError


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, user_ref: int | str) -> None:
        super().__init__("User", user_ref)


class EmailAlreadyExistsError(DomainError):
    """Raised when attempting to register with an email that already exists."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email {email} is already registered", {"email": email})
        self.email = email


class InvalidCredentialsError(DomainError):
    """Raised when authentication fails due to invalid credentials."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class InvalidResetTokenError(DomainError):
    """Raised when a password reset token is missing, expired or already used."""

    def __init__(self) -> None:
        super().__init__("Invalid or expired password reset token")
