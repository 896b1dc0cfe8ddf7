"""Use case for password resets."""

import structlog

from flashdeck.application.common.unit_of_work import UnitOfWork
from flashdeck.application.identity.protocols.password_service import PasswordServiceProtocol
from flashdeck.application.identity.protocols.token_service import TokenServiceProtocol
from flashdeck.application.identity.protocols.user_repository import UserRepositoryProtocol
from flashdeck.domain.identity.entities.user import User, normalize_email
from flashdeck.domain.identity.exceptions import InvalidResetTokenError, UserNotFoundError
from flashdeck.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class PasswordResetUseCase:
    """
    Use case for resetting a forgotten password.

    A reset token is bound to the password hash it was issued against, so it
    stops verifying as soon as the password changes. When
    ``require_reset_token`` is False the email alone is enough.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
        require_reset_token: bool = True,
        min_password_length: int = 6,
    ) -> None:
        """Initialize use case with dependencies."""
        self.uow = uow
        self.user_repository = user_repository
        self.password_service = password_service
        self.token_service = token_service
        self.require_reset_token = require_reset_token
        self.min_password_length = min_password_length

    def _get_user(self, email: str) -> User:
        if not email or not email.strip():
            raise ValidationError("Email is required")
        user = self.user_repository.find_by_email(normalize_email(email))
        if not user:
            raise UserNotFoundError(normalize_email(email))
        return user

    def request_reset(self, email: str) -> str:
        """
        Issue a short-lived reset token for the account.

        Raises:
            ValidationError: If email is empty
            UserNotFoundError: If no account uses this email
        """
        with self.uow:
            user = self._get_user(email)

        token = self.token_service.create_password_reset_token(
            user.id.value, user.hashed_password or ""
        )
        logger.info("password_reset_requested", user_id=user.id.value)
        return token

    def reset_password(
        self, email: str, new_password: str, reset_token: str | None = None
    ) -> None:
        """
        Overwrite the stored password hash.

        Raises:
            ValidationError: If the new password is missing or too short
            UserNotFoundError: If no account uses this email
            InvalidResetTokenError: If a token is required and missing, expired or used
        """
        if not new_password or len(new_password) < self.min_password_length:
            raise ValidationError(
                f"Password must be at least {self.min_password_length} characters",
                details={"field": "newPassword"},
            )

        with self.uow:
            user = self._get_user(email)

            if self.require_reset_token and (
                not reset_token
                or not self.token_service.verify_password_reset_token(
                    reset_token, user.id.value, user.hashed_password or ""
                )
            ):
                raise InvalidResetTokenError

            user.update_password(self.password_service.hash_password(new_password))
            self.user_repository.save(user)
            self.uow.commit()

        logger.info("password_reset", user_id=user.id.value)
