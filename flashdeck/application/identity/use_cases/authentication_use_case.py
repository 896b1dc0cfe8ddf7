"""Use case for authentication operations."""

import structlog

from flashdeck.application.common.unit_of_work import UnitOfWork
from flashdeck.application.identity.protocols.password_service import PasswordServiceProtocol
from flashdeck.application.identity.protocols.token_service import TokenServiceProtocol
from flashdeck.application.identity.protocols.user_repository import UserRepositoryProtocol
from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.entities.user import User, normalize_email
from flashdeck.domain.identity.exceptions import InvalidCredentialsError, UserNotFoundError
from flashdeck.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class AuthenticationUseCase:
    """Use case for authentication operations."""

    def __init__(
        self,
        uow: UnitOfWork,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.uow = uow
        self.user_repository = user_repository
        self.password_service = password_service
        self.token_service = token_service

    def authenticate_user(self, email: str, password: str) -> tuple[User, str]:
        """
        Authenticate a user with email and password.

        Args:
            email: User's email address
            password: User's plain text password

        Returns:
            Tuple of (authenticated user, access token)

        Raises:
            ValidationError: If email or password is empty
            InvalidCredentialsError: If credentials are invalid
        """
        if not email or not email.strip() or not password:
            raise ValidationError("Email and password are required")

        with self.uow:
            user = self.user_repository.find_by_email(normalize_email(email))

        # Verify against a dummy hash when the user is unknown so both failures take as long
        if not user:
            self.password_service.verify_password(password, self.password_service.get_dummy_hash())
            raise InvalidCredentialsError

        if not user.hashed_password or not self.password_service.verify_password(
            password, user.hashed_password
        ):
            raise InvalidCredentialsError

        token = self.token_service.create_access_token(user.id.value, user.email)

        logger.info("user_authenticated", user_id=user.id.value)

        return user, token

    def get_user_by_id(self, user_id: int) -> User:
        """
        Get a user by ID (used by the current-user dependency).

        Raises:
            UserNotFoundError: If user is not found
        """
        with self.uow:
            user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)
        return user

    def authenticate_token(self, token: str) -> User:
        """
        Resolve a bearer token to its user.

        Raises:
            InvalidCredentialsError: If the token is invalid, expired or its user is gone
        """
        user_id = self.token_service.verify_access_token(token)
        if user_id is None:
            raise InvalidCredentialsError
        try:
            return self.get_user_by_id(user_id)
        except UserNotFoundError:
            raise InvalidCredentialsError from None
