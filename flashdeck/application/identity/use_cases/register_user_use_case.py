"""Use case for user registration."""

import structlog

from flashdeck.application.common.unit_of_work import UnitOfWork
from flashdeck.application.identity.protocols.password_service import PasswordServiceProtocol
from flashdeck.application.identity.protocols.token_service import TokenServiceProtocol
from flashdeck.application.identity.protocols.user_repository import UserRepositoryProtocol
from flashdeck.domain.identity.entities.user import User, normalize_email
from flashdeck.domain.identity.exceptions import EmailAlreadyExistsError
from flashdeck.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class RegisterUserUseCase:
    """Use case for user registration operations."""

    def __init__(
        self,
        uow: UnitOfWork,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
        min_password_length: int = 6,
    ) -> None:
        """Initialize use case with dependencies."""
        self.uow = uow
        self.user_repository = user_repository
        self.password_service = password_service
        self.token_service = token_service
        self.min_password_length = min_password_length

    def register_user(self, email: str, password: str) -> tuple[User, str]:
        """
        Register a new user account.

        Args:
            email: User's email address
            password: User's plain text password (will be hashed)

        Returns:
            Tuple of (created user, access token for immediate login)

        Raises:
            ValidationError: If email or password is missing or the password is too short
            EmailAlreadyExistsError: If email is already registered
        """
        if not email or not email.strip() or not password:
            raise ValidationError("Email and password are required")
        if len(password) < self.min_password_length:
            raise ValidationError(
                f"Password must be at least {self.min_password_length} characters",
                details={"field": "password"},
            )

        email = normalize_email(email)

        with self.uow:
            if self.user_repository.email_exists(email):
                raise EmailAlreadyExistsError(email)

            hashed_password = self.password_service.hash_password(password)
            user = User.create(email=email, hashed_password=hashed_password)
            # The unique index still guards against a concurrent registration
            user = self.user_repository.save(user)
            self.uow.commit()

        token = self.token_service.create_access_token(user.id.value, user.email)

        logger.info("user_registered", user_id=user.id.value)

        return user, token
