import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from starlette import status

from flashdeck.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from flashdeck.application.identity.use_cases.password_reset_use_case import (
    PasswordResetUseCase,
)
from flashdeck.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from flashdeck.config import get_settings
from flashdeck.core import container
from flashdeck.domain.identity.entities.user import User, normalize_email
from flashdeck.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    InvalidResetTokenError,
    UserNotFoundError,
)
from flashdeck.exceptions import AuthError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.common.rate_limit import limiter
from flashdeck.infrastructure.common.schemas import MessageResponse
from flashdeck.infrastructure.identity.schemas import (
    AuthResponse,
    ForgotPasswordRequest,
    ForgotPasswordResponse,
    RegisterResponse,
    ResetPasswordRequest,
    UserLoginRequest,
    UserRegisterRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])
settings = get_settings()

NO_ACCOUNT_MESSAGE = "No account found with this email"


def _user_response(user: User) -> UserResponse:
    return UserResponse(id=user.id.value, email=user.email, created_at=user.created_at)


@router.post("/register", status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.RATE_LIMIT_LOGIN)  # type: ignore[misc]
def register(
    request: Request,
    payload: UserRegisterRequest,
    use_case: RegisterUserUseCase = Depends(inject_use_case(container.register_user_use_case)),
) -> RegisterResponse:
    """Create an account and log it in."""
    try:
        user, token = use_case.register_user(payload.email, payload.password)
    except EmailAlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered",
        ) from None
    return RegisterResponse(
        message="User registered successfully", user=_user_response(user), token=token
    )


@router.post("/login")
@limiter.limit(settings.RATE_LIMIT_LOGIN)  # type: ignore[misc]
def login(
    request: Request,
    payload: UserLoginRequest,
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> AuthResponse:
    try:
        user, token = use_case.authenticate_user(payload.email, payload.password)
    except InvalidCredentialsError:
        raise AuthError("Invalid email or password") from None
    return AuthResponse(user=_user_response(user), token=token)


@router.post(
    "/forgot-password", response_model=ForgotPasswordResponse, response_model_exclude_none=True
)
@limiter.limit(settings.RATE_LIMIT_LOGIN)  # type: ignore[misc]
def forgot_password(
    request: Request,
    payload: ForgotPasswordRequest,
    use_case: PasswordResetUseCase = Depends(inject_use_case(container.password_reset_use_case)),
) -> ForgotPasswordResponse:
    """
    Issue a password reset token.

    Outside production the token is returned in the body. In production it is
    only written to the log, from where the operator delivers it.
    """
    try:
        reset_token = use_case.request_reset(payload.email)
    except UserNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=NO_ACCOUNT_MESSAGE
        ) from None

    if settings.ENVIRONMENT == "production":
        logger.info(f"Password reset token for {normalize_email(payload.email)}: {reset_token}")
        return ForgotPasswordResponse(message="Password reset requested")
    return ForgotPasswordResponse(message="Password reset requested", reset_token=reset_token)


@router.post("/reset-password")
@limiter.limit(settings.RATE_LIMIT_LOGIN)  # type: ignore[misc]
def reset_password(
    request: Request,
    payload: ResetPasswordRequest,
    use_case: PasswordResetUseCase = Depends(inject_use_case(container.password_reset_use_case)),
) -> MessageResponse:
    try:
        use_case.reset_password(payload.email, payload.new_password, payload.reset_token)
    except UserNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=NO_ACCOUNT_MESSAGE
        ) from None
    except InvalidResetTokenError:
        raise AuthError("Invalid or expired reset token") from None
    return MessageResponse(message="Password reset successfully")
