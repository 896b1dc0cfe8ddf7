"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from flashdeck.config import get_settings
from flashdeck.core import container
from flashdeck.database import DatabaseSession
from flashdeck.domain.identity.entities.user import User
from flashdeck.domain.identity.exceptions import InvalidCredentialsError
from flashdeck.exceptions import AuthError
from flashdeck.infrastructure.common.di import build_use_case

settings = get_settings()

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/auth/login")


def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)], db: DatabaseSession
) -> User:
    """
    Get the current authenticated user from the access token.

    Args:
        token: JWT access token from Authorization header
        db: Database session

    Returns:
        User domain entity

    Raises:
        AuthError: If token is invalid or user not found
    """
    use_case = build_use_case(container.authentication_use_case, db)
    try:
        return use_case.authenticate_token(token)
    except InvalidCredentialsError:
        raise AuthError from None


CurrentUser = Annotated[User, Depends(get_current_user)]
