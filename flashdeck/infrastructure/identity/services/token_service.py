"""Token creation and verification service.

Access tokens identify a user for ACCESS_TOKEN_EXPIRE_DAYS. Password reset
tokens are short-lived and carry a fingerprint of the password hash they were
issued against, so they stop verifying once the password changes.
"""

import hashlib
import hmac
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt import InvalidTokenError

from flashdeck.config import get_settings

settings = get_settings()
SECRET_KEY = settings.SECRET_KEY
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_DAYS = settings.ACCESS_TOKEN_EXPIRE_DAYS
PASSWORD_RESET_TOKEN_EXPIRE_MINUTES = settings.PASSWORD_RESET_TOKEN_EXPIRE_MINUTES

ACCESS_TOKEN_TYPE = "access"
PASSWORD_RESET_TOKEN_TYPE = "password_reset"  # noqa: S105


def password_fingerprint(hashed_password: str) -> str:
    """Short digest of a stored password hash."""
    return hashlib.sha256(hashed_password.encode("utf-8")).hexdigest()[:32]


def _encode(claims: dict[str, Any], expires_in: timedelta) -> str:
    now = datetime.now(UTC)
    to_encode = {**claims, "iat": now, "exp": now + expires_in}
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def _decode(token: str, token_type: str) -> dict[str, Any] | None:
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except InvalidTokenError:
        return None
    if payload.get("type") != token_type or payload.get("sub") is None:
        return None
    return payload


def create_access_token(user_id: int, email: str) -> str:
    """Create an access token for a user."""
    return _encode(
        {"sub": str(user_id), "email": email, "type": ACCESS_TOKEN_TYPE},
        timedelta(days=ACCESS_TOKEN_EXPIRE_DAYS),
    )


def verify_access_token(token: str) -> int | None:
    """Verify an access token and return the user_id if valid."""
    payload = _decode(token, ACCESS_TOKEN_TYPE)
    if payload is None:
        return None
    try:
        return int(payload["sub"])
    except (TypeError, ValueError):
        return None


def create_password_reset_token(user_id: int, hashed_password: str) -> str:
    """Create a single-use password reset token bound to the current password hash."""
    return _encode(
        {
            "sub": str(user_id),
            "pwd": password_fingerprint(hashed_password),
            "type": PASSWORD_RESET_TOKEN_TYPE,
        },
        timedelta(minutes=PASSWORD_RESET_TOKEN_EXPIRE_MINUTES),
    )


def verify_password_reset_token(token: str, user_id: int, hashed_password: str) -> bool:
    """Check a reset token was issued for this user and their current password."""
    payload = _decode(token, PASSWORD_RESET_TOKEN_TYPE)
    if payload is None or payload["sub"] != str(user_id):
        return False
    return hmac.compare_digest(
        str(payload.get("pwd", "")), password_fingerprint(hashed_password)
    )
