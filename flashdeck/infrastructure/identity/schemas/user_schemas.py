"""Pydantic schemas for account and authentication endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from flashdeck.domain.identity.entities.user import MAX_EMAIL_LENGTH


class CredentialsRequest(BaseModel):
    """Email and password, as sent to register and login."""

    email: str = Field(..., max_length=MAX_EMAIL_LENGTH, description="Account email")
    password: str = Field(..., description="Plain text password")


class UserRegisterRequest(CredentialsRequest):
    """Schema for user registration."""


class UserLoginRequest(CredentialsRequest):
    """Schema for user login."""


class UserResponse(BaseModel):
    """Public view of an account."""

    id: int
    email: str
    created_at: datetime | None = None


class AuthResponse(BaseModel):
    """Authenticated user together with a bearer token."""

    user: UserResponse
    token: str = Field(..., description="Bearer token for the Authorization header")


class RegisterResponse(AuthResponse):
    """Schema for registration response."""

    message: str


class ForgotPasswordRequest(BaseModel):
    """Schema for requesting a password reset token."""

    email: str = Field(..., max_length=MAX_EMAIL_LENGTH)


class ForgotPasswordResponse(BaseModel):
    """Reset token is only included outside production."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    reset_token: str | None = Field(None, alias="resetToken")


class ResetPasswordRequest(BaseModel):
    """Schema for resetting a password."""

    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(..., max_length=MAX_EMAIL_LENGTH)
    new_password: str = Field(..., alias="newPassword")
    reset_token: str | None = Field(None, alias="resetToken")
