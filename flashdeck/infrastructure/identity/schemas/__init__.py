from .user_schemas import (
    AuthResponse,
    ForgotPasswordRequest,
    ForgotPasswordResponse,
    RegisterResponse,
    ResetPasswordRequest,
    UserLoginRequest,
    UserRegisterRequest,
    UserResponse,
)

__all__ = [
    "AuthResponse",
    "ForgotPasswordRequest",
    "ForgotPasswordResponse",
    "RegisterResponse",
    "ResetPasswordRequest",
    "UserLoginRequest",
    "UserRegisterRequest",
    "UserResponse",
]
