"""Custom exception hierarchy for Flashdeck application."""

from enum import StrEnum


class FlashdeckError(Exception):
    """Base exception for all Flashdeck errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, object] | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize exception with message, status code and optional details."""
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.headers = headers
        super().__init__(self.message)


class ValidationError(FlashdeckError):
    """Malformed or missing input."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=400, details=details)


class AuthError(FlashdeckError):
    """Bad credentials or a missing, invalid or expired token."""

    def __init__(self, message: str = "Could not validate credentials") -> None:
        """Initialize with message and 401 status code."""
        super().__init__(message, status_code=401, headers={"WWW-Authenticate": "Bearer"})


class NotFoundError(FlashdeckError):
    """Resource not found (or not owned by the caller)."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class DeckNotFoundError(NotFoundError):
    """Deck not found error."""

    def __init__(self, deck_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with deck ID or custom message."""
        self.deck_id = deck_id
        if message:
            super().__init__(message)
        elif deck_id is not None:
            super().__init__(f"Deck with id {deck_id} not found")
        else:
            super().__init__("Deck not found")


class ConflictError(FlashdeckError):
    """Duplicate value for a unique field."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        """Initialize with message and 409 status code."""
        super().__init__(message, status_code=409, details=details)


class StoreFailure(StrEnum):
    """Coarse classification of backing-store failures, for operators."""

    CONNECTIVITY = "connectivity"
    CREDENTIALS = "credentials"
    ACCESS_DENIED = "access_denied"
    SCHEMA_MISSING = "schema_missing"
    UNKNOWN = "unknown"


class StoreError(FlashdeckError):
    """Backing-store failure."""

    def __init__(self, kind: StoreFailure, hint: str) -> None:
        """Initialize with the failure kind and an operator hint."""
        self.kind = kind
        self.hint = hint
        super().__init__(
            "Database error",
            status_code=500,
            details={"kind": kind.value, "hint": hint},
        )

