"""Classification of backing-store failures.

Raw SQLAlchemy and driver errors are mapped to a small set of kinds, each with
an operator hint, before they leave the persistence layer.
"""

import logging

from sqlalchemy.exc import (
    DBAPIError,
    IntegrityError,
    OperationalError,
    SQLAlchemyError,
)
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from flashdeck.exceptions import ConflictError, FlashdeckError, StoreError, StoreFailure

logger = logging.getLogger(__name__)

HINTS: dict[StoreFailure, str] = {
    StoreFailure.CONNECTIVITY: (
        "Database is not reachable. Check that the server is running and that "
        "DATABASE_URL points at the right host and port."
    ),
    StoreFailure.CREDENTIALS: (
        "Database rejected the credentials. Check the user and password in DATABASE_URL."
    ),
    StoreFailure.ACCESS_DENIED: (
        "Database refused this host or user. Check the server's pg_hba.conf rules."
    ),
    StoreFailure.SCHEMA_MISSING: (
        "Tables are missing. Run the migrations with 'alembic upgrade head'."
    ),
    StoreFailure.UNKNOWN: "Unexpected database error. Check the server logs.",
}

_CREDENTIALS_CODES = {"28P01"}
_ACCESS_DENIED_CODES = {"28000"}
_SCHEMA_MISSING_CODES = {"42P01", "3F000"}

_CONNECTIVITY_MARKERS = (
    "connection refused",
    "could not connect",
    "could not translate host name",
    "timeout expired",
    "connection timed out",
    "server closed the connection",
    "unable to open database file",
)


def _sqlstate(exc: DBAPIError) -> str | None:
    orig = exc.orig
    # psycopg 3 exposes sqlstate, psycopg2 exposes pgcode
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def classify_store_error(exc: SQLAlchemyError) -> StoreFailure:
    """Map a SQLAlchemy error to a StoreFailure kind."""
    if isinstance(exc, PoolTimeoutError):
        return StoreFailure.CONNECTIVITY

    message = str(getattr(exc, "orig", None) or exc).lower()
    code = _sqlstate(exc) if isinstance(exc, DBAPIError) else None

    if code in _CREDENTIALS_CODES or "password authentication failed" in message:
        return StoreFailure.CREDENTIALS
    if code in _ACCESS_DENIED_CODES or "pg_hba" in message:
        return StoreFailure.ACCESS_DENIED
    if (
        code in _SCHEMA_MISSING_CODES
        or "no such table" in message
        or ("relation" in message and "does not exist" in message)
    ):
        return StoreFailure.SCHEMA_MISSING
    if isinstance(exc, OperationalError) or any(
        marker in message for marker in _CONNECTIVITY_MARKERS
    ):
        return StoreFailure.CONNECTIVITY
    return StoreFailure.UNKNOWN


def translate_store_error(exc: SQLAlchemyError) -> FlashdeckError:
    """
    Translate a SQLAlchemy error into an application error.

    Integrity violations become ConflictError; everything else becomes a
    StoreError carrying its kind and operator hint.
    """
    if isinstance(exc, IntegrityError):
        logger.info(f"Integrity violation: {exc.orig}")
        return ConflictError("Resource already exists")

    kind = classify_store_error(exc)
    logger.error(f"Database failure ({kind.value}): {exc}")
    return StoreError(kind, HINTS[kind])
