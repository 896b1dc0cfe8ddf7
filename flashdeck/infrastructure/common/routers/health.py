"""Operational routes: welcome, liveness and database diagnostics."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import func, inspect, select, text
from sqlalchemy.exc import SQLAlchemyError

from flashdeck.config import get_settings
from flashdeck.database import DatabaseSession
from flashdeck.infrastructure.common.error_handlers import error_response
from flashdeck.infrastructure.common.store_errors import translate_store_error
from flashdeck.models import User as UserORM

router = APIRouter(tags=["health"])
settings = get_settings()


class DatabaseHealth(BaseModel):
    """Result of the database diagnostics check."""

    status: str
    database: str
    users_table: bool
    user_count: int | None = None


@router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": f"Welcome to {settings.PROJECT_NAME}", "version": settings.VERSION}


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness check; does not touch the database."""
    return {"status": "healthy"}


@router.get("/health/db", response_model=None)
def database_health(db: DatabaseSession) -> DatabaseHealth | JSONResponse:
    """
    Check database connectivity and schema.

    Reports whether the users table exists and how many users it holds. On
    failure responds with 500 and the classified store hint.
    """
    try:
        db.execute(text("SELECT 1"))
        users_table = inspect(db.get_bind()).has_table(UserORM.__tablename__)
        user_count = db.scalar(select(func.count(UserORM.id))) if users_table else None
    except SQLAlchemyError as e:
        error = translate_store_error(e)
        return error_response(error.status_code, "Database connection failed", error.details)

    return DatabaseHealth(
        status="ok",
        database="connected",
        users_table=users_table,
        user_count=user_count,
    )
