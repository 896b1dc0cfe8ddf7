"""Main FastAPI application."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from flashdeck.config import configure_logging, get_settings
from flashdeck.database import Base, dispose_engine, get_engine, initialize_database
from flashdeck.infrastructure.common.error_handlers import register_exception_handlers
from flashdeck.infrastructure.common.rate_limit import limiter
from flashdeck.infrastructure.common.routers import health
from flashdeck.infrastructure.decks.routers import decks
from flashdeck.infrastructure.identity.routers import auth
from flashdeck.infrastructure.study.routers import progress

settings = get_settings()

configure_logging(settings.ENVIRONMENT)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize the database engine on startup and dispose it on shutdown."""
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION} ({settings.ENVIRONMENT})")
    initialize_database(settings)
    if settings.DB_CREATE_SCHEMA:
        Base.metadata.create_all(bind=get_engine())
        logger.info("Database schema created")
    yield
    dispose_engine()
    logger.info("Database engine disposed")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Flashcard decks, study sessions and progress tracking",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router, prefix=settings.API_PREFIX)
app.include_router(decks.router, prefix=settings.API_PREFIX)
app.include_router(progress.router, prefix=settings.API_PREFIX)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("flashdeck.main:app", host="0.0.0.0", port=8000, reload=True)  # noqa: S104
