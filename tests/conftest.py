"""Pytest configuration and fixtures."""

import os

# Settings are read once at import time; configure them before the app is imported
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-at-least-32-characters-long"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["PASSWORD_PEPPER"] = ""

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from flashdeck import models  # noqa: E402
from flashdeck.config import get_settings  # noqa: E402
from flashdeck.database import Base, build_engine, get_db  # noqa: E402
from flashdeck.infrastructure.identity.services.password_service import (  # noqa: E402
    PasswordService,
)
from flashdeck.infrastructure.identity.services.token_service import (  # noqa: E402
    create_access_token,
)
from flashdeck.main import app  # noqa: E402

TEST_PASSWORD = "correct-horse"  # noqa: S105

password_service = PasswordService(pepper=get_settings().PASSWORD_PEPPER)

# In-memory SQLite shared by every connection (StaticPool) with foreign keys enabled
test_engine = build_engine(get_settings())

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _create_user(db_session: Session, email: str) -> models.User:
    user = models.User(email=email, hashed_password=password_service.hash_password(TEST_PASSWORD))
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def _auth_headers(user: models.User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id, user.email)}"}


@pytest.fixture
def test_password() -> str:
    """Plain text password of the users created by fixtures."""
    return TEST_PASSWORD


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    """Create a registered user."""
    return _create_user(db_session, "learner@example.com")


@pytest.fixture
def other_user(db_session: Session) -> models.User:
    """Create a second user who must never see test_user's data."""
    return _create_user(db_session, "someone-else@example.com")


@pytest.fixture
def auth_headers(test_user: models.User) -> dict[str, str]:
    """Bearer token headers for test_user."""
    return _auth_headers(test_user)


@pytest.fixture
def other_auth_headers(other_user: models.User) -> dict[str, str]:
    """Bearer token headers for other_user."""
    return _auth_headers(other_user)


@pytest.fixture
def test_deck(db_session: Session, test_user: models.User) -> models.Deck:
    """Create a two-card deck owned by test_user."""
    deck = models.Deck(
        user_id=test_user.id,
        title="Spanish basics",
        cards=[
            models.Card(term="hola", definition="hello"),
            models.Card(term="adiós", definition="goodbye"),
        ],
    )
    db_session.add(deck)
    db_session.commit()
    db_session.refresh(deck)
    return deck


@pytest.fixture
def other_deck(db_session: Session, other_user: models.User) -> models.Deck:
    """Create a deck owned by other_user."""
    deck = models.Deck(
        user_id=other_user.id,
        title="Private deck",
        cards=[models.Card(term="secret", definition="hidden")],
    )
    db_session.add(deck)
    db_session.commit()
    db_session.refresh(deck)
    return deck
