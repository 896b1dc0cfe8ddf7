"""Database models."""

from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from flashdeck.database import Base


def utcnow() -> datetime:
    """Current UTC time; used as the Python-side default for timestamps."""
    return datetime.now(UTC)


class User(Base):
    """Registered account."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    hashed_password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    decks: Mapped[list["Deck"]] = relationship(back_populates="user", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, email='{self.email}')>"


class Deck(Base):
    """A user's named collection of cards."""

    __tablename__ = "decks"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )

    user: Mapped[User] = relationship(back_populates="decks")
    cards: Mapped[list["Card"]] = relationship(
        back_populates="deck",
        cascade="all, delete-orphan",
        order_by="Card.id",
    )
    study_sessions: Mapped[list["StudySession"]] = relationship(
        back_populates="deck", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        """String representation of Deck."""
        return f"<Deck(id={self.id}, title='{self.title}')>"


class Card(Base):
    """A term/definition pair inside a deck."""

    __tablename__ = "cards"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    deck_id: Mapped[int] = mapped_column(
        ForeignKey("decks.id", ondelete="CASCADE"), index=True, nullable=False
    )
    term: Mapped[str] = mapped_column(Text, nullable=False)
    definition: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    deck: Mapped[Deck] = relationship(back_populates="cards")
    progress: Mapped[list["CardProgress"]] = relationship(
        back_populates="card", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        """String representation of Card."""
        return f"<Card(id={self.id}, term='{self.term[:50]}')>"


class CardProgress(Base):
    """Latest known/unknown answer of one user for one card."""

    __tablename__ = "card_progress"
    __table_args__ = (UniqueConstraint("user_id", "card_id", name="uq_card_progress_user_card"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    card_id: Mapped[int] = mapped_column(
        ForeignKey("cards.id", ondelete="CASCADE"), index=True, nullable=False
    )
    is_known: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    card: Mapped[Card] = relationship(back_populates="progress")

    def __repr__(self) -> str:
        """String representation of CardProgress."""
        return (
            f"<CardProgress(user_id={self.user_id}, card_id={self.card_id}, "
            f"is_known={self.is_known})>"
        )


class StudySession(Base):
    """Append-only record of one completed study pass over a deck."""

    __tablename__ = "study_sessions"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    deck_id: Mapped[int] = mapped_column(
        ForeignKey("decks.id", ondelete="CASCADE"), index=True, nullable=False
    )
    known_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    unknown_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    completed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )

    deck: Mapped[Deck] = relationship(back_populates="study_sessions")

    def __repr__(self) -> str:
        """String representation of StudySession."""
        return (
            f"<StudySession(id={self.id}, deck_id={self.deck_id}, "
            f"known={self.known_count}, unknown={self.unknown_count})>"
        )
