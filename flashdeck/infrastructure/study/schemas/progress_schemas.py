"""Pydantic schemas for the progress API.

Top-level keys are camelCase on the wire; per-row fields stay snake_case.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CardResult(BaseModel):
    """One answer inside a study pass."""

    model_config = ConfigDict(populate_by_name=True)

    card_id: int = Field(..., alias="cardId", ge=1)
    is_known: bool = Field(..., alias="isKnown")


class SaveProgressRequest(BaseModel):
    """Schema for recording a completed study pass."""

    model_config = ConfigDict(populate_by_name=True)

    deck_id: int | None = Field(None, alias="deckId")
    results: list[CardResult] = Field(default_factory=list)


class SaveProgressResponse(BaseModel):
    """Counts of the recorded session."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    known_count: int = Field(..., alias="knownCount")
    unknown_count: int = Field(..., alias="unknownCount")


class DeckProgress(BaseModel):
    """Mastery figures of one deck."""

    deck_id: int
    title: str
    total_cards: int
    known_cards: int
    unknown_cards: int
    last_studied: datetime | None = None


class RecentSession(BaseModel):
    """A past study session with its deck's current title."""

    id: int
    user_id: int
    deck_id: int
    deck_title: str
    known_count: int
    unknown_count: int
    completed_at: datetime


class ProgressResponse(BaseModel):
    """Schema for the progress dashboard."""

    model_config = ConfigDict(populate_by_name=True)

    deck_progress: list[DeckProgress] = Field(..., alias="deckProgress")
    recent_sessions: list[RecentSession] = Field(..., alias="recentSessions")
    total_cards: int = Field(..., alias="totalCards")
    known_cards: int = Field(..., alias="knownCards")
    unknown_cards: int = Field(..., alias="unknownCards")
