"""Common value objects shared across all domain modules."""

from .ids import CardId, CardProgressId, DeckId, StudySessionId, UserId

__all__ = [
    "CardId",
    "CardProgressId",
    "DeckId",
    "StudySessionId",
    "UserId",
]
