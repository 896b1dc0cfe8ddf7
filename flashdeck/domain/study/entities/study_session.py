"""
StudySession entity: immutable summary of one completed study pass.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import DeckId, StudySessionId, UserId
from flashdeck.domain.study.entities.card_progress import CardAnswer


@dataclass(eq=False)
class StudySession(Entity[StudySessionId]):
    """
    Record of one study pass over a deck.

    Business Rules:
    - Counts cover every submitted answer, duplicates included
    - Append-only: sessions are never updated once recorded
    """

    id: StudySessionId
    user_id: UserId
    deck_id: DeckId
    known_count: int
    unknown_count: int
    completed_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.known_count < 0 or self.unknown_count < 0:
            raise ValidationError("Session counts cannot be negative")

    @property
    def total_count(self) -> int:
        return self.known_count + self.unknown_count

    @classmethod
    def complete(
        cls, user_id: UserId, deck_id: DeckId, answers: list[CardAnswer]
    ) -> "StudySession":
        """
        Summarize a batch of answers into a new session.

        Raises:
            ValidationError: If answers is empty
        """
        if not answers:
            raise ValidationError("A study session needs at least one answer", field="results")
        known = sum(1 for answer in answers if answer.is_known)
        return cls(
            id=StudySessionId.generate(),
            user_id=user_id,
            deck_id=deck_id,
            known_count=known,
            unknown_count=len(answers) - known,
            completed_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls,
        id: StudySessionId,
        user_id: UserId,
        deck_id: DeckId,
        known_count: int,
        unknown_count: int,
        completed_at: datetime,
    ) -> "StudySession":
        """Reconstitute a session from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            deck_id=deck_id,
            known_count=known_count,
            unknown_count=unknown_count,
            completed_at=completed_at,
        )
