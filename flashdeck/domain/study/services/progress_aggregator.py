"""
Progress aggregation domain service.

Combines per-deck mastery figures into account-wide totals. Totals are always
derived from the per-deck rows of the same report, so they can never drift
from the figures shown next to them.
"""

from dataclasses import dataclass, field
from datetime import datetime

from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import DeckId
from flashdeck.domain.study.entities.study_session import StudySession

RECENT_SESSIONS_LIMIT = 10


@dataclass(frozen=True)
class DeckProgress:
    """Mastery figures of one deck for one user."""

    deck_id: DeckId
    title: str
    total_cards: int
    known_cards: int
    unknown_cards: int
    last_studied: datetime | None = None

    def __post_init__(self) -> None:
        if self.known_cards + self.unknown_cards != self.total_cards:
            raise ValidationError(
                "Known and unknown cards must add up to the deck's total",
                field="total_cards",
            )


@dataclass(frozen=True)
class RecentSession:
    """A study session annotated with its deck's current title."""

    session: StudySession
    deck_title: str


@dataclass
class ProgressReport:
    """Everything the progress dashboard shows for a user."""

    deck_progress: list[DeckProgress] = field(default_factory=list)
    recent_sessions: list[RecentSession] = field(default_factory=list)
    total_cards: int = 0
    known_cards: int = 0
    unknown_cards: int = 0


class ProgressAggregator:
    """Builds a ProgressReport from per-deck figures and session history."""

    def summarize(
        self,
        deck_progress: list[DeckProgress],
        recent_sessions: list[RecentSession],
    ) -> ProgressReport:
        """
        Sum per-deck figures into account-wide totals.

        Args:
            deck_progress: Per-deck figures, in display order
            recent_sessions: Sessions newest first; only the first
                RECENT_SESSIONS_LIMIT are kept

        Returns:
            ProgressReport whose totals equal the sums of deck_progress
        """
        return ProgressReport(
            deck_progress=list(deck_progress),
            recent_sessions=list(recent_sessions[:RECENT_SESSIONS_LIMIT]),
            total_cards=sum(deck.total_cards for deck in deck_progress),
            known_cards=sum(deck.known_cards for deck in deck_progress),
            unknown_cards=sum(deck.unknown_cards for deck in deck_progress),
        )
