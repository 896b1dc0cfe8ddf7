"""Unit tests for the ProgressAggregator domain service."""

from datetime import UTC, datetime, timedelta

import pytest

from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import DeckId, StudySessionId, UserId
from flashdeck.domain.study.entities import StudySession
from flashdeck.domain.study.services import (
    RECENT_SESSIONS_LIMIT,
    DeckProgress,
    ProgressAggregator,
    RecentSession,
)

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def _recent(session_id: int) -> RecentSession:
    session = StudySession.create_with_id(
        id=StudySessionId(session_id),
        user_id=UserId(1),
        deck_id=DeckId(1),
        known_count=1,
        unknown_count=0,
        completed_at=NOW + timedelta(minutes=session_id),
    )
    return RecentSession(session=session, deck_title="Deck")


def test_totals_are_sums_of_decks() -> None:
    decks = [
        DeckProgress(DeckId(1), "A", total_cards=4, known_cards=1, unknown_cards=3),
        DeckProgress(DeckId(2), "B", total_cards=2, known_cards=2, unknown_cards=0),
        DeckProgress(DeckId(3), "C", total_cards=0, known_cards=0, unknown_cards=0),
    ]

    report = ProgressAggregator().summarize(decks, [])

    assert report.total_cards == 6
    assert report.known_cards == 3
    assert report.unknown_cards == 3
    assert report.deck_progress == decks


def test_empty_report() -> None:
    report = ProgressAggregator().summarize([], [])

    assert report.total_cards == 0
    assert report.known_cards == 0
    assert report.unknown_cards == 0
    assert report.deck_progress == []
    assert report.recent_sessions == []


def test_recent_sessions_are_capped() -> None:
    sessions = [_recent(i) for i in range(15, 0, -1)]

    report = ProgressAggregator().summarize([], sessions)

    assert len(report.recent_sessions) == RECENT_SESSIONS_LIMIT
    assert report.recent_sessions[0].session.id == StudySessionId(15)


def test_inconsistent_deck_figures_are_rejected() -> None:
    with pytest.raises(ValidationError):
        DeckProgress(DeckId(1), "Broken", total_cards=3, known_cards=2, unknown_cards=2)
