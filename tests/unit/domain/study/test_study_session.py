"""Unit tests for the StudySession and CardProgress entities."""

import pytest

from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import CardId, DeckId, UserId
from flashdeck.domain.study.entities import CardAnswer, CardProgress, StudySession


def test_complete_counts_every_answer() -> None:
    answers = [
        CardAnswer(CardId(1), True),
        CardAnswer(CardId(2), False),
        CardAnswer(CardId(1), False),
    ]

    session = StudySession.complete(UserId(1), DeckId(4), answers)

    assert session.known_count == 1
    assert session.unknown_count == 2
    assert session.total_count == 3
    assert session.completed_at is not None
    assert not session.id.is_persisted()


def test_complete_requires_answers() -> None:
    with pytest.raises(ValidationError):
        StudySession.complete(UserId(1), DeckId(4), [])


def test_progress_record_overwrites() -> None:
    progress = CardProgress.create(UserId(1), CardId(2), is_known=True)
    first_update = progress.updated_at

    progress.record(False)

    assert progress.is_known is False
    assert progress.updated_at is not None
    assert first_update is not None
    assert progress.updated_at >= first_update
