"""Use case for recording study sessions."""

from dataclasses import dataclass

import structlog

from flashdeck.application.common.unit_of_work import UnitOfWork
from flashdeck.application.decks.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.study.protocols.card_progress_repository import (
    CardProgressRepositoryProtocol,
)
from flashdeck.application.study.protocols.study_session_repository import (
    StudySessionRepositoryProtocol,
)
from flashdeck.domain.common.value_objects.ids import CardId, DeckId, UserId
from flashdeck.domain.study.entities.card_progress import CardAnswer, CardProgress
from flashdeck.domain.study.entities.study_session import StudySession
from flashdeck.exceptions import DeckNotFoundError, ValidationError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SessionSummary:
    """Counts reported back after a study session is recorded."""

    known_count: int
    unknown_count: int


class StudySessionUseCase:
    """Records one completed study pass: per-card progress plus a session row."""

    def __init__(
        self,
        uow: UnitOfWork,
        deck_repository: DeckRepositoryProtocol,
        card_progress_repository: CardProgressRepositoryProtocol,
        study_session_repository: StudySessionRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.uow = uow
        self.deck_repository = deck_repository
        self.card_progress_repository = card_progress_repository
        self.study_session_repository = study_session_repository

    def save_progress(
        self,
        user_id: int,
        deck_id: int | None,
        results: list[tuple[int, bool]],
    ) -> SessionSummary:
        """
        Save the answers of a study pass over one deck.

        Every answered card gets its progress upserted; when a card appears
        more than once the last answer wins. Exactly one study session is
        appended with counts over all submitted answers. All writes commit
        together or not at all.

        Args:
            user_id: The studying user
            deck_id: The studied deck
            results: (card_id, is_known) pairs in answer order

        Returns:
            SessionSummary with known and unknown counts

        Raises:
            ValidationError: If deck_id is missing, results is empty or a card
                does not belong to the deck
            DeckNotFoundError: If the deck does not exist or is owned by someone else
        """
        if deck_id is None:
            raise ValidationError("deckId is required", details={"field": "deckId"})
        if not results:
            raise ValidationError("results must not be empty", details={"field": "results"})

        owner = UserId(user_id)
        answers = [
            CardAnswer(card_id=CardId(card_id), is_known=known) for card_id, known in results
        ]

        with self.uow:
            deck = (
                self.deck_repository.find_by_id(DeckId(deck_id), owner) if deck_id > 0 else None
            )
            if not deck:
                raise DeckNotFoundError(deck_id)

            deck_card_ids = deck.card_ids()
            foreign = sorted({a.card_id.value for a in answers} - deck_card_ids)
            if foreign:
                raise ValidationError(
                    "Some cards do not belong to this deck",
                    details={"cardIds": foreign},
                )

            existing = self.card_progress_repository.find_for_cards(
                owner, list(dict.fromkeys(a.card_id for a in answers))
            )
            touched: dict[CardId, CardProgress] = {}
            for answer in answers:
                progress = touched.get(answer.card_id) or existing.get(answer.card_id)
                if progress is None:
                    progress = CardProgress.create(owner, answer.card_id, answer.is_known)
                else:
                    progress.record(answer.is_known)
                touched[answer.card_id] = progress

            for progress in touched.values():
                self.card_progress_repository.save(progress)

            session = self.study_session_repository.save(
                StudySession.complete(owner, deck.id, answers)
            )
            self.uow.commit()

        logger.info(
            "study_session_recorded",
            user_id=user_id,
            deck_id=deck_id,
            session_id=session.id.value,
            known_count=session.known_count,
            unknown_count=session.unknown_count,
        )
        return SessionSummary(
            known_count=session.known_count, unknown_count=session.unknown_count
        )
