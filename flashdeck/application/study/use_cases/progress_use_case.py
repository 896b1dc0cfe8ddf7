"""Use case for the progress dashboard."""

import structlog

from flashdeck.application.common.unit_of_work import UnitOfWork
from flashdeck.application.study.protocols.progress_query_repository import (
    ProgressQueryRepositoryProtocol,
)
from flashdeck.application.study.protocols.study_session_repository import (
    StudySessionRepositoryProtocol,
)
from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.study.services.progress_aggregator import (
    RECENT_SESSIONS_LIMIT,
    ProgressAggregator,
    ProgressReport,
)

logger = structlog.get_logger(__name__)


class ProgressUseCase:
    """Read-only view of a user's mastery across all their decks."""

    def __init__(
        self,
        uow: UnitOfWork,
        progress_query_repository: ProgressQueryRepositoryProtocol,
        study_session_repository: StudySessionRepositoryProtocol,
        progress_aggregator: ProgressAggregator,
    ) -> None:
        """Initialize use case with dependencies."""
        self.uow = uow
        self.progress_query_repository = progress_query_repository
        self.study_session_repository = study_session_repository
        self.progress_aggregator = progress_aggregator

    def get_progress(self, user_id: int) -> ProgressReport:
        """
        Build the progress report for a user.

        Returns:
            ProgressReport with per-deck figures (most recently updated deck
            first), the newest sessions and account-wide totals
        """
        owner = UserId(user_id)
        with self.uow:
            deck_progress = self.progress_query_repository.deck_progress(owner)
            recent = self.study_session_repository.find_recent(owner, RECENT_SESSIONS_LIMIT)

        report = self.progress_aggregator.summarize(deck_progress, recent)
        logger.debug(
            "progress_computed",
            user_id=user_id,
            deck_count=len(report.deck_progress),
            total_cards=report.total_cards,
        )
        return report
