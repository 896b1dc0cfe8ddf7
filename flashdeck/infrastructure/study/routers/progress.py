"""API routes for study progress."""

import logging

from fastapi import APIRouter, Depends

from flashdeck.application.study.use_cases.progress_use_case import ProgressUseCase
from flashdeck.application.study.use_cases.study_session_use_case import StudySessionUseCase
from flashdeck.core import container
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.identity.dependencies import CurrentUser
from flashdeck.infrastructure.study.schemas import (
    DeckProgress,
    ProgressResponse,
    RecentSession,
    SaveProgressRequest,
    SaveProgressResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("", response_model=ProgressResponse)
def get_progress(
    current_user: CurrentUser,
    use_case: ProgressUseCase = Depends(inject_use_case(container.progress_use_case)),
) -> ProgressResponse:
    """
    Get per-deck mastery, the ten most recent sessions and overall totals.

    Totals always equal the sums of the per-deck figures.
    """
    report = use_case.get_progress(current_user.id.value)
    return ProgressResponse(
        deck_progress=[
            DeckProgress(
                deck_id=deck.deck_id.value,
                title=deck.title,
                total_cards=deck.total_cards,
                known_cards=deck.known_cards,
                unknown_cards=deck.unknown_cards,
                last_studied=deck.last_studied,
            )
            for deck in report.deck_progress
        ],
        recent_sessions=[
            RecentSession(
                id=recent.session.id.value,
                user_id=recent.session.user_id.value,
                deck_id=recent.session.deck_id.value,
                deck_title=recent.deck_title,
                known_count=recent.session.known_count,
                unknown_count=recent.session.unknown_count,
                completed_at=recent.session.completed_at,
            )
            for recent in report.recent_sessions
        ],
        total_cards=report.total_cards,
        known_cards=report.known_cards,
        unknown_cards=report.unknown_cards,
    )


@router.post("", response_model=SaveProgressResponse)
def save_progress(
    request: SaveProgressRequest,
    current_user: CurrentUser,
    use_case: StudySessionUseCase = Depends(inject_use_case(container.study_session_use_case)),
) -> SaveProgressResponse:
    """
    Record a completed study pass over one deck.

    Args:
        request: Deck id and the answers, in answer order
        use_case: StudySessionUseCase injected via dependency container

    Returns:
        Known and unknown counts of the recorded session
    """
    summary = use_case.save_progress(
        user_id=current_user.id.value,
        deck_id=request.deck_id,
        results=[(result.card_id, result.is_known) for result in request.results],
    )
    return SaveProgressResponse(
        message="Progress saved successfully",
        known_count=summary.known_count,
        unknown_count=summary.unknown_count,
    )
