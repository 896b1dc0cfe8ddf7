"""Read-side queries for the progress dashboard."""

from sqlalchemy import and_, case, func, select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects.ids import DeckId, UserId
from flashdeck.domain.study.services.progress_aggregator import DeckProgress
from flashdeck.models import Card as CardORM
from flashdeck.models import CardProgress as CardProgressORM
from flashdeck.models import Deck as DeckORM
from flashdeck.models import StudySession as StudySessionORM


class ProgressQueryRepository:
    """Computes per-deck mastery figures in a single grouped query."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def deck_progress(self, user_id: UserId) -> list[DeckProgress]:
        """
        Get mastery figures for every deck the user owns.

        A card counts as known when the user's latest answer for it was
        "known"; unanswered cards count as unknown.

        Returns:
            DeckProgress rows ordered by updated_at DESC, ties broken by id DESC
        """
        known_cards = func.count(case((CardProgressORM.is_known.is_(True), CardORM.id)))
        last_studied = (
            select(func.max(StudySessionORM.completed_at))
            .where(
                StudySessionORM.deck_id == DeckORM.id,
                StudySessionORM.user_id == user_id.value,
            )
            .correlate(DeckORM)
            .scalar_subquery()
        )

        stmt = (
            select(
                DeckORM.id,
                DeckORM.title,
                func.count(CardORM.id).label("total_cards"),
                known_cards.label("known_cards"),
                last_studied.label("last_studied"),
            )
            .outerjoin(CardORM, CardORM.deck_id == DeckORM.id)
            .outerjoin(
                CardProgressORM,
                and_(
                    CardProgressORM.card_id == CardORM.id,
                    CardProgressORM.user_id == user_id.value,
                ),
            )
            .where(DeckORM.user_id == user_id.value)
            .group_by(DeckORM.id, DeckORM.title, DeckORM.updated_at)
            .order_by(DeckORM.updated_at.desc(), DeckORM.id.desc())
        )

        return [
            DeckProgress(
                deck_id=DeckId(row.id),
                title=row.title,
                total_cards=row.total_cards,
                known_cards=row.known_cards,
                unknown_cards=row.total_cards - row.known_cards,
                last_studied=row.last_studied,
            )
            for row in self.db.execute(stmt).all()
        ]
