"""Repository for StudySession domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.study.entities.study_session import StudySession
from flashdeck.domain.study.services.progress_aggregator import RecentSession
from flashdeck.infrastructure.study.mappers.study_mapper import StudySessionMapper
from flashdeck.models import Deck as DeckORM
from flashdeck.models import StudySession as StudySessionORM


class StudySessionRepository:
    """Repository for StudySession domain entities. Sessions are append-only."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = StudySessionMapper()

    def save(self, session: StudySession) -> StudySession:
        """Append a session; the caller's unit of work commits."""
        orm_model = self.mapper.to_orm(session)
        self.db.add(orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def find_recent(self, user_id: UserId, limit: int) -> list[RecentSession]:
        """
        Get the user's newest sessions with their deck's current title.

        Args:
            user_id: The user
            limit: Maximum number of sessions

        Returns:
            Sessions ordered by completed_at DESC, ties broken by id DESC
        """
        stmt = (
            select(StudySessionORM, DeckORM.title)
            .join(DeckORM, DeckORM.id == StudySessionORM.deck_id)
            .where(
                StudySessionORM.user_id == user_id.value,
                DeckORM.user_id == user_id.value,
            )
            .order_by(StudySessionORM.completed_at.desc(), StudySessionORM.id.desc())
            .limit(limit)
        )
        rows = self.db.execute(stmt).all()
        return [
            RecentSession(session=self.mapper.to_domain(orm_model), deck_title=title)
            for orm_model, title in rows
        ]
