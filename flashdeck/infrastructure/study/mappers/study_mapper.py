"""Mappers for CardProgress and StudySession ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects.ids import (
    CardId,
    CardProgressId,
    DeckId,
    StudySessionId,
    UserId,
)
from flashdeck.domain.study.entities.card_progress import CardProgress
from flashdeck.domain.study.entities.study_session import StudySession
from flashdeck.models import CardProgress as CardProgressORM
from flashdeck.models import StudySession as StudySessionORM


class CardProgressMapper:
    """Mapper for CardProgress ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: CardProgressORM) -> CardProgress:
        return CardProgress.create_with_id(
            id=CardProgressId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            card_id=CardId(orm_model.card_id),
            is_known=orm_model.is_known,
            updated_at=orm_model.updated_at,
        )

    def to_orm(
        self, domain_entity: CardProgress, orm_model: CardProgressORM | None = None
    ) -> CardProgressORM:
        if orm_model:
            orm_model.is_known = domain_entity.is_known
            if domain_entity.updated_at:
                orm_model.updated_at = domain_entity.updated_at
            return orm_model

        return CardProgressORM(
            user_id=domain_entity.user_id.value,
            card_id=domain_entity.card_id.value,
            is_known=domain_entity.is_known,
            updated_at=domain_entity.updated_at,
        )


class StudySessionMapper:
    """Mapper for StudySession ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: StudySessionORM) -> StudySession:
        return StudySession.create_with_id(
            id=StudySessionId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            deck_id=DeckId(orm_model.deck_id),
            known_count=orm_model.known_count,
            unknown_count=orm_model.unknown_count,
            completed_at=orm_model.completed_at,
        )

    def to_orm(self, domain_entity: StudySession) -> StudySessionORM:
        return StudySessionORM(
            user_id=domain_entity.user_id.value,
            deck_id=domain_entity.deck_id.value,
            known_count=domain_entity.known_count,
            unknown_count=domain_entity.unknown_count,
            completed_at=domain_entity.completed_at,
        )
