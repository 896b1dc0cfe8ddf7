"""Repository for CardProgress domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects.ids import CardId, UserId
from flashdeck.domain.study.entities.card_progress import CardProgress
from flashdeck.infrastructure.study.mappers.study_mapper import CardProgressMapper
from flashdeck.models import CardProgress as CardProgressORM


class CardProgressRepository:
    """Repository for CardProgress domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CardProgressMapper()

    def find_for_cards(
        self, user_id: UserId, card_ids: list[CardId]
    ) -> dict[CardId, CardProgress]:
        """
        Get the user's existing progress on the given cards.

        Returns:
            Progress keyed by card id; cards never answered are absent
        """
        if not card_ids:
            return {}
        stmt = select(CardProgressORM).where(
            CardProgressORM.user_id == user_id.value,
            CardProgressORM.card_id.in_([card_id.value for card_id in card_ids]),
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return {CardId(orm.card_id): self.mapper.to_domain(orm) for orm in orm_models}

    def save(self, progress: CardProgress) -> CardProgress:
        """
        Insert or overwrite progress; the caller's unit of work commits.

        Raises:
            ValueError: If existing progress to update is gone
        """
        if not progress.id.is_persisted():
            orm_model = self.mapper.to_orm(progress)
            self.db.add(orm_model)
            self.db.flush()
            return self.mapper.to_domain(orm_model)

        orm_model = self.db.get(CardProgressORM, progress.id.value)
        if not orm_model:
            raise ValueError(f"Card progress {progress.id.value} not found")
        self.mapper.to_orm(progress, orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)
