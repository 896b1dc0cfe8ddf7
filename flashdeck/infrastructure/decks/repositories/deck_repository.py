"""Repository for Deck domain entities."""

import logging
from typing import Any

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.orm import Session, selectinload

from flashdeck.application.decks.protocols.deck_repository import DeckSort
from flashdeck.domain.common.value_objects.ids import DeckId, UserId
from flashdeck.domain.decks.entities.deck import Deck, DeckSummary
from flashdeck.exceptions import DeckNotFoundError
from flashdeck.infrastructure.decks.mappers.deck_mapper import DeckMapper
from flashdeck.models import Card as CardORM
from flashdeck.models import Deck as DeckORM
from flashdeck.models import utcnow

logger = logging.getLogger(__name__)


class DeckRepository:
    """Repository for Deck domain entities.

    Every lookup carries the owner in its predicate, so a deck owned by
    someone else is indistinguishable from a missing one.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = DeckMapper()

    def _get_owned(self, deck_id: DeckId, user_id: UserId) -> DeckORM | None:
        stmt = (
            select(DeckORM)
            .options(selectinload(DeckORM.cards))
            .where(DeckORM.id == deck_id.value, DeckORM.user_id == user_id.value)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def list_with_counts(self, user_id: UserId, sort: DeckSort) -> list[DeckSummary]:
        """
        Get all decks of a user with their live card counts.

        Args:
            user_id: The owner
            sort: Ordering of the result

        Returns:
            List of DeckSummary (cards not loaded)
        """
        card_count = (
            select(func.count(CardORM.id))
            .where(CardORM.deck_id == DeckORM.id)
            .correlate(DeckORM)
            .scalar_subquery()
            .label("card_count")
        )

        order_by: list[ColumnElement[Any]]
        if sort == DeckSort.TITLE:
            order_by = [func.lower(DeckORM.title).asc(), DeckORM.id.asc()]
        elif sort == DeckSort.CARDS:
            order_by = [card_count.desc(), DeckORM.updated_at.desc(), DeckORM.id.desc()]
        else:
            order_by = [DeckORM.updated_at.desc(), DeckORM.id.desc()]

        stmt = (
            select(DeckORM, card_count)
            .where(DeckORM.user_id == user_id.value)
            .order_by(*order_by)
        )
        rows = self.db.execute(stmt).all()
        return [
            DeckSummary(
                deck=self.mapper.to_domain(orm_model, include_cards=False),
                card_count=count or 0,
            )
            for orm_model, count in rows
        ]

    def find_by_id(self, deck_id: DeckId, user_id: UserId) -> Deck | None:
        """
        Find a deck by ID with user ownership check.

        Returns:
            Deck with its cards ordered by id if found and owned by user, None otherwise
        """
        orm_model = self._get_owned(deck_id, user_id)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, deck: Deck) -> Deck:
        """
        Save a deck with its cards (create, or replace title and card set).

        Replacing deletes every existing card, which cascades to card progress.
        The caller's unit of work commits.

        Raises:
            DeckNotFoundError: If an existing deck to replace is gone
        """
        if not deck.id.is_persisted():
            orm_model = self.mapper.to_orm(deck)
            self.db.add(orm_model)
            self.db.flush()
            logger.info(f"Created deck {orm_model.id} with {len(orm_model.cards)} cards")
            return self.mapper.to_domain(orm_model)

        orm_model = self._get_owned(deck.id, deck.user_id)
        if not orm_model:
            raise DeckNotFoundError(deck.id.value)

        orm_model.title = deck.title
        orm_model.updated_at = utcnow()
        orm_model.cards.clear()
        self.db.flush()
        orm_model.cards.extend(self.mapper.card_to_orm(card) for card in deck.cards)
        self.db.flush()
        logger.info(f"Replaced deck {orm_model.id} with {len(orm_model.cards)} cards")
        return self.mapper.to_domain(orm_model)

    def delete(self, deck_id: DeckId, user_id: UserId) -> bool:
        """
        Delete a deck; cards, their progress and the deck's sessions go with it.

        Returns:
            True if deleted, False if not found
        """
        orm_model = self._get_owned(deck_id, user_id)
        if not orm_model:
            return False

        self.db.delete(orm_model)
        self.db.flush()
        logger.info(f"Deleted deck {deck_id.value}")
        return True
