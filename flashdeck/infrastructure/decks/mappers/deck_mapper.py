"""Mapper for Deck and Card ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects.ids import CardId, DeckId, UserId
from flashdeck.domain.decks.entities.card import Card
from flashdeck.domain.decks.entities.deck import Deck
from flashdeck.models import Card as CardORM
from flashdeck.models import Deck as DeckORM


class DeckMapper:
    """Mapper for Deck ORM ↔ Domain conversion."""

    def card_to_domain(self, orm_model: CardORM) -> Card:
        """Convert Card ORM model to domain entity."""
        return Card.create_with_id(
            id=CardId(orm_model.id),
            deck_id=DeckId(orm_model.deck_id),
            term=orm_model.term,
            definition=orm_model.definition,
            created_at=orm_model.created_at,
        )

    def card_to_orm(self, card: Card) -> CardORM:
        """Build a new Card ORM model; cards are never updated in place."""
        return CardORM(term=card.term, definition=card.definition)

    def to_domain(self, orm_model: DeckORM, include_cards: bool = True) -> Deck:
        """
        Convert ORM model to domain entity.

        Listings pass include_cards=False so the cards collection is never loaded.
        """
        cards = [self.card_to_domain(card) for card in orm_model.cards] if include_cards else None
        return Deck.create_with_id(
            id=DeckId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            title=orm_model.title,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
            cards=cards,
        )

    def to_orm(self, domain_entity: Deck) -> DeckORM:
        """Build a new Deck ORM model together with its cards."""
        return DeckORM(
            user_id=domain_entity.user_id.value,
            title=domain_entity.title,
            cards=[self.card_to_orm(card) for card in domain_entity.cards],
        )
