"""Use case for deck management."""

import structlog

from flashdeck.application.common.unit_of_work import UnitOfWork
from flashdeck.application.decks.protocols.deck_repository import (
    DeckRepositoryProtocol,
    DeckSort,
)
from flashdeck.domain.common.value_objects.ids import DeckId, UserId
from flashdeck.domain.decks.entities.card import Card
from flashdeck.domain.decks.entities.deck import Deck, DeckSummary
from flashdeck.exceptions import DeckNotFoundError, ValidationError

logger = structlog.get_logger(__name__)

CardInput = tuple[str, str]


def _build_cards(cards: list[CardInput], deck_id: DeckId | None = None) -> list[Card]:
    return [
        Card.create(term=term, definition=definition, deck_id=deck_id)
        for term, definition in cards
    ]


def _deck_id(deck_id: int) -> DeckId:
    # Non-positive ids can never match a row
    if deck_id < 1:
        raise DeckNotFoundError(deck_id)
    return DeckId(deck_id)


class DeckUseCase:
    """Use case for listing, creating, reading, replacing and deleting decks."""

    def __init__(self, uow: UnitOfWork, deck_repository: DeckRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.uow = uow
        self.deck_repository = deck_repository

    def list_decks(self, user_id: int, sort: str | None = None) -> list[DeckSummary]:
        """
        List the user's decks with their live card counts.

        Args:
            user_id: Owner of the decks
            sort: "updated" (default, newest first), "title" or "cards"

        Raises:
            ValidationError: If sort is not a known ordering
        """
        try:
            order = DeckSort(sort) if sort else DeckSort.UPDATED
        except ValueError:
            raise ValidationError(
                f"Invalid sort '{sort}'",
                details={"allowed": [option.value for option in DeckSort]},
            ) from None

        with self.uow:
            return self.deck_repository.list_with_counts(UserId(user_id), order)

    def create_deck(self, user_id: int, title: str, cards: list[CardInput]) -> Deck:
        """
        Create a deck together with its cards.

        Args:
            user_id: Owner of the new deck
            title: Deck title (trimmed)
            cards: (term, definition) pairs, at least one

        Returns:
            The persisted deck including its cards

        Raises:
            ValidationError: If the title, the card list or any card is empty
        """
        deck = Deck.create(user_id=UserId(user_id), title=title, cards=_build_cards(cards))

        with self.uow:
            deck = self.deck_repository.save(deck)
            self.uow.commit()

        logger.info(
            "deck_created", deck_id=deck.id.value, user_id=user_id, card_count=len(deck.cards)
        )
        return deck

    def get_deck(self, user_id: int, deck_id: int) -> Deck:
        """
        Get a deck with its cards ordered by id.

        Raises:
            DeckNotFoundError: If the deck does not exist or is owned by someone else
        """
        with self.uow:
            deck = self.deck_repository.find_by_id(_deck_id(deck_id), UserId(user_id))
        if not deck:
            raise DeckNotFoundError(deck_id)
        return deck

    def replace_deck(self, user_id: int, deck_id: int, title: str, cards: list[CardInput]) -> Deck:
        """
        Replace a deck's title and its whole card set.

        Existing cards are deleted along with every user's progress on them;
        the new cards start unstudied.

        Raises:
            DeckNotFoundError: If the deck does not exist or is owned by someone else
            ValidationError: If the title, the card list or any card is empty
        """
        with self.uow:
            deck = self.deck_repository.find_by_id(_deck_id(deck_id), UserId(user_id))
            if not deck:
                raise DeckNotFoundError(deck_id)

            deck.replace_contents(title, _build_cards(cards, deck.id))
            deck = self.deck_repository.save(deck)
            self.uow.commit()

        logger.info(
            "deck_replaced", deck_id=deck_id, user_id=user_id, card_count=len(deck.cards)
        )
        return deck

    def delete_deck(self, user_id: int, deck_id: int) -> None:
        """
        Delete a deck with its cards, their progress and the deck's study sessions.

        Raises:
            DeckNotFoundError: If the deck does not exist or is owned by someone else
        """
        with self.uow:
            deleted = self.deck_repository.delete(_deck_id(deck_id), UserId(user_id))
            if not deleted:
                raise DeckNotFoundError(deck_id)
            self.uow.commit()

        logger.info("deck_deleted", deck_id=deck_id, user_id=user_id)
