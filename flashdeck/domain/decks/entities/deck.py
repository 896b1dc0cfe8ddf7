"""
Deck aggregate: a titled set of cards owned by one user.
"""

from dataclasses import dataclass, field
from datetime import datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import DeckId, UserId
from flashdeck.domain.decks.entities.card import Card

MAX_TITLE_LENGTH = 255


def _validate_title(title: str | None) -> str:
    if title is None or not title.strip():
        raise ValidationError("Deck title cannot be empty", field="title")
    title = title.strip()
    if len(title) > MAX_TITLE_LENGTH:
        raise ValidationError(
            f"Deck title cannot exceed {MAX_TITLE_LENGTH} characters", field="title"
        )
    return title


def _validate_cards(cards: list[Card]) -> list[Card]:
    if not cards:
        raise ValidationError("A deck needs at least one card", field="cards")
    return list(cards)


@dataclass(eq=False)
class Deck(Entity[DeckId]):
    """
    Deck owned by exactly one user.

    Business Rules:
    - Title cannot be empty
    - A deck is created and replaced with at least one card
    - Replacing a deck swaps its entire card set; individual cards are not diffed
    """

    id: DeckId
    user_id: UserId
    title: str
    cards: list[Card] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def replace_contents(self, title: str, cards: list[Card]) -> None:
        """
        Replace the title and the whole card set.

        Raises:
            ValidationError: If title is empty or cards is empty
        """
        title = _validate_title(title)
        self.cards = _validate_cards(cards)
        self.title = title

    def card_ids(self) -> set[int]:
        """Ids of persisted cards in this deck."""
        return {card.id.value for card in self.cards}

    @classmethod
    def create(cls, user_id: UserId, title: str, cards: list[Card]) -> "Deck":
        """
        Create a new deck (ID will be 0 until persisted).

        Raises:
            ValidationError: If title is empty or cards is empty
        """
        return cls(
            id=DeckId.generate(),
            user_id=user_id,
            title=_validate_title(title),
            cards=_validate_cards(cards),
        )

    @classmethod
    def create_with_id(
        cls,
        id: DeckId,
        user_id: UserId,
        title: str,
        created_at: datetime,
        updated_at: datetime,
        cards: list[Card] | None = None,
    ) -> "Deck":
        """Reconstitute a deck from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            title=title,
            cards=cards or [],
            created_at=created_at,
            updated_at=updated_at,
        )


@dataclass
class DeckSummary:
    """Deck with its live card count, for listings."""

    deck: Deck
    card_count: int
