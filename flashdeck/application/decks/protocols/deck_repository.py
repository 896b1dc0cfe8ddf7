from enum import StrEnum
from typing import Protocol

from flashdeck.domain.common.value_objects.ids import DeckId, UserId
from flashdeck.domain.decks.entities.deck import Deck, DeckSummary


class DeckSort(StrEnum):
    """Orderings offered by the deck listing."""

    UPDATED = "updated"
    TITLE = "title"
    CARDS = "cards"


class DeckRepositoryProtocol(Protocol):
    def list_with_counts(self, user_id: UserId, sort: DeckSort) -> list[DeckSummary]: ...

    def find_by_id(self, deck_id: DeckId, user_id: UserId) -> Deck | None: ...

    def save(self, deck: Deck) -> Deck: ...

    def delete(self, deck_id: DeckId, user_id: UserId) -> bool: ...
