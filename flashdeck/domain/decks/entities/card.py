"""Card entity: one term/definition pair inside a deck."""

from dataclasses import dataclass
from datetime import datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import CardId, DeckId


@dataclass(eq=False)
class Card(Entity[CardId]):
    """
    Card belonging to exactly one deck.

    Business Rules:
    - Term and definition are required and non-empty after trimming
    - Cards are never edited individually; a deck edit replaces its whole card set
    """

    id: CardId
    deck_id: DeckId
    term: str
    definition: str
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.term or not self.term.strip():
            raise ValidationError("Card term cannot be empty", field="term")
        if not self.definition or not self.definition.strip():
            raise ValidationError("Card definition cannot be empty", field="definition")

    @classmethod
    def create(cls, term: str, definition: str, deck_id: DeckId | None = None) -> "Card":
        """Create a new card (ID will be 0 until persisted)."""
        if term is None or definition is None:
            raise ValidationError("Card term and definition are required")
        return cls(
            id=CardId.generate(),
            deck_id=deck_id or DeckId.generate(),
            term=term.strip(),
            definition=definition.strip(),
        )

    @classmethod
    def create_with_id(
        cls,
        id: CardId,
        deck_id: DeckId,
        term: str,
        definition: str,
        created_at: datetime,
    ) -> "Card":
        """Reconstitute a card from persistence."""
        return cls(
            id=id,
            deck_id=deck_id,
            term=term,
            definition=definition,
            created_at=created_at,
        )
