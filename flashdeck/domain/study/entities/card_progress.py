"""Per-user mastery state of a single card."""

from dataclasses import dataclass
from datetime import UTC, datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.value_object import ValueObject
from flashdeck.domain.common.value_objects import CardId, CardProgressId, UserId


@dataclass(frozen=True)
class CardAnswer(ValueObject):
    """One answer given during a study pass."""

    card_id: CardId
    is_known: bool


@dataclass(eq=False)
class CardProgress(Entity[CardProgressId]):
    """
    Latest known/unknown answer of one user for one card.

    Business Rules:
    - At most one progress per (user, card); the latest answer overwrites the previous one
    - Never deleted by the application; removed only with its card
    """

    id: CardProgressId
    user_id: UserId
    card_id: CardId
    is_known: bool
    updated_at: datetime | None = None

    def record(self, is_known: bool) -> None:
        """Overwrite the mastery flag with a newer answer."""
        self.is_known = is_known
        self.updated_at = datetime.now(UTC)

    @classmethod
    def create(cls, user_id: UserId, card_id: CardId, is_known: bool) -> "CardProgress":
        """Progress for a card answered for the first time."""
        return cls(
            id=CardProgressId.generate(),
            user_id=user_id,
            card_id=card_id,
            is_known=is_known,
            updated_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls,
        id: CardProgressId,
        user_id: UserId,
        card_id: CardId,
        is_known: bool,
        updated_at: datetime,
    ) -> "CardProgress":
        """Reconstitute progress from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            card_id=card_id,
            is_known=is_known,
            updated_at=updated_at,
        )
