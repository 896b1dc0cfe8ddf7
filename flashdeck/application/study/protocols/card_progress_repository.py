from typing import Protocol

from flashdeck.domain.common.value_objects.ids import CardId, UserId
from flashdeck.domain.study.entities.card_progress import CardProgress


class CardProgressRepositoryProtocol(Protocol):
    def find_for_cards(
        self, user_id: UserId, card_ids: list[CardId]
    ) -> dict[CardId, CardProgress]: ...

    def save(self, progress: CardProgress) -> CardProgress: ...
