from typing import Protocol

from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.study.services.progress_aggregator import DeckProgress


class ProgressQueryRepositoryProtocol(Protocol):
    def deck_progress(self, user_id: UserId) -> list[DeckProgress]: ...
