from typing import Protocol

from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.study.entities.study_session import StudySession
from flashdeck.domain.study.services.progress_aggregator import RecentSession


class StudySessionRepositoryProtocol(Protocol):
    def save(self, session: StudySession) -> StudySession: ...

    def find_recent(self, user_id: UserId, limit: int) -> list[RecentSession]: ...
