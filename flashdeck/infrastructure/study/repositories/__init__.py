from .card_progress_repository import CardProgressRepository
from .progress_query_repository import ProgressQueryRepository
from .study_session_repository import StudySessionRepository

__all__ = ["CardProgressRepository", "ProgressQueryRepository", "StudySessionRepository"]
