from .card_progress_repository import CardProgressRepositoryProtocol
from .progress_query_repository import ProgressQueryRepositoryProtocol
from .study_session_repository import StudySessionRepositoryProtocol

__all__ = [
    "CardProgressRepositoryProtocol",
    "ProgressQueryRepositoryProtocol",
    "StudySessionRepositoryProtocol",
]
