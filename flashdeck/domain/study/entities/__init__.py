from .card_progress import CardAnswer, CardProgress
from .study_session import StudySession

__all__ = ["CardAnswer", "CardProgress", "StudySession"]
