from .progress_schemas import (
    CardResult,
    DeckProgress,
    ProgressResponse,
    RecentSession,
    SaveProgressRequest,
    SaveProgressResponse,
)

__all__ = [
    "CardResult",
    "DeckProgress",
    "ProgressResponse",
    "RecentSession",
    "SaveProgressRequest",
    "SaveProgressResponse",
]
