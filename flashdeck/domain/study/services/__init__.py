from .progress_aggregator import (
    RECENT_SESSIONS_LIMIT,
    DeckProgress,
    ProgressAggregator,
    ProgressReport,
    RecentSession,
)

__all__ = [
    "RECENT_SESSIONS_LIMIT",
    "DeckProgress",
    "ProgressAggregator",
    "ProgressReport",
    "RecentSession",
]
