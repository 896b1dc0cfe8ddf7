from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""


@dataclass(frozen=True)
class DeckId(EntityId):
    """Strongly-typed deck identifier."""


@dataclass(frozen=True)
class CardId(EntityId):
    """Strongly-typed card identifier."""


@dataclass(frozen=True)
class CardProgressId(EntityId):
    """Strongly-typed card progress identifier."""


@dataclass(frozen=True)
class StudySessionId(EntityId):
    """Strongly-typed study session identifier."""
