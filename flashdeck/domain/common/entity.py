"""
Base class for Entities.

Entities have an identity that persists while their state changes. Two
entities are equal when their ids are equal, whatever their attributes.

Example:
    @dataclass
    class Deck(Entity[DeckId]):
        id: DeckId
        title: str

        def rename(self, title: str) -> None:
            self.title = title
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Wrapping the integer primary key keeps a DeckId from being passed where
    a CardId is expected.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Placeholder id for entities not yet persisted; the database assigns the real one."""
        return cls(0)

    def is_persisted(self) -> bool:
        return self.value != 0


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
