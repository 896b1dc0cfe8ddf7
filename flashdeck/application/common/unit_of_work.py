"""
Unit of Work interface.

The Unit of Work groups the writes of one use case into a single
transaction.

Example:
    class DeckUseCase:
        def create_deck(self, ...) -> Deck:
            with self.uow:
                deck = self.deck_repository.save(Deck.create(...))
                self.uow.commit()
                return deck
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    The Unit of Work:
    - Manages database transactions
    - Ensures atomicity of operations
    - Can be used as a context manager

    Infrastructure layer provides the concrete implementation
    (SqlAlchemyUnitOfWork).
    """

    @abstractmethod
    def commit(self) -> None:
        """Commit the current transaction."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Rollback the current transaction."""
        raise NotImplementedError

    def __enter__(self) -> Self:
        """Enter the unit of work context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred, rollback. Otherwise, do nothing
        (commit must be called explicitly).
        """
        if exc_type is not None:
            self.rollback()
