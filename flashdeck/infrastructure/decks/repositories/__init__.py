from .deck_repository import DeckRepository

__all__ = ["DeckRepository"]
