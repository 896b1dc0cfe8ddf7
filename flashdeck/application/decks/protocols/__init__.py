from .deck_repository import DeckRepositoryProtocol, DeckSort

__all__ = ["DeckRepositoryProtocol", "DeckSort"]
