from .deck_schemas import (
    Card,
    CardInput,
    Deck,
    DeckCreateResponse,
    DeckDetailResponse,
    DeckListResponse,
    DeckWriteRequest,
)

__all__ = [
    "Card",
    "CardInput",
    "Deck",
    "DeckCreateResponse",
    "DeckDetailResponse",
    "DeckListResponse",
    "DeckWriteRequest",
]
