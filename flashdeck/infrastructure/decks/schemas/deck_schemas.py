"""Pydantic schemas for Deck API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field


class CardInput(BaseModel):
    """One term/definition pair in a create or replace request."""

    term: str = Field(..., description="Front of the card")
    definition: str = Field(..., description="Back of the card")


class DeckWriteRequest(BaseModel):
    """Schema for creating a deck or replacing its contents."""

    title: str = Field(..., description="Deck title")
    cards: list[CardInput] = Field(..., description="Complete card set of the deck")


class Card(BaseModel):
    """Schema for Card response."""

    id: int
    deck_id: int
    term: str
    definition: str
    created_at: datetime | None = None


class Deck(BaseModel):
    """Schema for Deck response with its live card count."""

    id: int
    user_id: int
    title: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    card_count: int = 0


class DeckListResponse(BaseModel):
    """Schema for list of decks response."""

    decks: list[Deck] = Field(..., description="Decks of the current user")


class DeckCreateResponse(BaseModel):
    """Schema for deck creation response."""

    message: str = Field(..., description="Response message")
    deck: Deck = Field(..., description="Created deck")


class DeckDetailResponse(BaseModel):
    """Schema for a deck with all of its cards."""

    deck: Deck
    cards: list[Card] = Field(..., description="Cards ordered by id")
