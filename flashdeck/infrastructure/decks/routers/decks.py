"""API routes for deck management."""

import logging

from fastapi import APIRouter, Depends, Query, status

from flashdeck.application.decks.use_cases.deck_use_case import DeckUseCase
from flashdeck.core import container
from flashdeck.domain.decks.entities.card import Card as CardEntity
from flashdeck.domain.decks.entities.deck import Deck as DeckEntity
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.common.schemas import MessageResponse
from flashdeck.infrastructure.decks.schemas import (
    Card,
    Deck,
    DeckCreateResponse,
    DeckDetailResponse,
    DeckListResponse,
    DeckWriteRequest,
)
from flashdeck.infrastructure.identity.dependencies import CurrentUser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks", tags=["decks"])


def _deck_schema(deck: DeckEntity, card_count: int) -> Deck:
    return Deck(
        id=deck.id.value,
        user_id=deck.user_id.value,
        title=deck.title,
        created_at=deck.created_at,
        updated_at=deck.updated_at,
        card_count=card_count,
    )


def _card_schema(card: CardEntity) -> Card:
    return Card(
        id=card.id.value,
        deck_id=card.deck_id.value,
        term=card.term,
        definition=card.definition,
        created_at=card.created_at,
    )


@router.get("", response_model=DeckListResponse)
def list_decks(
    current_user: CurrentUser,
    sort: str | None = Query(None, description="updated (default), title or cards"),
    use_case: DeckUseCase = Depends(inject_use_case(container.deck_use_case)),
) -> DeckListResponse:
    """List the current user's decks, most recently updated first by default."""
    summaries = use_case.list_decks(current_user.id.value, sort)
    return DeckListResponse(
        decks=[_deck_schema(summary.deck, summary.card_count) for summary in summaries]
    )


@router.post("", response_model=DeckCreateResponse, status_code=status.HTTP_201_CREATED)
def create_deck(
    request: DeckWriteRequest,
    current_user: CurrentUser,
    use_case: DeckUseCase = Depends(inject_use_case(container.deck_use_case)),
) -> DeckCreateResponse:
    """
    Create a deck with its cards.

    Args:
        request: Title and at least one card
        use_case: DeckUseCase injected via dependency container

    Returns:
        The created deck
    """
    deck = use_case.create_deck(
        user_id=current_user.id.value,
        title=request.title,
        cards=[(card.term, card.definition) for card in request.cards],
    )
    return DeckCreateResponse(
        message="Deck created successfully",
        deck=_deck_schema(deck, len(deck.cards)),
    )


@router.get("/{deck_id}", response_model=DeckDetailResponse)
def get_deck(
    deck_id: int,
    current_user: CurrentUser,
    use_case: DeckUseCase = Depends(inject_use_case(container.deck_use_case)),
) -> DeckDetailResponse:
    """Get a deck and its cards."""
    deck = use_case.get_deck(current_user.id.value, deck_id)
    return DeckDetailResponse(
        deck=_deck_schema(deck, len(deck.cards)),
        cards=[_card_schema(card) for card in deck.cards],
    )


@router.put("/{deck_id}", response_model=MessageResponse)
def replace_deck(
    deck_id: int,
    request: DeckWriteRequest,
    current_user: CurrentUser,
    use_case: DeckUseCase = Depends(inject_use_case(container.deck_use_case)),
) -> MessageResponse:
    """
    Replace a deck's title and whole card set.

    Progress on the previous cards is discarded with them.
    """
    use_case.replace_deck(
        user_id=current_user.id.value,
        deck_id=deck_id,
        title=request.title,
        cards=[(card.term, card.definition) for card in request.cards],
    )
    return MessageResponse(message="Deck updated successfully")


@router.delete("/{deck_id}", response_model=MessageResponse)
def delete_deck(
    deck_id: int,
    current_user: CurrentUser,
    use_case: DeckUseCase = Depends(inject_use_case(container.deck_use_case)),
) -> MessageResponse:
    """Delete a deck with its cards, progress and study sessions."""
    use_case.delete_deck(current_user.id.value, deck_id)
    logger.debug(f"Deck {deck_id} deleted by user {current_user.id.value}")
    return MessageResponse(message="Deck deleted successfully")
