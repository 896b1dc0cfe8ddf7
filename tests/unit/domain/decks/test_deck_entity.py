"""Unit tests for the Deck and Card entities."""

from datetime import UTC, datetime

import pytest

from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import CardId, DeckId, UserId
from flashdeck.domain.decks.entities.card import Card
from flashdeck.domain.decks.entities.deck import MAX_TITLE_LENGTH, Deck

NOW = datetime(2026, 1, 1, tzinfo=UTC)


def _card(term: str = "term", definition: str = "definition") -> Card:
    return Card.create(term=term, definition=definition)


class TestCard:
    def test_create_trims_text(self) -> None:
        card = Card.create(term="  perro ", definition=" dog  ")

        assert card.term == "perro"
        assert card.definition == "dog"
        assert not card.id.is_persisted()

    @pytest.mark.parametrize(("term", "definition"), [("", "x"), ("x", "   "), ("\n", "\t")])
    def test_blank_text_is_rejected(self, term: str, definition: str) -> None:
        with pytest.raises(ValidationError):
            Card.create(term=term, definition=definition)

    def test_cards_with_same_id_are_equal(self) -> None:
        a = Card.create_with_id(CardId(7), DeckId(1), "a", "b", created_at=NOW)
        b = Card.create_with_id(CardId(7), DeckId(1), "c", "d", created_at=NOW)

        assert a == b


class TestDeck:
    def test_create(self) -> None:
        deck = Deck.create(UserId(1), "  Verbs  ", [_card(), _card("b", "c")])

        assert deck.title == "Verbs"
        assert len(deck.cards) == 2
        assert deck.user_id == UserId(1)

    def test_create_requires_title(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Deck.create(UserId(1), "   ", [_card()])

        assert exc_info.value.field == "title"

    def test_create_rejects_long_title(self) -> None:
        with pytest.raises(ValidationError):
            Deck.create(UserId(1), "x" * (MAX_TITLE_LENGTH + 1), [_card()])

    def test_create_requires_cards(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Deck.create(UserId(1), "Empty", [])

        assert exc_info.value.field == "cards"

    def test_replace_contents_swaps_everything(self) -> None:
        deck = Deck.create(UserId(1), "Old", [_card("a", "1"), _card("b", "2")])

        deck.replace_contents(" New ", [_card("c", "3")])

        assert deck.title == "New"
        assert [card.term for card in deck.cards] == ["c"]

    def test_replace_contents_validates_before_changing(self) -> None:
        deck = Deck.create(UserId(1), "Old", [_card()])

        with pytest.raises(ValidationError):
            deck.replace_contents("New", [])

        assert deck.title == "Old"
        assert len(deck.cards) == 1

    def test_card_ids(self) -> None:
        cards = [
            Card.create_with_id(CardId(3), DeckId(9), "a", "b", created_at=NOW),
            Card.create_with_id(CardId(5), DeckId(9), "c", "d", created_at=NOW),
        ]
        deck = Deck.create_with_id(
            DeckId(9), UserId(1), "Deck", created_at=NOW, updated_at=NOW, cards=cards
        )

        assert deck.card_ids() == {3, 5}
