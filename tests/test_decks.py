"""Tests for decks API endpoints."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from flashdeck import models
from flashdeck.domain.decks.entities.card import Card
from flashdeck.infrastructure.decks.mappers.deck_mapper import DeckMapper
from flashdeck.main import app


def _create_deck(
    client: TestClient,
    headers: dict[str, str],
    title: str,
    cards: list[tuple[str, str]],
) -> dict:
    response = client.post(
        "/api/decks",
        json={
            "title": title,
            "cards": [{"term": term, "definition": definition} for term, definition in cards],
        },
        headers=headers,
    )
    assert response.status_code == status.HTTP_201_CREATED, response.text
    return response.json()["deck"]


def _fail_on_second_card(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make building the second card row of a write blow up."""
    card_to_orm = DeckMapper.card_to_orm
    built: list[Card] = []

    def failing_card_to_orm(self: DeckMapper, card: Card) -> models.Card:
        built.append(card)
        if len(built) == 2:
            raise RuntimeError("simulated failure while writing cards")
        return card_to_orm(self, card)

    monkeypatch.setattr(DeckMapper, "card_to_orm", failing_card_to_orm)


class TestListDecks:
    """Test suite for GET /decks endpoint."""

    def test_list_empty(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test a new user has no decks."""
        response = client.get("/api/decks", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"decks": []}

    def test_list_most_recently_updated_first(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        """Test the default order is updated_at descending with live card counts."""
        first = _create_deck(client, auth_headers, "First", [("a", "1")])
        second = _create_deck(client, auth_headers, "Second", [("a", "1"), ("b", "2")])

        decks = client.get("/api/decks", headers=auth_headers).json()["decks"]

        assert [deck["id"] for deck in decks] == [second["id"], first["id"]]
        assert [deck["card_count"] for deck in decks] == [2, 1]

        # Replacing the older deck moves it to the top
        client.put(
            f"/api/decks/{first['id']}",
            json={"title": "First", "cards": [{"term": "x", "definition": "y"}]},
            headers=auth_headers,
        )
        decks = client.get("/api/decks", headers=auth_headers).json()["decks"]
        assert [deck["id"] for deck in decks] == [first["id"], second["id"]]

    def test_list_sorted_by_title(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test sort=title orders alphabetically ignoring case."""
        _create_deck(client, auth_headers, "banana", [("a", "1")])
        _create_deck(client, auth_headers, "Apple", [("a", "1")])
        _create_deck(client, auth_headers, "cherry", [("a", "1")])

        response = client.get("/api/decks", params={"sort": "title"}, headers=auth_headers)

        assert [deck["title"] for deck in response.json()["decks"]] == [
            "Apple",
            "banana",
            "cherry",
        ]

    def test_list_sorted_by_card_count(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        """Test sort=cards puts the largest deck first."""
        _create_deck(client, auth_headers, "Small", [("a", "1")])
        _create_deck(client, auth_headers, "Large", [("a", "1"), ("b", "2"), ("c", "3")])
        _create_deck(client, auth_headers, "Medium", [("a", "1"), ("b", "2")])

        response = client.get("/api/decks", params={"sort": "cards"}, headers=auth_headers)

        assert [deck["title"] for deck in response.json()["decks"]] == [
            "Large",
            "Medium",
            "Small",
        ]

    def test_list_invalid_sort(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test an unknown sort is rejected."""
        response = client.get("/api/decks", params={"sort": "random"}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_list_excludes_other_users_decks(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        test_deck: models.Deck,
        other_deck: models.Deck,
    ) -> None:
        """Test users only see their own decks."""
        decks = client.get("/api/decks", headers=auth_headers).json()["decks"]

        assert [deck["id"] for deck in decks] == [test_deck.id]


class TestCreateDeck:
    """Test suite for POST /decks endpoint."""

    def test_create_and_get_round_trip(
        self, client: TestClient, auth_headers: dict[str, str], test_user: models.User
    ) -> None:
        """Test a created deck reads back with the same title and card."""
        deck = _create_deck(client, auth_headers, "日本語 Vocab", [("猫", "cat (ねこ)")])

        assert deck["title"] == "日本語 Vocab"
        assert deck["user_id"] == test_user.id
        assert deck["card_count"] == 1

        response = client.get(f"/api/decks/{deck['id']}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["deck"]["title"] == "日本語 Vocab"
        assert len(data["cards"]) == 1
        assert data["cards"][0]["term"] == "猫"
        assert data["cards"][0]["definition"] == "cat (ねこ)"
        assert data["cards"][0]["deck_id"] == deck["id"]

    def test_create_trims_text(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test title, term and definition are stored trimmed."""
        deck = _create_deck(client, auth_headers, "  Padded  ", [("  term ", " definition  ")])

        cards = client.get(f"/api/decks/{deck['id']}", headers=auth_headers).json()["cards"]

        assert deck["title"] == "Padded"
        assert cards[0]["term"] == "term"
        assert cards[0]["definition"] == "definition"

    def test_create_empty_title(
        self, client: TestClient, db_session: Session, auth_headers: dict[str, str]
    ) -> None:
        """Test a blank title is rejected and nothing is stored."""
        response = client.post(
            "/api/decks",
            json={"title": "   ", "cards": [{"term": "a", "definition": "b"}]},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert db_session.execute(select(func.count(models.Deck.id))).scalar_one() == 0

    def test_create_without_cards(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test a deck needs at least one card."""
        response = client.post(
            "/api/decks", json={"title": "Empty", "cards": []}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_with_blank_definition(
        self, client: TestClient, db_session: Session, auth_headers: dict[str, str]
    ) -> None:
        """Test one invalid card rejects the whole deck."""
        response = client.post(
            "/api/decks",
            json={
                "title": "Partly valid",
                "cards": [{"term": "a", "definition": "b"}, {"term": "c", "definition": "  "}],
            },
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert db_session.execute(select(func.count(models.Card.id))).scalar_one() == 0

    def test_create_missing_title(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test a body without title fails validation."""
        response = client.post(
            "/api/decks", json={"cards": [{"term": "a", "definition": "b"}]}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_failed_create_leaves_nothing_behind(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test an error while building the cards creates neither deck nor cards."""
        _fail_on_second_card(monkeypatch)

        response = TestClient(app, raise_server_exceptions=False).post(
            "/api/decks",
            json={
                "title": "Numbers",
                "cards": [
                    {"term": "uno", "definition": "one"},
                    {"term": "dos", "definition": "two"},
                ],
            },
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert client.get("/api/decks", headers=auth_headers).json() == {"decks": []}
        assert db_session.execute(select(func.count(models.Card.id))).scalar_one() == 0


class TestGetDeck:
    """Test suite for GET /decks/:id endpoint."""

    def test_get_deck_cards_ordered_by_id(
        self, client: TestClient, auth_headers: dict[str, str], test_deck: models.Deck
    ) -> None:
        """Test cards come back in insertion order."""
        response = client.get(f"/api/decks/{test_deck.id}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["deck"]["card_count"] == 2
        assert [card["term"] for card in data["cards"]] == ["hola", "adiós"]
        ids = [card["id"] for card in data["cards"]]
        assert ids == sorted(ids)

    def test_get_other_users_deck(
        self, client: TestClient, auth_headers: dict[str, str], other_deck: models.Deck
    ) -> None:
        """Test another user's deck looks exactly like a missing one."""
        response = client.get(f"/api/decks/{other_deck.id}", headers=auth_headers)
        missing = client.get("/api/decks/99999", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert missing.status_code == status.HTTP_404_NOT_FOUND
        assert "error" in response.json()

    def test_get_non_positive_id(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test ids that cannot exist are not found rather than server errors."""
        response = client.get("/api/decks/0", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestReplaceDeck:
    """Test suite for PUT /decks/:id endpoint."""

    def test_replace_with_fewer_cards(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        test_deck: models.Deck,
    ) -> None:
        """Test replacing leaves exactly the new card set."""
        deck_id = test_deck.id
        old_card_ids = [card.id for card in test_deck.cards]

        response = client.put(
            f"/api/decks/{deck_id}",
            json={"title": "Renamed", "cards": [{"term": "gato", "definition": "cat"}]},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"]

        data = client.get(f"/api/decks/{deck_id}", headers=auth_headers).json()
        assert data["deck"]["title"] == "Renamed"
        assert [(card["term"], card["definition"]) for card in data["cards"]] == [
            ("gato", "cat")
        ]
        stored = db_session.execute(
            select(models.Card.id).where(models.Card.deck_id == deck_id)
        ).scalars().all()
        assert len(stored) == 1
        assert set(stored).isdisjoint(old_card_ids)

    def test_replace_discards_progress(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        test_deck: models.Deck,
    ) -> None:
        """Test progress on replaced cards is deleted with them."""
        deck_id = test_deck.id
        card_id = test_deck.cards[0].id
        client.post(
            "/api/progress",
            json={"deckId": deck_id, "results": [{"cardId": card_id, "isKnown": True}]},
            headers=auth_headers,
        )

        client.put(
            f"/api/decks/{deck_id}",
            json={"title": "Fresh", "cards": [{"term": "new", "definition": "card"}]},
            headers=auth_headers,
        )

        progress_rows = db_session.execute(select(func.count(models.CardProgress.id))).scalar_one()
        assert progress_rows == 0

    def test_replace_other_users_deck(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        other_deck: models.Deck,
    ) -> None:
        """Test a deck owned by someone else cannot be replaced."""
        deck_id = other_deck.id

        response = client.put(
            f"/api/decks/{deck_id}",
            json={"title": "Hijacked", "cards": [{"term": "a", "definition": "b"}]},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        db_session.expire_all()
        assert db_session.get(models.Deck, deck_id).title == "Private deck"

    def test_replace_with_empty_cards(
        self, client: TestClient, auth_headers: dict[str, str], test_deck: models.Deck
    ) -> None:
        """Test validation failures leave the deck untouched."""
        deck_id = test_deck.id

        response = client.put(
            f"/api/decks/{deck_id}", json={"title": "Nope", "cards": []}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = client.get(f"/api/decks/{deck_id}", headers=auth_headers).json()
        assert data["deck"]["title"] == "Spanish basics"
        assert len(data["cards"]) == 2

    def test_old_card_ids_are_not_reused(
        self, client: TestClient, auth_headers: dict[str, str], test_deck: models.Deck
    ) -> None:
        """Test answers for replaced cards never land on the new cards."""
        deck_id = test_deck.id
        old_card_ids = [card.id for card in test_deck.cards]

        client.put(
            f"/api/decks/{deck_id}",
            json={"title": "Spanish basics", "cards": [{"term": "gato", "definition": "cat"}]},
            headers=auth_headers,
        )
        new_card_ids = [
            card["id"]
            for card in client.get(f"/api/decks/{deck_id}", headers=auth_headers).json()["cards"]
        ]

        assert set(new_card_ids).isdisjoint(old_card_ids)
        response = client.post(
            "/api/progress",
            json={
                "deckId": deck_id,
                "results": [{"cardId": card_id, "isKnown": True} for card_id in old_card_ids],
            },
            headers=auth_headers,
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["details"]["cardIds"] == sorted(old_card_ids)

    def test_failed_replace_keeps_previous_contents(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        test_deck: models.Deck,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test an error part-way through a replace leaves title and cards untouched."""
        deck_id = test_deck.id
        _fail_on_second_card(monkeypatch)

        response = TestClient(app, raise_server_exceptions=False).put(
            f"/api/decks/{deck_id}",
            json={
                "title": "Half written",
                "cards": [
                    {"term": "uno", "definition": "one"},
                    {"term": "dos", "definition": "two"},
                ],
            },
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        data = client.get(f"/api/decks/{deck_id}", headers=auth_headers).json()
        assert data["deck"]["title"] == "Spanish basics"
        assert [card["term"] for card in data["cards"]] == ["hola", "adiós"]


class TestDeleteDeck:
    """Test suite for DELETE /decks/:id endpoint."""

    def test_delete_deck(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        test_deck: models.Deck,
    ) -> None:
        """Test a deleted deck disappears with its cards, progress and sessions."""
        deck_id = test_deck.id
        card_id = test_deck.cards[0].id
        client.post(
            "/api/progress",
            json={"deckId": deck_id, "results": [{"cardId": card_id, "isKnown": False}]},
            headers=auth_headers,
        )

        response = client.delete(f"/api/decks/{deck_id}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert client.get("/api/decks", headers=auth_headers).json() == {"decks": []}
        assert (
            client.get(f"/api/decks/{deck_id}", headers=auth_headers).status_code
            == status.HTTP_404_NOT_FOUND
        )
        for model in (models.Card, models.CardProgress, models.StudySession):
            assert db_session.execute(select(func.count(model.id))).scalar_one() == 0

    def test_delete_other_users_deck(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_auth_headers: dict[str, str],
        other_deck: models.Deck,
    ) -> None:
        """Test a deck owned by someone else cannot be deleted."""
        deck_id = other_deck.id

        response = client.delete(f"/api/decks/{deck_id}", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        owner_view = client.get(f"/api/decks/{deck_id}", headers=other_auth_headers)
        assert owner_view.status_code == status.HTTP_200_OK

    def test_delete_twice(
        self, client: TestClient, auth_headers: dict[str, str], test_deck: models.Deck
    ) -> None:
        """Test deleting an already deleted deck is a 404."""
        deck_id = test_deck.id

        assert client.delete(f"/api/decks/{deck_id}", headers=auth_headers).status_code == 200
        assert client.delete(f"/api/decks/{deck_id}", headers=auth_headers).status_code == 404
