"""Route tests for card CRUD and bulk import."""

from __future__ import annotations

API = "/api/v1"


def _deck_id(client):
    return client.post(f"{API}/decks", json={"name": "Deck"}).json()["id"]


def test_create_card_starts_new(client):
    deck_id = _deck_id(client)

    response = client.post(f"{API}/decks/{deck_id}/cards", json={"front": " hola ", "back": "hello"})

    assert response.status_code == 201
    card = response.json()
    assert card["deck_id"] == deck_id
    assert card["front"] == "hola"
    assert card["status"] == "new"
    assert card["last_reviewed_at"] is None


def test_create_card_in_missing_deck_returns_404(client):
    response = client.post(f"{API}/decks/999/cards", json={"front": "a", "back": "b"})
    assert response.status_code == 404


def test_list_cards_in_creation_order(client):
    deck_id = _deck_id(client)
    for front in ("uno", "dos", "tres"):
        client.post(f"{API}/decks/{deck_id}/cards", json={"front": front, "back": "x"})

    response = client.get(f"{API}/decks/{deck_id}/cards")

    assert response.status_code == 200
    assert [card["front"] for card in response.json()["cards"]] == ["uno", "dos", "tres"]


def test_update_card_text_and_status(client):
    deck_id = _deck_id(client)
    card = client.post(f"{API}/decks/{deck_id}/cards", json={"front": "a", "back": "b"}).json()

    response = client.put(f"{API}/cards/{card['id']}", json={"back": "bee", "status": "again"})

    assert response.status_code == 200
    assert response.json()["front"] == "a"
    assert response.json()["back"] == "bee"
    assert response.json()["status"] == "again"


def test_update_card_rejects_unknown_status(client):
    deck_id = _deck_id(client)
    card = client.post(f"{API}/decks/{deck_id}/cards", json={"front": "a", "back": "b"}).json()

    response = client.put(f"{API}/cards/{card['id']}", json={"status": "mastered"})

    assert response.status_code == 422


def test_delete_card(client):
    deck_id = _deck_id(client)
    card = client.post(f"{API}/decks/{deck_id}/cards", json={"front": "a", "back": "b"}).json()

    assert client.delete(f"{API}/cards/{card['id']}").status_code == 204
    assert client.get(f"{API}/decks/{deck_id}/cards").json()["cards"] == []
    assert client.delete(f"{API}/cards/{card['id']}").status_code == 404


def test_import_cards_counts_parseable_lines(client):
    deck_id = _deck_id(client)
    text = "hola | hello\nadiós\tgoodbye\ngato, cat\n\nno separator here\n | missing front"

    response = client.post(f"{API}/decks/{deck_id}/cards/import", json={"text": text})

    assert response.status_code == 201
    assert response.json() == {"count": 3}
    cards = client.get(f"{API}/decks/{deck_id}/cards").json()["cards"]
    assert [(c["front"], c["back"], c["status"]) for c in cards] == [
        ("hola", "hello", "new"),
        ("adiós", "goodbye", "new"),
        ("gato", "cat", "new"),
    ]


def test_import_into_missing_deck_returns_404(client):
    response = client.post(f"{API}/decks/999/cards/import", json={"text": "a|b"})
    assert response.status_code == 404
