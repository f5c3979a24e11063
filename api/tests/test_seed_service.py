"""Tests for demo data seeding."""

from __future__ import annotations

from sqlmodel import select

from flashdeck.models.models import Card, Deck
from flashdeck.services.seed_service import DEMO_DECKS, seed_demo_decks


def test_seeds_empty_database(db_session):
    assert seed_demo_decks(db_session) == len(DEMO_DECKS)

    decks = db_session.exec(select(Deck).order_by(Deck.id)).all()
    assert [deck.name for deck in decks] == [data["name"] for data in DEMO_DECKS]
    cards = db_session.exec(select(Card)).all()
    assert len(cards) == sum(len(data["cards"]) for data in DEMO_DECKS)


def test_leaves_existing_decks_alone(db_session):
    db_session.add(Deck(name="Mine"))
    db_session.commit()

    assert seed_demo_decks(db_session) == 0
    assert len(db_session.exec(select(Deck)).all()) == 1
