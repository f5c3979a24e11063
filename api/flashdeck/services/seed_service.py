"""
Demo data for an empty database.
"""
import logging
from sqlmodel import Session, select

from flashdeck.models.models import Deck, Card, CardStatus

logger = logging.getLogger(__name__)


DEMO_DECKS = [
    {
        "name": "JavaScript Basics",
        "description": "Core JS concepts",
        "cards": [
            ("What is a closure?", "A function bundled together with references to its surrounding lexical environment.", CardStatus.NEW),
            ("What is hoisting?", "Moving variable and function declarations to the top of their scope before code runs.", CardStatus.NEW),
            ("const vs let", "Both are block-scoped; const cannot be reassigned, let can.", CardStatus.EASY),
        ],
    },
    {
        "name": "English Vocabulary",
        "description": "Everyday words",
        "cards": [
            ("Awesome", "Extremely impressive; inspiring awe", CardStatus.EASY),
            ("Fascinating", "Extremely interesting", CardStatus.NEW),
        ],
    },
]


def seed_demo_decks(session: Session) -> int:
    """
    Create the demo decks if the database has no decks yet.

    Returns:
        Number of decks created (0 when decks already exist)
    """
    if session.exec(select(Deck)).first():
        return 0

    for deck_data in DEMO_DECKS:
        deck = Deck(name=deck_data["name"], description=deck_data["description"])
        session.add(deck)
        session.flush()
        for front, back, status in deck_data["cards"]:
            session.add(Card(deck_id=deck.id, front=front, back=back, status=status.value))

    session.commit()
    logger.info(f"Seeded {len(DEMO_DECKS)} demo deck(s)")
    return len(DEMO_DECKS)
