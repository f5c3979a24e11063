"""
Deck service for business logic related to deck operations.
"""
import logging
from sqlmodel import Session, select
from sqlalchemy import func
from typing import List, Optional

from flashdeck.core.exceptions import NotFoundError
from flashdeck.models.models import Deck, Card, StudySession, CardStatus
from flashdeck.schemas.deck import DeckResponse
from flashdeck.utils.time_utils import utc_now

logger = logging.getLogger(__name__)


def get_deck_or_raise(session: Session, deck_id: int) -> Deck:
    """
    Fetch a deck by ID.

    Raises:
        NotFoundError: If the deck does not exist
    """
    deck = session.get(Deck, deck_id)
    if not deck:
        raise NotFoundError(f"Deck with id {deck_id} not found")
    return deck


def build_deck_response(session: Session, deck: Deck) -> DeckResponse:
    """
    Build a deck response with stats recomputed from the deck's current cards.

    mastered_count counts cards with status 'easy' and can never exceed card_count.
    """
    card_count = session.exec(
        select(func.count()).select_from(Card).where(Card.deck_id == deck.id)
    ).one()
    mastered_count = session.exec(
        select(func.count()).select_from(Card).where(
            Card.deck_id == deck.id,
            Card.status == CardStatus.EASY.value
        )
    ).one()
    return DeckResponse(
        id=deck.id,
        name=deck.name,
        description=deck.description,
        created_at=deck.created_at,
        last_studied_at=deck.last_studied_at,
        card_count=card_count,
        mastered_count=mastered_count,
    )


def list_decks(session: Session) -> List[DeckResponse]:
    """All decks with stats, oldest first."""
    decks = session.exec(select(Deck).order_by(Deck.id)).all()
    return [build_deck_response(session, deck) for deck in decks]


def create_deck(session: Session, name: str, description: Optional[str] = None) -> Deck:
    deck = Deck(name=name.strip(), description=description)
    session.add(deck)
    session.commit()
    session.refresh(deck)
    logger.info(f"Created deck {deck.id} ({deck.name!r})")
    return deck


def update_deck(
    session: Session,
    deck_id: int,
    name: Optional[str] = None,
    description: Optional[str] = None
) -> Deck:
    """Update the given fields of a deck. A blank description clears it."""
    deck = get_deck_or_raise(session, deck_id)

    if name is not None:
        deck.name = name.strip()
    if description is not None:
        deck.description = description if description.strip() else None

    session.add(deck)
    session.commit()
    session.refresh(deck)
    return deck


def mark_deck_studied(session: Session, deck_id: int) -> Deck:
    """Stamp the deck's last_studied_at with the current time."""
    deck = get_deck_or_raise(session, deck_id)
    deck.last_studied_at = utc_now()
    session.add(deck)
    session.commit()
    session.refresh(deck)
    return deck


def delete_deck_and_associated_resources(session: Session, deck_id: int) -> None:
    """
    Delete a deck and all its associated resources.

    This function deletes:
    - The deck's stored study session (if any)
    - All Cards in the deck
    - The Deck itself

    Args:
        session: Database session
        deck_id: The deck ID to delete

    Raises:
        NotFoundError: If deck not found
    """
    deck = get_deck_or_raise(session, deck_id)

    stored_sessions = session.exec(
        select(StudySession).where(StudySession.deck_id == deck_id)
    ).all()
    for stored in stored_sessions:
        session.delete(stored)

    cards = session.exec(select(Card).where(Card.deck_id == deck_id)).all()
    for card in cards:
        session.delete(card)

    session.delete(deck)
    session.commit()
    logger.info(f"Deleted deck {deck_id} with {len(cards)} card(s)")
