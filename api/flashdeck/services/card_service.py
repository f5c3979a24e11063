"""
Card service for card CRUD, status updates and bulk import.
"""
import logging
from sqlmodel import Session, select
from typing import List, Optional, Tuple

from flashdeck.core.exceptions import NotFoundError
from flashdeck.models.models import Card, CardStatus
from flashdeck.services.deck_service import get_deck_or_raise
from flashdeck.utils.text_utils import split_card_line
from flashdeck.utils.time_utils import utc_now

logger = logging.getLogger(__name__)


def list_deck_cards(session: Session, deck_id: int) -> List[Card]:
    """All cards of a deck in creation order."""
    return list(session.exec(
        select(Card).where(Card.deck_id == deck_id).order_by(Card.id)
    ).all())


def get_card_or_raise(session: Session, card_id: int) -> Card:
    card = session.get(Card, card_id)
    if not card:
        raise NotFoundError(f"Card with id {card_id} not found")
    return card


def create_card(session: Session, deck_id: int, front: str, back: str) -> Card:
    """Create a card in an existing deck. New cards always start as 'new'."""
    get_deck_or_raise(session, deck_id)
    card = Card(deck_id=deck_id, front=front.strip(), back=back.strip(), status=CardStatus.NEW.value)
    session.add(card)
    session.commit()
    session.refresh(card)
    return card


def update_card(
    session: Session,
    card_id: int,
    front: Optional[str] = None,
    back: Optional[str] = None,
    status: Optional[CardStatus] = None
) -> Card:
    """Direct edit of a card's text and/or status."""
    card = get_card_or_raise(session, card_id)

    if front is not None:
        card.front = front.strip()
    if back is not None:
        card.back = back.strip()
    if status is not None:
        card.status = CardStatus(status).value

    session.add(card)
    session.commit()
    session.refresh(card)
    return card


def update_card_status(session: Session, card_id: int, deck_id: int, status: CardStatus) -> Card:
    """
    Record a review outcome on a card and stamp last_reviewed_at.

    Raises:
        NotFoundError: If the card does not exist or belongs to another deck
    """
    card = session.get(Card, card_id)
    if not card or card.deck_id != deck_id:
        raise NotFoundError(f"Card with id {card_id} not found in deck {deck_id}")

    card.status = CardStatus(status).value
    card.last_reviewed_at = utc_now()
    session.add(card)
    session.commit()
    session.refresh(card)
    return card


def delete_card(session: Session, card_id: int) -> None:
    card = get_card_or_raise(session, card_id)
    deck_id = card.deck_id
    session.delete(card)
    session.commit()
    logger.info(f"Deleted card {card_id} from deck {deck_id}")


def parse_card_lines(raw_text: str) -> List[Tuple[str, str]]:
    """
    Parse bulk-import text into (front, back) pairs.

    Lines that do not yield a non-empty front and back are skipped.
    """
    pairs = []
    for line in raw_text.splitlines():
        parts = split_card_line(line)
        if len(parts) >= 2 and parts[0] and parts[1]:
            pairs.append((parts[0], parts[1]))
    return pairs


def import_cards(session: Session, deck_id: int, raw_text: str) -> int:
    """
    Create one 'new' card per parseable line of raw_text.

    Args:
        session: Database session
        deck_id: Deck receiving the cards
        raw_text: One card per line, front and back separated by '|', a tab or ','

    Returns:
        Number of cards created

    Raises:
        NotFoundError: If deck not found
    """
    get_deck_or_raise(session, deck_id)

    pairs = parse_card_lines(raw_text)
    for front, back in pairs:
        session.add(Card(deck_id=deck_id, front=front, back=back, status=CardStatus.NEW.value))

    if pairs:
        session.commit()
    logger.info(f"Imported {len(pairs)} card(s) into deck {deck_id}")
    return len(pairs)
