"""
Database-backed card and session stores used by study session engines.

Engine writes run on worker threads, so every call opens its own
short-lived database session instead of sharing a request's session.
"""
from sqlmodel import Session
from typing import List, Optional

from flashdeck.core.database import engine
from flashdeck.models.models import CardStatus
from flashdeck.schemas.study_session import CardSnapshot, SessionStateData, StudySessionResponse
from flashdeck.services import card_service, session_service


class DatabaseCardStore:
    """Card store over the relational database."""

    def __init__(self, bind=None):
        self.bind = bind or engine

    def list_cards(self, deck_id: int) -> List[CardSnapshot]:
        with Session(self.bind) as session:
            cards = card_service.list_deck_cards(session, deck_id)
            return [CardSnapshot.model_validate(card) for card in cards]

    def update_card_status(self, card_id: int, deck_id: int, status: CardStatus) -> CardSnapshot:
        with Session(self.bind) as session:
            card = card_service.update_card_status(session, card_id, deck_id, status)
            return CardSnapshot.model_validate(card)


class DatabaseSessionStore:
    """Session store over the relational database."""

    def __init__(self, bind=None):
        self.bind = bind or engine

    def get_session(self, deck_id: int) -> Optional[StudySessionResponse]:
        with Session(self.bind) as session:
            stored = session_service.get_stored_session(session, deck_id)
            return session_service.to_session_response(stored) if stored else None

    def save_session(self, deck_id: int, state: SessionStateData) -> StudySessionResponse:
        with Session(self.bind) as session:
            stored = session_service.save_session(session, deck_id, state)
            return session_service.to_session_response(stored)

    def delete_session(self, deck_id: int) -> None:
        with Session(self.bind) as session:
            session_service.delete_session(session, deck_id)
