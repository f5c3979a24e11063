"""
Stored study session operations. One row per deck at most.
"""
import logging
from sqlmodel import Session, select
from typing import Optional

from flashdeck.models.models import StudySession
from flashdeck.schemas.study_session import SessionStateData, StudySessionResponse
from flashdeck.utils.time_utils import utc_now

logger = logging.getLogger(__name__)


def get_stored_session(session: Session, deck_id: int) -> Optional[StudySession]:
    return session.exec(
        select(StudySession).where(StudySession.deck_id == deck_id)
    ).first()


def to_session_response(stored: StudySession) -> StudySessionResponse:
    """Parse a stored row; missing state keys fall back to an empty session."""
    return StudySessionResponse(
        id=stored.id,
        deck_id=stored.deck_id,
        state=SessionStateData.model_validate(stored.state or {}),
        updated_at=stored.updated_at,
    )


def save_session(session: Session, deck_id: int, state: SessionStateData) -> StudySession:
    """
    Insert or overwrite the stored session of a deck.

    Args:
        session: Database session
        deck_id: Deck the state belongs to
        state: Queue, stats and requeue counts to store

    Returns:
        The stored row
    """
    payload = state.model_dump(mode="json")
    stored = get_stored_session(session, deck_id)
    if stored:
        stored.state = payload
        stored.updated_at = utc_now()
    else:
        stored = StudySession(deck_id=deck_id, state=payload)

    session.add(stored)
    session.commit()
    session.refresh(stored)
    logger.debug(f"Saved study session for deck {deck_id} ({len(state.queue)} card(s) left)")
    return stored


def delete_session(session: Session, deck_id: int) -> None:
    """Delete the stored session of a deck. Deleting a missing session is a no-op."""
    stored = get_stored_session(session, deck_id)
    if stored:
        session.delete(stored)
        session.commit()
        logger.info(f"Deleted stored study session for deck {deck_id}")
