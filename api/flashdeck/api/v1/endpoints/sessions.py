"""
Stored study session endpoints.
"""
from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session
from typing import Optional
from flashdeck.core.database import get_session
from flashdeck.schemas.study_session import SaveSessionRequest, StudySessionResponse
from flashdeck.services import session_service
from flashdeck.services.deck_service import get_deck_or_raise

router = APIRouter(prefix="/decks/{deck_id}/session", tags=["sessions"])


@router.get("", response_model=Optional[StudySessionResponse])
async def get_stored_session(deck_id: int, session: Session = Depends(get_session)):
    """Get the stored session of a deck, or null when there is none."""
    stored = session_service.get_stored_session(session, deck_id)
    if not stored:
        return None
    return session_service.to_session_response(stored)


@router.put("", response_model=StudySessionResponse)
async def save_stored_session(
    deck_id: int,
    request: SaveSessionRequest,
    session: Session = Depends(get_session)
):
    """Insert or overwrite the stored session of a deck."""
    get_deck_or_raise(session, deck_id)
    stored = session_service.save_session(session, deck_id, request.state)
    return session_service.to_session_response(stored)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_stored_session(deck_id: int, session: Session = Depends(get_session)):
    """Delete the stored session of a deck. Succeeds when there is none."""
    session_service.delete_session(session, deck_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
