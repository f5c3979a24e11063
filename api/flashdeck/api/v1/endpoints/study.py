"""
Live study session endpoints.

The client asks /pending whether a stored session exists, lets the learner
decide whether to resume, starts the pass, then posts one outcome per card.
"""
from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session
import logging

from flashdeck.core.database import get_session
from flashdeck.schemas.study import (
    OutcomeRequest,
    PendingSessionResponse,
    StartStudyRequest,
    StudyStateResponse
)
from flashdeck.services.deck_service import get_deck_or_raise, mark_deck_studied
from flashdeck.services.study_registry import StudyRegistry, describe_engine, get_study_registry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks/{deck_id}/study", tags=["study"])


@router.get("/pending", response_model=PendingSessionResponse)
async def get_pending_session(
    deck_id: int,
    session: Session = Depends(get_session),
    registry: StudyRegistry = Depends(get_study_registry)
):
    """Report whether a stored session can be offered for resumption."""
    get_deck_or_raise(session, deck_id)
    stored = registry.pending_session(deck_id)
    return PendingSessionResponse(has_pending=stored is not None, session=stored)


@router.post("", response_model=StudyStateResponse)
async def start_study(
    deck_id: int,
    request: StartStudyRequest,
    session: Session = Depends(get_session),
    registry: StudyRegistry = Depends(get_study_registry)
):
    """
    Start a study pass on a deck.

    With `resume`, the stored session's queue and stats are adopted as they
    are. Otherwise the stored session (if any) is discarded and all of the
    deck's cards are shuffled into a new queue. An empty deck finishes
    immediately.
    """
    mark_deck_studied(session, deck_id)
    engine = registry.start(deck_id, resume=request.resume)
    logger.info(f"Started study session for deck {deck_id} (resume={request.resume})")
    return describe_engine(engine)


@router.get("", response_model=StudyStateResponse)
async def get_study_state(
    deck_id: int,
    registry: StudyRegistry = Depends(get_study_registry)
):
    """Get the live study pass of a deck."""
    return describe_engine(registry.get(deck_id))


@router.post("/outcome", response_model=StudyStateResponse)
async def apply_outcome(
    deck_id: int,
    request: OutcomeRequest,
    registry: StudyRegistry = Depends(get_study_registry)
):
    """
    Apply the learner's outcome to the card at the head of the queue.

    'easy' and 'good' remove the card, 'again' puts it back just past the
    middle of the remaining queue. Posting for any card other than the head
    card is rejected.
    """
    engine = registry.apply_outcome(deck_id, request.outcome, request.card_id)
    return describe_engine(engine)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def stop_study(
    deck_id: int,
    registry: StudyRegistry = Depends(get_study_registry)
):
    """Leave the live study pass, keeping its latest snapshot for resumption."""
    registry.stop(deck_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
