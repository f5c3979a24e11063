"""
Decks endpoint.
"""
# pyright: reportAttributeAccessIssue=false
# pyright: reportCallIssue=false
# pyright: reportArgumentType=false
from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session
from flashdeck.core.database import get_session
from flashdeck.schemas.deck import (
    DeckResponse,
    CreateDeckRequest,
    UpdateDeckRequest,
    DecksResponse
)
from flashdeck.services.deck_service import (
    build_deck_response,
    create_deck,
    delete_deck_and_associated_resources,
    get_deck_or_raise,
    list_decks,
    update_deck,
)
from flashdeck.services.study_registry import StudyRegistry, get_study_registry

router = APIRouter(prefix="/decks", tags=["decks"])


@router.get("", response_model=DecksResponse)
async def get_decks(session: Session = Depends(get_session)):
    """Get all decks with their card and mastered counts."""
    return DecksResponse(decks=list_decks(session))


@router.get("/{deck_id}", response_model=DeckResponse)
async def get_deck(deck_id: int, session: Session = Depends(get_session)):
    """Get a deck by ID. Stats are recomputed from the deck's cards on every fetch."""
    deck = get_deck_or_raise(session, deck_id)
    return build_deck_response(session, deck)


@router.post("", response_model=DeckResponse, status_code=status.HTTP_201_CREATED)
async def create_new_deck(
    request: CreateDeckRequest,
    session: Session = Depends(get_session)
):
    """Create a new, empty deck."""
    deck = create_deck(session, request.name, request.description)
    return build_deck_response(session, deck)


@router.put("/{deck_id}", response_model=DeckResponse)
async def update_existing_deck(
    deck_id: int,
    request: UpdateDeckRequest,
    session: Session = Depends(get_session)
):
    """Update a deck by ID. Omitted fields are left unchanged."""
    deck = update_deck(session, deck_id, name=request.name, description=request.description)
    return build_deck_response(session, deck)


@router.delete("/{deck_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_deck(
    deck_id: int,
    session: Session = Depends(get_session),
    registry: StudyRegistry = Depends(get_study_registry)
):
    """Delete a deck with its cards, its stored session and any live study session."""
    get_deck_or_raise(session, deck_id)
    registry.discard(deck_id)
    delete_deck_and_associated_resources(session, deck_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
