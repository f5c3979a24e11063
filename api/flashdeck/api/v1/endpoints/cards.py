"""
Cards endpoint.
"""
# pyright: reportAttributeAccessIssue=false
# pyright: reportCallIssue=false
# pyright: reportArgumentType=false
from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session
from flashdeck.core.database import get_session
from flashdeck.schemas.card import (
    CardResponse,
    CardsResponse,
    CreateCardRequest,
    UpdateCardRequest,
    ImportCardsRequest,
    ImportCardsResponse
)
from flashdeck.services import card_service
from flashdeck.services.deck_service import get_deck_or_raise

router = APIRouter(tags=["cards"])


@router.get("/decks/{deck_id}/cards", response_model=CardsResponse)
async def get_deck_cards(deck_id: int, session: Session = Depends(get_session)):
    """Get all cards of a deck in creation order."""
    get_deck_or_raise(session, deck_id)
    cards = card_service.list_deck_cards(session, deck_id)
    return CardsResponse(cards=[CardResponse.model_validate(card) for card in cards])


@router.post("/decks/{deck_id}/cards", response_model=CardResponse, status_code=status.HTTP_201_CREATED)
async def create_card(
    deck_id: int,
    request: CreateCardRequest,
    session: Session = Depends(get_session)
):
    """Add a card to a deck. The card starts with status 'new'."""
    card = card_service.create_card(session, deck_id, request.front, request.back)
    return CardResponse.model_validate(card)


@router.post("/decks/{deck_id}/cards/import", response_model=ImportCardsResponse, status_code=status.HTTP_201_CREATED)
async def import_cards(
    deck_id: int,
    request: ImportCardsRequest,
    session: Session = Depends(get_session)
):
    """
    Bulk-import cards from text, one card per line.

    Front and back are separated by '|', a tab or ',' (tried in that order).
    Lines without both a front and a back are skipped.
    """
    count = card_service.import_cards(session, deck_id, request.text)
    return ImportCardsResponse(count=count)


@router.put("/cards/{card_id}", response_model=CardResponse)
async def update_card(
    card_id: int,
    request: UpdateCardRequest,
    session: Session = Depends(get_session)
):
    """Edit a card's front, back and/or status."""
    card = card_service.update_card(
        session,
        card_id,
        front=request.front,
        back=request.back,
        status=request.status
    )
    return CardResponse.model_validate(card)


@router.delete("/cards/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_card(card_id: int, session: Session = Depends(get_session)):
    """Delete a card by ID."""
    card_service.delete_card(session, card_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
