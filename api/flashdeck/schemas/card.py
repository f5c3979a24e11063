"""
Card schemas.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from flashdeck.models.enums import CardStatus


class CardResponse(BaseModel):
    """Card response schema."""
    id: int
    deck_id: int
    front: str
    back: str
    status: CardStatus = CardStatus.NEW
    last_reviewed_at: Optional[datetime] = None
    
    class Config:
        from_attributes = True


class CreateCardRequest(BaseModel):
    """Request schema for creating a card. New cards always start as 'new'."""
    front: str = Field(..., min_length=1)
    back: str = Field(..., min_length=1)


class UpdateCardRequest(BaseModel):
    """Request schema for editing a card."""
    front: Optional[str] = Field(None, min_length=1)
    back: Optional[str] = Field(None, min_length=1)
    status: Optional[CardStatus] = None


class CardsResponse(BaseModel):
    """Response schema for cards list."""
    cards: List[CardResponse]


class ImportCardsRequest(BaseModel):
    """Raw text with one card per line, front and back separated by '|', a tab or ','."""
    text: str
    
    class Config:
        json_schema_extra = {
            "example": {
                "text": "hola | hello\nadiós | goodbye"
            }
        }


class ImportCardsResponse(BaseModel):
    """Number of cards created by an import."""
    count: int
