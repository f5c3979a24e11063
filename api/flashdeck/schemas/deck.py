"""
Deck schemas.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class DeckResponse(BaseModel):
    """Deck response schema with stats derived from the deck's cards."""
    id: int
    name: str
    description: Optional[str] = None
    created_at: datetime
    last_studied_at: Optional[datetime] = None
    card_count: int = 0
    mastered_count: int = 0  # Cards with status 'easy'
    
    class Config:
        from_attributes = True


class CreateDeckRequest(BaseModel):
    """Request schema for creating a deck."""
    name: str = Field(..., min_length=1)
    description: Optional[str] = None


class UpdateDeckRequest(BaseModel):
    """Request schema for updating a deck. Omitted fields are left unchanged."""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None


class DecksResponse(BaseModel):
    """Response schema for decks list."""
    decks: List[DeckResponse]
