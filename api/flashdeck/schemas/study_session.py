"""
Study session schemas - the persisted form of a study pass.
"""
from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from datetime import datetime
from flashdeck.models.enums import CardStatus


class CardSnapshot(BaseModel):
    """Copy of a card's data as held in a study queue."""
    id: int
    deck_id: int
    front: str
    back: str
    status: CardStatus = CardStatus.NEW
    last_reviewed_at: Optional[datetime] = None
    
    class Config:
        from_attributes = True


class SessionStats(BaseModel):
    """Outcome counters for one study pass."""
    easy: int = Field(0, ge=0)
    good: int = Field(0, ge=0)
    again: int = Field(0, ge=0)


class SessionStateData(BaseModel):
    """Queue and counters of a study pass. Missing keys fall back to an empty session."""
    queue: List[CardSnapshot] = Field(default_factory=list)
    stats: SessionStats = Field(default_factory=SessionStats)
    requeues: Dict[int, int] = Field(default_factory=dict)  # card id -> times requeued


class StudySessionResponse(BaseModel):
    """Stored study session for a deck."""
    id: int
    deck_id: int
    state: SessionStateData
    updated_at: datetime
    
    class Config:
        from_attributes = True


class SaveSessionRequest(BaseModel):
    """Request schema for upserting a deck's stored session."""
    state: SessionStateData
