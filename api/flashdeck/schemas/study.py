"""
Live study session schemas.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from flashdeck.models.enums import Outcome
from flashdeck.schemas.study_session import CardSnapshot, SessionStats, StudySessionResponse


class StartStudyRequest(BaseModel):
    """Start a study pass, resuming the stored session when `resume` is true."""
    resume: bool = False


class OutcomeRequest(BaseModel):
    """The learner's judgment on the card at the head of the queue."""
    outcome: Outcome
    card_id: int = Field(..., description="Must match the card at the head of the queue")
    
    class Config:
        json_schema_extra = {
            "example": {
                "outcome": "again",
                "card_id": 12
            }
        }


class StudyStateResponse(BaseModel):
    """What the client renders for a live study pass."""
    deck_id: int
    state: str  # 'uninitialized', 'active' or 'finished'
    queue_length: int
    current_card: Optional[CardSnapshot] = None
    stats: SessionStats
    is_finished: bool
    warnings: List[str] = []


class PendingSessionResponse(BaseModel):
    """Whether a stored session can be offered for resumption."""
    has_pending: bool
    session: Optional[StudySessionResponse] = None
