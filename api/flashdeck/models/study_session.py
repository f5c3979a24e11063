"""
StudySession model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional, Dict, Any
from datetime import datetime
from sqlalchemy import Column, DateTime, JSON
from flashdeck.utils.time_utils import utc_now


class StudySession(SQLModel, table=True):
    """StudySession table - the saved queue and counters of an unfinished study pass."""
    __tablename__ = "study_session"
    
    id: Optional[int] = Field(default=None, primary_key=True)
    deck_id: int = Field(foreign_key="deck.id", unique=True, index=True)  # At most one per deck
    state: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
