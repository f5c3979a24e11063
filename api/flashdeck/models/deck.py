"""
Deck model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
from sqlalchemy import DateTime
from flashdeck.utils.time_utils import utc_now

if TYPE_CHECKING:
    from flashdeck.models.card import Card


class Deck(SQLModel, table=True):
    """Deck table - a named collection of cards."""
    __tablename__ = "deck"
    
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    last_studied_at: Optional[datetime] = Field(
        default=None,
        sa_type=DateTime(timezone=True)
    )  # Stamped when a study session starts
    
    # Relationships
    cards: List["Card"] = Relationship(back_populates="deck")
