"""
Card model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, TYPE_CHECKING
from datetime import datetime
from sqlalchemy import Column, DateTime, String as SAString
from flashdeck.models.enums import CardStatus

if TYPE_CHECKING:
    from flashdeck.models.deck import Deck


class Card(SQLModel, table=True):
    """Card table - a front/back pair with its latest review status."""
    __tablename__ = "card"
    
    id: Optional[int] = Field(default=None, primary_key=True)
    deck_id: int = Field(foreign_key="deck.id", index=True)
    front: str
    back: str
    status: CardStatus = Field(
        default=CardStatus.NEW,
        sa_column=Column(SAString, nullable=False, default=CardStatus.NEW.value)
    )  # 'new', 'easy', 'good' or 'again' - stored as string, converted to enum
    last_reviewed_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    
    # Relationships
    deck: "Deck" = Relationship(back_populates="cards")
