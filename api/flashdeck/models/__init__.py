"""
Models package - imports all models so SQLModel registers their tables.
"""
from flashdeck.models.enums import CardStatus, Outcome
from flashdeck.models.deck import Deck
from flashdeck.models.card import Card
from flashdeck.models.study_session import StudySession

__all__ = [
    'CardStatus',
    'Outcome',
    'Deck',
    'Card',
    'StudySession',
]
