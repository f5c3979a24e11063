"""
Models module - re-exports all table models.

Allows imports like:
    from flashdeck.models.models import Deck
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
