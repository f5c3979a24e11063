"""
Model enums.
"""
from enum import Enum


class CardStatus(str, Enum):
    """Review status stored on a card."""
    NEW = "new"
    EASY = "easy"
    GOOD = "good"
    AGAIN = "again"


class Outcome(str, Enum):
    """A learner's judgment on the card under review."""
    EASY = "easy"
    GOOD = "good"
    AGAIN = "again"

    @property
    def card_status(self) -> CardStatus:
        return CardStatus(self.value)
