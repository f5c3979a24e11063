"""
AI explanation schemas.
"""
from pydantic import BaseModel, Field
from enum import Enum


class ExplanationKind(str, Enum):
    """Which prompt template to use."""
    ANALYZE = "analyze"
    MEMORY = "memory"


class ExplanationRequest(BaseModel):
    """Request an explanation for a card's content."""
    front: str = Field(..., min_length=1)
    back: str = Field(..., min_length=1)
    kind: ExplanationKind = ExplanationKind.ANALYZE


class ExplanationResponse(BaseModel):
    """Generated explanation text."""
    kind: ExplanationKind
    text: str
    model: str
