"""
AI explanation endpoint.
"""
from fastapi import APIRouter, Depends
from flashdeck.core.config import Preferences, get_preferences
from flashdeck.schemas.explanation import ExplanationRequest, ExplanationResponse
from flashdeck.services.explanation_service import build_explanation_prompt, generate_explanation

router = APIRouter(prefix="/explanations", tags=["explanations"])


@router.post("", response_model=ExplanationResponse)
def create_explanation(
    request: ExplanationRequest,
    preferences: Preferences = Depends(get_preferences)
):
    """
    Generate an explanation or memory aid for a card's content.

    Declared sync so the provider call runs in the threadpool.
    """
    prompt = build_explanation_prompt(request.kind, request.front, request.back, preferences)
    text = generate_explanation(prompt, preferences)
    return ExplanationResponse(kind=request.kind, text=text, model=preferences.ai_model)
