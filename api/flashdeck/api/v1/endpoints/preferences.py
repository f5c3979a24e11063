"""
Preferences endpoint.
"""
from fastapi import APIRouter, Depends
from flashdeck.core.config import Preferences, get_preferences
from flashdeck.schemas.preferences import PreferencesResponse

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("", response_model=PreferencesResponse)
async def read_preferences(preferences: Preferences = Depends(get_preferences)):
    """Get theme, AI availability and prompt templates."""
    return PreferencesResponse(
        theme=preferences.theme,
        ai_configured=bool(preferences.ai_api_key),
        prompt_templates=preferences.prompt_templates,
    )
