"""
Preferences schemas.
"""
from pydantic import BaseModel
from typing import Literal
from flashdeck.core.config import PromptTemplates


class PreferencesResponse(BaseModel):
    """Client preferences. The AI key itself is never returned."""
    theme: Literal["light", "dark"]
    ai_configured: bool
    prompt_templates: PromptTemplates
