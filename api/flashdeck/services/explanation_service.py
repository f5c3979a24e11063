"""
AI explanations for flashcards via an OpenAI-compatible chat completion API.

Stateless request/response: nothing here reads or writes study sessions.
"""
import requests
import logging

from flashdeck.core.config import Preferences
from flashdeck.core.exceptions import ExternalServiceError, ValidationError
from flashdeck.schemas.explanation import ExplanationKind

logger = logging.getLogger(__name__)


def build_explanation_prompt(kind: ExplanationKind, front: str, back: str, preferences: Preferences) -> str:
    """
    Render the prompt template for an explanation kind.

    Templates use {front} and {back} placeholders; any other braces are
    left untouched.
    """
    if ExplanationKind(kind) is ExplanationKind.MEMORY:
        template = preferences.prompt_templates.memory
    else:
        template = preferences.prompt_templates.analyze
    return template.replace("{front}", front).replace("{back}", back)


def generate_explanation(prompt: str, preferences: Preferences) -> str:
    """
    Send a prompt to the configured chat model and return its reply.

    Args:
        prompt: Fully rendered prompt
        preferences: Supplies the API key, base URL, model and timeout

    Returns:
        The model's reply, stripped

    Raises:
        ValidationError: If no API key is configured
        ExternalServiceError: If the request fails or the reply is empty
    """
    if not preferences.ai_api_key:
        raise ValidationError("AI API key not configured")

    url = f"{preferences.ai_base_url.rstrip('/')}/chat/completions"
    payload = {
        "model": preferences.ai_model,
        "messages": [
            {"role": "user", "content": prompt}
        ],
        "temperature": 0.7,
        "stream": False,
    }

    try:
        response = requests.post(
            url,
            json=payload,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {preferences.ai_api_key}",
            },
            timeout=preferences.ai_timeout_seconds
        )
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.RequestException as e:
        error_msg = f"AI request failed: {str(e)}"
        if getattr(e, 'response', None) is not None:
            error_msg += f" - Status: {e.response.status_code}"
        logger.error(error_msg)
        raise ExternalServiceError(error_msg)
    except ValueError as e:
        logger.error(f"AI response was not valid JSON: {e}")
        raise ExternalServiceError("AI response was not valid JSON")

    choices = data.get('choices') or []
    if not choices:
        raise ExternalServiceError("AI response missing choices")

    text = (choices[0].get('message') or {}).get('content') or ''
    text = text.strip()
    if not text:
        raise ExternalServiceError("AI returned an empty response")

    usage = data.get('usage', {})
    logger.info(
        f"Generated explanation with {preferences.ai_model}: "
        f"{usage.get('prompt_tokens', 0)} prompt / {usage.get('completion_tokens', 0)} completion tokens"
    )
    return text
