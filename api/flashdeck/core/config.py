from pydantic import BaseModel
from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from typing import Literal, Optional
from pathlib import Path
import logging
import os

_logger = logging.getLogger(__name__)

# Look for .env in api directory (parent of the flashdeck package)
api_dir = Path(__file__).parent.parent.parent
env_path = api_dir / ".env"

if env_path.exists():
    load_dotenv(env_path, override=False)
    _logger.info(f"Loaded .env file from: {env_path}")
else:
    current_env = Path(".env")
    if current_env.exists():
        load_dotenv(current_env, override=False)
        _logger.info(f"Loaded .env file from: {current_env.absolute()}")


DEFAULT_ANALYZE_PROMPT = (
    "Explain the following flashcard in depth so a learner understands it.\n"
    "Front: {front}\n"
    "Back: {back}"
)

DEFAULT_MEMORY_PROMPT = (
    "Give a short, vivid memory aid (mnemonic, association or story) for this flashcard.\n"
    "Front: {front}\n"
    "Back: {back}"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database - falls back to a local SQLite file
    database_url: str = "sqlite:///./flashdeck.db"

    # API
    api_v1_prefix: str = "/api/v1"

    # CORS
    cors_origins: list[str] = ["*"]

    # Study sessions
    study_save_delay_seconds: float = 2.0
    study_max_requeues: Optional[int] = None  # None keeps requeueing "again" cards forever
    seed_demo_data: bool = True

    # AI explanations (OpenAI-compatible chat completion API, DeepSeek by default)
    ai_api_key: str = ""
    ai_base_url: str = "https://api.deepseek.com"
    ai_model: str = "deepseek-chat"
    ai_timeout_seconds: int = 60

    # Client preferences
    theme: Literal["light", "dark"] = "light"
    prompt_analyze: str = DEFAULT_ANALYZE_PROMPT
    prompt_memory: str = DEFAULT_MEMORY_PROMPT

    class Config:
        env_file = ".env"
        case_sensitive = False

    def __init__(self, **kwargs):
        # Hosting platforms provide DATABASE_URL uppercase and sometimes empty
        if not kwargs.get("database_url") and os.getenv("DATABASE_URL"):
            kwargs["database_url"] = os.getenv("DATABASE_URL")
        super().__init__(**kwargs)

    @property
    def sqlalchemy_database_url(self) -> str:
        """Database URL with the legacy postgres:// scheme rewritten for SQLAlchemy."""
        if self.database_url.startswith("postgres://"):
            return self.database_url.replace("postgres://", "postgresql://", 1)
        return self.database_url


class PromptTemplates(BaseModel):
    """Prompt templates for the two explanation kinds."""
    analyze: str = DEFAULT_ANALYZE_PROMPT
    memory: str = DEFAULT_MEMORY_PROMPT


class Preferences(BaseModel):
    """
    Client-facing preferences passed explicitly to the AI layer.

    Only the explanation feature and the preferences endpoint read this;
    study sessions never depend on it.
    """
    theme: Literal["light", "dark"] = "light"
    ai_api_key: Optional[str] = None
    ai_base_url: str = "https://api.deepseek.com"
    ai_model: str = "deepseek-chat"
    ai_timeout_seconds: int = 60
    prompt_templates: PromptTemplates = PromptTemplates()


# Create settings instance
settings = Settings()


def get_preferences() -> Preferences:
    """Dependency building the preferences object from the current settings."""
    return Preferences(
        theme=settings.theme,
        ai_api_key=settings.ai_api_key or None,
        ai_base_url=settings.ai_base_url,
        ai_model=settings.ai_model,
        ai_timeout_seconds=settings.ai_timeout_seconds,
        prompt_templates=PromptTemplates(
            analyze=settings.prompt_analyze,
            memory=settings.prompt_memory,
        ),
    )
