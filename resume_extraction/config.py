from pydantic_settings import BaseSettings
from functools import lru_cache
import logging
import os


class Settings(BaseSettings):
    app_name: str = "Resume Profile Extraction"
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"
    log_level: str = "INFO"

    # AI/LLM Configuration - a provider without a key is never attempted
    gemini_api_key: str = ""
    gemini_models: str = "gemini-2.0-flash,gemini-1.5-flash,gemini-flash-latest,gemini-pro"

    openai_api_key: str = ""
    openai_models: str = "gpt-4o-mini,gpt-3.5-turbo"

    # Gemini is tried first unless this is set
    prefer_openai: bool = False

    llm_temperature: float = 0.1
    prompt_max_chars: int = 10000  # Resume text sent to the model is truncated to this

    # Characters of normalized text returned as textPreview
    preview_chars: int = 2000

    class Config:
        env_file = ".env"
        extra = "ignore"
        # Make field names case-insensitive for environment variables
        case_sensitive = False

    def get_gemini_models(self) -> list:
        """Parse Gemini model variants from comma-separated string"""
        return _split_csv(self.gemini_models)

    def get_openai_models(self) -> list:
        """Parse OpenAI model variants from comma-separated string"""
        return _split_csv(self.openai_models)


def _split_csv(value: str) -> list:
    return [item.strip() for item in value.split(",") if item.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings = None) -> None:
    """Apply the configured log level for host applications and scripts."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
