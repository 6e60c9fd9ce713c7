# config.py
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from the environment or a local .env file."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # OpenAI
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    insight_temperature: float = 0.8
    insight_max_tokens: int = 400
    # seconds allowed per insight call before falling back
    insight_timeout: float = Field(20.0, gt=0)

    # Matching
    match_limit: int = Field(5, ge=1)
    seed_on_startup: bool = True

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None


settings = Settings()
