"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Credentials are optional so the process can start without them; handlers
    report a configuration error per request instead.
    """

    fatsecret_consumer_key: str | None = None
    fatsecret_consumer_secret: str | None = None
    fatsecret_base_url: str = "https://platform.fatsecret.com/rest/server.api"
    fatsecret_max_results: int = 20
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    openai_temperature: float = 0.7
    openai_max_tokens: int = 500
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
        frozen=True,
    )

    @property
    def fatsecret_configured(self) -> bool:
        """Return true when both FatSecret credentials are present."""
        return bool(self.fatsecret_consumer_key and self.fatsecret_consumer_secret)

    @property
    def openai_configured(self) -> bool:
        """Return true when the OpenAI API key is present."""
        return bool(self.openai_api_key)
