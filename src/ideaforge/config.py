"""Configuration management for Idea Forge."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="IDEAFORGE_",
        extra="ignore",
        populate_by_name=True,
    )

    # OpenAI
    openai_api_key: str = Field(alias="OPENAI_API_KEY")
    classifier_model: str = "gpt-4o-mini"
    generation_model: str = "gpt-4o-mini"
    openai_timeout: float = 30.0
    openai_max_retries: int = 2

    # Server
    port: int = 8430
    host: str = "127.0.0.1"
    allowed_origins: list[str] = Field(default_factory=list)

    # Request handling
    max_duration: float = 30.0  # seconds, classification + stream start
    smoothing_delay_ms: float = 10.0
    smoothing_chunking: Literal["word", "line"] = "word"

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def get_allowed_origins(self) -> set[str | None]:
        """Origins allowed to POST to the API besides same-origin requests."""
        origins: set[str | None] = {
            f"http://localhost:{self.port}",
            f"http://127.0.0.1:{self.port}",
        }
        origins.update(origin.rstrip("/") for origin in self.allowed_origins)
        return origins


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
