"""Application configuration via environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from idea_engine.domain.errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )

    # API Server
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, description="API server port")
    api_reload: bool = Field(default=False, description="Enable auto-reload for development")

    # Providers
    llm_provider: str = Field(
        default="openai",
        description="Text/vision completion provider (openai, stub)",
    )
    image_provider: str = Field(
        default="openai",
        description="Thumbnail image generation provider (openai, stub)",
    )
    catalog_provider: str = Field(
        default="youtube",
        description="Video catalog provider (youtube, stub)",
    )
    news_provider: str = Field(
        default="newsapi",
        description="News search provider (newsapi, stub)",
    )
    discussion_provider: str = Field(
        default="reddit",
        description="Discussion search provider (reddit, stub)",
    )

    # API Keys
    openai_api_key: str | None = Field(default=None, description="OpenAI API key")
    youtube_api_key: str | None = Field(default=None, description="YouTube Data API key")
    news_api_key: str | None = Field(
        default=None,
        description="NewsAPI key (optional, news search is skipped without it)",
    )

    # Models
    openai_model: str = Field(
        default="gpt-4o",
        description="OpenAI model for channel analysis, vision and idea generation",
    )
    openai_fast_model: str = Field(
        default="gpt-4o-mini",
        description="OpenAI model for search query planning",
    )
    image_model: str = Field(default="dall-e-3", description="OpenAI image model")

    # Pipeline
    video_fetch_count: int = Field(
        default=10,
        description="Number of eligible (non-Shorts) videos to analyze",
    )
    shorts_max_seconds: int = Field(
        default=60,
        description="Videos at or below this duration are treated as Shorts and skipped",
    )
    news_lookback_days: int = Field(default=7, description="News search recency window")
    reddit_user_agent: str = Field(
        default="VideoIdeaGenerator/1.0",
        description="User-Agent sent to Reddit search",
    )
    reddit_request_delay_seconds: float = Field(
        default=1.0,
        description="Pause between sequential Reddit searches to avoid rate limits",
    )

    # Timeouts (seconds)
    llm_timeout: float = Field(default=120.0, description="Chat completion request timeout")
    image_timeout: float = Field(default=120.0, description="Image generation request timeout")
    catalog_timeout: float = Field(default=30.0, description="YouTube Data API request timeout")
    news_timeout: float = Field(default=15.0, description="NewsAPI request timeout")
    reddit_timeout: float = Field(default=15.0, description="Reddit search request timeout")

    def missing_credentials(self) -> list[str]:
        """Names of environment variables required by the configured providers but unset."""
        missing: list[str] = []
        needs_openai = (
            self.llm_provider.lower() == "openai" or self.image_provider.lower() == "openai"
        )
        if needs_openai and not self.openai_api_key:
            missing.append("OPENAI_API_KEY")
        if self.catalog_provider.lower() == "youtube" and not self.youtube_api_key:
            missing.append("YOUTUBE_API_KEY")
        return missing

    def require_credentials(self) -> None:
        """Raise ConfigurationError if any required credential is unset."""
        missing = self.missing_credentials()
        if missing:
            raise ConfigurationError(missing)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


# Convenience alias
settings = get_settings()
