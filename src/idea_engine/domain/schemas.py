"""Wire schemas for the analysis request and result."""

from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from idea_engine.domain.models import PLACEHOLDER_THUMBNAIL_URL
from idea_engine.domain.parsers import IDEA_COUNT
from idea_engine.domain.references import is_youtube_host, match_reference

VIDEO_DISPLAY_COUNT = 5
NEWS_DISPLAY_COUNT = 10
REDDIT_DISPLAY_COUNT = 10


def _is_absolute_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def format_validation_error(error: ValidationError) -> list[str]:
    """Render pydantic errors as "path: message" strings."""
    issues = []
    for err in error.errors():
        path = ".".join(str(part) for part in err["loc"])
        if err["type"] == "value_error" and "error" in err.get("ctx", {}):
            message = str(err["ctx"]["error"])
        else:
            message = err["msg"]
        issues.append(f"{path}: {message}" if path else message)
    return issues


class AnalyzeChannelRequest(BaseModel):
    """Request body for the analysis endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    channel_url: str = Field(..., alias="channelUrl")

    @field_validator("channel_url")
    @classmethod
    def validate_channel_url(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Channel URL is required")
        if not _is_absolute_url(value):
            raise ValueError("Invalid URL format")
        if not is_youtube_host(value):
            raise ValueError("Must be a valid YouTube URL")
        if match_reference(value) is None:
            raise ValueError("Must be a valid YouTube channel URL")
        return value


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChannelAnalysisSchema(_WireModel):
    topics: list[str] = Field(..., min_length=1)
    style: str
    tone: str
    target_audience: str
    thumbnail_style: str
    content_format: str


class VideoSchema(_WireModel):
    id: str
    title: str
    description: str
    thumbnail_url: str
    published_at: str
    view_count: str | None = None
    like_count: str | None = None
    tags: list[str] | None = None

    @field_validator("thumbnail_url")
    @classmethod
    def validate_thumbnail_url(cls, value: str) -> str:
        # Some uploads come back without any thumbnail
        if value and not _is_absolute_url(value):
            raise ValueError("Invalid url")
        return value


class NewsArticleSchema(_WireModel):
    title: str
    description: str
    url: str
    published_at: str
    source: str

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        if not _is_absolute_url(value):
            raise ValueError("Invalid url")
        return value


class RedditPostSchema(_WireModel):
    title: str
    content: str
    url: str
    subreddit: str
    score: int
    created_at: str

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        if not _is_absolute_url(value):
            raise ValueError("Invalid url")
        return value


class VideoIdeaSchema(_WireModel):
    title: str = Field(..., min_length=1)
    thumbnail_url: str
    thumbnail_prompt: str = Field(..., min_length=1)
    video_description: str = Field(..., min_length=1)

    @field_validator("thumbnail_url")
    @classmethod
    def validate_thumbnail_url(cls, value: str) -> str:
        if value != PLACEHOLDER_THUMBNAIL_URL and not _is_absolute_url(value):
            raise ValueError("Invalid url")
        return value


class AnalysisResultSchema(_WireModel):
    """Shape of the payload handed to the client on success."""

    channel_analysis: ChannelAnalysisSchema
    videos: list[VideoSchema] = Field(..., max_length=VIDEO_DISPLAY_COUNT)
    news_articles: list[NewsArticleSchema] = Field(..., max_length=NEWS_DISPLAY_COUNT)
    reddit_posts: list[RedditPostSchema] = Field(..., max_length=REDDIT_DISPLAY_COUNT)
    video_ideas: list[VideoIdeaSchema] = Field(..., min_length=IDEA_COUNT, max_length=IDEA_COUNT)
