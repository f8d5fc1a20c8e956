"""Domain models - immutable value records created once per analysis run."""

from dataclasses import dataclass
from typing import Any

from idea_engine.domain.enums import ReferenceKind

PLACEHOLDER_THUMBNAIL_URL = "/placeholder-thumbnail.png"

DEFAULT_TOPICS = ("General Content",)
DEFAULT_STYLE = "Entertainment"
DEFAULT_TONE = "Casual"
DEFAULT_TARGET_AUDIENCE = "General audience"
DEFAULT_CONTENT_FORMAT = "Standard videos"
DEFAULT_THUMBNAIL_STYLE = (
    "Bold text overlays, vibrant colors, high contrast, eye-catching composition"
)


@dataclass(frozen=True)
class ChannelReference:
    """A channel URL broken down into its recognized shape."""

    kind: ReferenceKind
    value: str
    url: str


@dataclass(frozen=True)
class Video:
    """An uploaded (non-Short) video from the channel."""

    id: str
    title: str
    description: str
    thumbnail_url: str
    published_at: str
    view_count: str = "0"
    like_count: str = "0"
    tags: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "thumbnailUrl": self.thumbnail_url,
            "publishedAt": self.published_at,
            "viewCount": self.view_count,
            "likeCount": self.like_count,
            "tags": list(self.tags),
        }


@dataclass(frozen=True)
class ChannelProfile:
    """Structured description of what a channel makes and how it looks."""

    topics: tuple[str, ...] = DEFAULT_TOPICS
    style: str = DEFAULT_STYLE
    tone: str = DEFAULT_TONE
    target_audience: str = DEFAULT_TARGET_AUDIENCE
    content_format: str = DEFAULT_CONTENT_FORMAT
    thumbnail_style: str = DEFAULT_THUMBNAIL_STYLE

    @property
    def topics_text(self) -> str:
        """Topics joined for prompts and search queries."""
        return ", ".join(self.topics) or "general content"

    def to_dict(self) -> dict[str, Any]:
        return {
            "topics": list(self.topics),
            "style": self.style,
            "tone": self.tone,
            "targetAudience": self.target_audience,
            "thumbnailStyle": self.thumbnail_style,
            "contentFormat": self.content_format,
        }


@dataclass(frozen=True)
class QueryPlan:
    """Search queries for the news and discussion gatherers (five of each)."""

    news_queries: tuple[str, ...]
    discussion_queries: tuple[str, ...]
    is_fallback: bool = False

    @property
    def total(self) -> int:
        return len(self.news_queries) + len(self.discussion_queries)


@dataclass(frozen=True)
class NewsItem:
    """A recent news article."""

    title: str
    description: str
    url: str
    published_at: str
    source: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "publishedAt": self.published_at,
            "source": self.source,
        }


@dataclass(frozen=True)
class DiscussionItem:
    """A recent Reddit post."""

    title: str
    content: str
    url: str
    subreddit: str
    score: int
    created_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "content": self.content,
            "url": self.url,
            "subreddit": self.subreddit,
            "score": self.score,
            "createdAt": self.created_at,
        }


@dataclass(frozen=True)
class VideoIdea:
    """A generated video idea.

    thumbnail_prompt describes only what the thumbnail shows; the channel's
    visual style is applied separately at render time.
    """

    title: str
    thumbnail_prompt: str
    video_description: str
    thumbnail_url: str = PLACEHOLDER_THUMBNAIL_URL

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "thumbnailUrl": self.thumbnail_url,
            "thumbnailPrompt": self.thumbnail_prompt,
            "videoDescription": self.video_description,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Everything a run hands back to the client."""

    channel_analysis: ChannelProfile
    videos: tuple[Video, ...] = ()
    news_articles: tuple[NewsItem, ...] = ()
    reddit_posts: tuple[DiscussionItem, ...] = ()
    video_ideas: tuple[VideoIdea, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "channelAnalysis": self.channel_analysis.to_dict(),
            "videos": [v.to_dict() for v in self.videos],
            "newsArticles": [a.to_dict() for a in self.news_articles],
            "redditPosts": [p.to_dict() for p in self.reddit_posts],
            "videoIdeas": [i.to_dict() for i in self.video_ideas],
        }
