"""Parse-or-default boundaries for structured model output.

Each function takes untrusted JSON (already decoded) and returns a fully
populated record, or raises the stage's error when nothing usable remains.
None of them touch the network.
"""

from typing import Any

from idea_engine.domain.errors import AnalysisError, IdeaGenerationError
from idea_engine.domain.models import (
    DEFAULT_CONTENT_FORMAT,
    DEFAULT_STYLE,
    DEFAULT_TARGET_AUDIENCE,
    DEFAULT_THUMBNAIL_STYLE,
    DEFAULT_TONE,
    DEFAULT_TOPICS,
    ChannelProfile,
    QueryPlan,
    VideoIdea,
)

QUERIES_PER_SOURCE = 5
IDEA_COUNT = 5

DEFAULT_DESCRIPTION = "Detailed video description coming soon."


def _text(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def parse_channel_profile(data: Any, thumbnail_style: str = DEFAULT_THUMBNAIL_STYLE) -> ChannelProfile:
    """Build a ChannelProfile from the content-analysis JSON object.

    Missing or malformed fields fall back to their defaults. Only a response
    that is not a JSON object at all is rejected.

    Raises:
        AnalysisError: If data is not a dict
    """
    if not isinstance(data, dict):
        raise AnalysisError()

    topics = _string_list(data.get("topics")) or list(DEFAULT_TOPICS)

    return ChannelProfile(
        topics=tuple(topics),
        style=_text(data.get("style"), DEFAULT_STYLE),
        tone=_text(data.get("tone"), DEFAULT_TONE),
        target_audience=_text(data.get("targetAudience"), DEFAULT_TARGET_AUDIENCE),
        content_format=_text(data.get("contentFormat"), DEFAULT_CONTENT_FORMAT),
        thumbnail_style=_text(thumbnail_style, DEFAULT_THUMBNAIL_STYLE),
    )


def fallback_query_plan(topics: str) -> QueryPlan:
    """Deterministic query plan built from the topics string."""
    topics = topics.strip() or "general content"
    return QueryPlan(
        news_queries=(
            topics,
            f"{topics} news",
            f"{topics} updates",
            f"{topics} trends",
            f"latest {topics}",
        ),
        discussion_queries=(
            topics,
            f"{topics} discussion",
            f"{topics} reddit",
            f"{topics} community",
            f"{topics} advice",
        ),
        is_fallback=True,
    )


def parse_query_plan(data: Any, topics: str) -> QueryPlan:
    """Build a QueryPlan from the query-generation JSON object.

    Both lists must carry at least five usable queries. If either falls short
    the whole plan is replaced by the fallback; generated and fallback
    queries are never mixed.
    """
    if not isinstance(data, dict):
        return fallback_query_plan(topics)

    news = _string_list(data.get("newsQueries"))
    discussions = _string_list(data.get("redditQueries"))

    if len(news) < QUERIES_PER_SOURCE or len(discussions) < QUERIES_PER_SOURCE:
        return fallback_query_plan(topics)

    return QueryPlan(
        news_queries=tuple(news[:QUERIES_PER_SOURCE]),
        discussion_queries=tuple(discussions[:QUERIES_PER_SOURCE]),
    )


def repair_video_idea(item: Any, index: int) -> VideoIdea:
    """Fill in whatever fields a generated idea is missing.

    Args:
        item: One entry of the "ideas" array (anything but a dict is treated as empty)
        index: Zero-based position, used for the templated title
    """
    if not isinstance(item, dict):
        item = {}

    raw_title = _text(item.get("title"), "")
    title = raw_title or f"Video Idea {index + 1}"

    return VideoIdea(
        title=title,
        thumbnail_prompt=_text(
            item.get("thumbnailPrompt"),
            f"Create an eye-catching YouTube thumbnail for: {raw_title or 'video'}",
        ),
        video_description=_text(item.get("videoDescription"), DEFAULT_DESCRIPTION),
    )


def parse_video_ideas(data: Any) -> list[VideoIdea]:
    """Build exactly IDEA_COUNT ideas from the idea-generation JSON object.

    Raises:
        IdeaGenerationError: If the "ideas" array is missing, not an array, or empty
    """
    ideas = data.get("ideas") if isinstance(data, dict) else None
    if not isinstance(ideas, list) or not ideas:
        raise IdeaGenerationError("Invalid response structure: missing or empty ideas array")

    repaired = [repair_video_idea(item, i) for i, item in enumerate(ideas[:IDEA_COUNT])]

    # Short answers are padded with templated ideas to keep the count fixed
    while len(repaired) < IDEA_COUNT:
        repaired.append(repair_video_idea({}, len(repaired)))

    return repaired
