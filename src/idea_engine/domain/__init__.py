"""Domain models and business logic."""

from idea_engine.domain.enums import PipelineStage, ReferenceKind, StreamEventType
from idea_engine.domain.errors import (
    AnalysisError,
    CatalogError,
    ConfigurationError,
    IdeaGenerationError,
    NoVideosFoundError,
    NotFoundError,
    PipelineError,
    QueryPlanningError,
    ResolutionError,
    ResultValidationError,
    StageError,
)
from idea_engine.domain.models import (
    AnalysisResult,
    ChannelProfile,
    ChannelReference,
    DiscussionItem,
    NewsItem,
    QueryPlan,
    Video,
    VideoIdea,
)

__all__ = [
    "AnalysisError",
    "AnalysisResult",
    "CatalogError",
    "ChannelProfile",
    "ChannelReference",
    "ConfigurationError",
    "DiscussionItem",
    "IdeaGenerationError",
    "NewsItem",
    "NoVideosFoundError",
    "NotFoundError",
    "PipelineError",
    "PipelineStage",
    "QueryPlan",
    "QueryPlanningError",
    "ReferenceKind",
    "ResolutionError",
    "ResultValidationError",
    "StageError",
    "StreamEventType",
    "Video",
    "VideoIdea",
]
