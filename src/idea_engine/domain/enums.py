"""Domain enumerations."""

from enum import StrEnum


class ReferenceKind(StrEnum):
    """Recognized YouTube channel URL shapes, in detection order."""

    HANDLE = "handle"  # youtube.com/@name
    CHANNEL_ID = "channel_id"  # youtube.com/channel/UC...
    CUSTOM = "custom"  # youtube.com/c/name
    USERNAME = "username"  # youtube.com/user/name (legacy)


class PipelineStage(StrEnum):
    """States of a single analysis run."""

    PENDING = "pending"
    FETCHING_VIDEOS = "fetching_videos"
    ANALYZING_CONTENT = "analyzing_content"
    PLANNING_QUERIES = "planning_queries"
    SEARCHING = "searching"
    GENERATING_IDEAS = "generating_ideas"
    RENDERING_THUMBNAILS = "rendering_thumbnails"
    VALIDATING = "validating"
    COMPLETE = "complete"
    FAILED = "failed"

    @property
    def step(self) -> str | None:
        """Progress step label ("i/7") for working stages, None otherwise."""
        number = _STEP_NUMBERS.get(self)
        if number is None:
            return None
        return f"{number}/{TOTAL_STEPS}"


_STEP_NUMBERS = {
    PipelineStage.FETCHING_VIDEOS: 1,
    PipelineStage.ANALYZING_CONTENT: 2,
    PipelineStage.PLANNING_QUERIES: 3,
    PipelineStage.SEARCHING: 4,
    PipelineStage.GENERATING_IDEAS: 5,
    PipelineStage.RENDERING_THUMBNAILS: 6,
    PipelineStage.VALIDATING: 7,
}

TOTAL_STEPS = len(_STEP_NUMBERS)


class StreamEventType(StrEnum):
    """Event types written to the server-sent event stream."""

    PROGRESS = "progress"
    ERROR = "error"
    COMPLETE = "complete"
