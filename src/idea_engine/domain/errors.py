"""Error taxonomy for analysis runs.

Anything raised as a PipelineError terminates the run and its message is shown
to the client as-is. Recoverable conditions (a failed search query, a failed
thumbnail, a failed style extraction) never surface as exceptions; the stage
that owns them substitutes a default instead.
"""


class PipelineError(Exception):
    """Base class for run-terminal errors."""

    pass


class ConfigurationError(PipelineError):
    """Raised when credentials required by the configured providers are missing."""

    def __init__(self, missing: list[str]):
        super().__init__(f"Server configuration error: missing {', '.join(missing)}")
        self.missing = missing


class ResolutionError(PipelineError):
    """Raised when a channel URL cannot be resolved to a channel ID."""

    pass


class NotFoundError(PipelineError):
    """Raised when the channel or its uploads playlist does not exist."""

    pass


class CatalogError(PipelineError):
    """Raised when the video catalog cannot be reached or answers with an error."""

    pass


class NoVideosFoundError(PipelineError):
    """Raised when a channel has no videos longer than a Short."""

    def __init__(self, message: str = "No videos found for this channel"):
        super().__init__(message)


class StageError(PipelineError):
    """Raised when a generation stage produces no usable structured output."""

    pass


class AnalysisError(StageError):
    """Channel content analysis failed."""

    def __init__(self, message: str = "Failed to analyze channel content"):
        super().__init__(message)


class QueryPlanningError(StageError):
    """Search query generation failed."""

    def __init__(self, message: str = "Failed to generate search queries"):
        super().__init__(message)


class IdeaGenerationError(StageError):
    """Video idea generation failed."""

    def __init__(self, message: str = "Failed to generate video ideas"):
        super().__init__(message)


class ResultValidationError(PipelineError):
    """Raised when the assembled result does not match the response schema."""

    def __init__(self, issues: list[str]):
        super().__init__(f"Data validation error: {', '.join(issues)}")
        self.issues = issues
