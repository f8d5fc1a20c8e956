"""Base interface for video catalog providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class CatalogChannel:
    """A channel as seen by the catalog."""

    id: str
    uploads_playlist_id: str | None = None


@dataclass
class CatalogVideo:
    """Full metadata for one uploaded video."""

    id: str
    title: str
    description: str = ""
    thumbnail_url: str = ""
    published_at: str = ""
    duration: str = ""  # ISO-8601, e.g. "PT12M3S"
    view_count: str = "0"
    like_count: str = "0"
    tags: list[str] = field(default_factory=list)


class CatalogProvider(ABC):
    """Abstract base class for video catalog providers.

    Implementations:
    - YouTubeCatalogProvider: YouTube Data API v3
    - StubCatalogProvider: In-memory channels for testing
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name identifier."""
        ...

    @abstractmethod
    async def search_channels(self, query: str, max_results: int = 1) -> list[str]:
        """Search channels by name.

        Returns:
            Matching channel IDs, best match first
        """
        ...

    @abstractmethod
    async def find_channel_by_username(self, username: str) -> str | None:
        """Look up a legacy /user/ name. Returns the channel ID or None."""
        ...

    @abstractmethod
    async def get_channel(self, channel_id: str) -> CatalogChannel | None:
        """Fetch a channel's content details. Returns None if it does not exist."""
        ...

    @abstractmethod
    async def list_playlist_video_ids(self, playlist_id: str, limit: int) -> list[str]:
        """List video IDs in a playlist, most recent first."""
        ...

    @abstractmethod
    async def get_videos(self, video_ids: list[str]) -> list[CatalogVideo]:
        """Fetch full metadata (snippet, statistics, duration) for videos."""
        ...

    async def health_check(self) -> bool:
        """Check if the provider is available."""
        return True
