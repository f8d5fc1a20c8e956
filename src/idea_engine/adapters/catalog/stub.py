"""Stub video catalog provider for testing."""

from idea_engine.adapters.catalog.base import CatalogChannel, CatalogProvider, CatalogVideo
from idea_engine.logging import get_logger

logger = get_logger(__name__)

STUB_CHANNEL_ID = "UCstubChannel000000000000"
STUB_UPLOADS_ID = "UUstubChannel000000000000"


def _default_videos() -> list[CatalogVideo]:
    videos = []
    for i in range(30):
        # Every third upload is a Short
        duration = "PT45S" if i % 3 == 2 else f"PT{8 + i % 7}M{i % 60}S"
        videos.append(
            CatalogVideo(
                id=f"stubvideo{i:02d}",
                title=f"Building Practical AI Tools, Part {i + 1}",
                description=f"In this episode we build tool number {i + 1} step by step.",
                thumbnail_url=f"https://i.ytimg.com/vi/stubvideo{i:02d}/hqdefault.jpg",
                published_at=f"2026-09-{30 - i % 28:02d}T15:00:00Z",
                duration=duration,
                view_count=str(10_000 + i * 137),
                like_count=str(500 + i * 11),
                tags=["ai", "tutorial", "python"],
            )
        )
    return videos


class StubCatalogProvider(CatalogProvider):
    """Stub provider serving one in-memory channel.

    Every handle, custom name or username resolves to the same channel.
    """

    def __init__(
        self,
        videos: list[CatalogVideo] | None = None,
        channel_id: str = STUB_CHANNEL_ID,
        uploads_playlist_id: str | None = STUB_UPLOADS_ID,
    ) -> None:
        self.videos = _default_videos() if videos is None else videos
        self.channel_id = channel_id
        self.uploads_playlist_id = uploads_playlist_id

    @property
    def name(self) -> str:
        return "stub"

    async def search_channels(self, query: str, max_results: int = 1) -> list[str]:
        logger.info("stub_catalog_search", query=query)
        return [self.channel_id][:max_results]

    async def find_channel_by_username(self, username: str) -> str | None:
        logger.info("stub_catalog_username_lookup", username=username)
        return self.channel_id

    async def get_channel(self, channel_id: str) -> CatalogChannel | None:
        return CatalogChannel(id=channel_id, uploads_playlist_id=self.uploads_playlist_id)

    async def list_playlist_video_ids(self, playlist_id: str, limit: int) -> list[str]:
        return [video.id for video in self.videos[:limit]]

    async def get_videos(self, video_ids: list[str]) -> list[CatalogVideo]:
        by_id = {video.id: video for video in self.videos}
        return [by_id[video_id] for video_id in video_ids if video_id in by_id]
