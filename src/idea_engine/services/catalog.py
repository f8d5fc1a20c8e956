"""Channel resolution and recent-upload listing."""

import httpx

from idea_engine.adapters.catalog.base import CatalogProvider, CatalogVideo
from idea_engine.config import settings
from idea_engine.domain.enums import ReferenceKind
from idea_engine.domain.errors import CatalogError, NotFoundError, ResolutionError
from idea_engine.domain.models import ChannelReference, Video
from idea_engine.domain.references import parse_channel_reference
from idea_engine.logging import get_logger
from idea_engine.utils.dates import parse_iso_duration

logger = get_logger(__name__)

# Over-fetch to make up for Shorts dropped by the duration filter
FETCH_MULTIPLIER = 3
MAX_FETCH = 50


def _to_video(item: CatalogVideo) -> Video:
    return Video(
        id=item.id,
        title=item.title,
        description=item.description,
        thumbnail_url=item.thumbnail_url,
        published_at=item.published_at,
        view_count=item.view_count or "0",
        like_count=item.like_count or "0",
        tags=tuple(item.tags),
    )


class CatalogResolver:
    """Turns a channel URL into a channel ID and its recent long-form uploads."""

    def __init__(
        self,
        catalog: CatalogProvider,
        shorts_max_seconds: int | None = None,
    ) -> None:
        self.catalog = catalog
        self.shorts_max_seconds = (
            settings.shorts_max_seconds if shorts_max_seconds is None else shorts_max_seconds
        )

    async def resolve(self, channel_url: str) -> str:
        """Resolve a channel URL to its canonical channel ID.

        Raises:
            ResolutionError: If the URL shape is not recognized or the lookup finds nothing
            CatalogError: If the catalog request fails
        """
        reference = parse_channel_reference(channel_url)

        try:
            channel_id = await self._lookup(reference)
        except httpx.HTTPError as e:
            logger.error("channel_lookup_failed", kind=reference.kind, error=str(e))
            raise CatalogError("Failed to resolve channel from YouTube") from e

        if not channel_id:
            logger.warning("channel_not_resolved", kind=reference.kind, value=reference.value)
            raise ResolutionError("Could not find a channel for this URL")

        logger.info("channel_resolved", kind=reference.kind, channel_id=channel_id)
        return channel_id

    async def _lookup(self, reference: ChannelReference) -> str | None:
        if reference.kind == ReferenceKind.CHANNEL_ID:
            return reference.value
        if reference.kind == ReferenceKind.USERNAME:
            return await self.catalog.find_channel_by_username(reference.value)
        # Handles and custom names have no direct lookup; take the top search hit
        matches = await self.catalog.search_channels(reference.value, max_results=1)
        return matches[0] if matches else None

    async def list_recent_videos(self, channel_id: str, count: int) -> list[Video]:
        """List the channel's most recent uploads that are not Shorts.

        Args:
            channel_id: Canonical channel ID
            count: Maximum number of videos to return

        Returns:
            Up to count videos, newest first. Empty if every candidate is a Short.

        Raises:
            NotFoundError: If the channel or its uploads playlist does not exist
            CatalogError: If a catalog request fails
        """
        try:
            channel = await self.catalog.get_channel(channel_id)
            if channel is None:
                raise NotFoundError("Channel not found")
            if not channel.uploads_playlist_id:
                raise NotFoundError("Could not find uploads playlist")

            fetch_limit = min(count * FETCH_MULTIPLIER, MAX_FETCH)
            video_ids = await self.catalog.list_playlist_video_ids(
                channel.uploads_playlist_id, fetch_limit
            )
            items = await self.catalog.get_videos(video_ids) if video_ids else []
        except httpx.HTTPError as e:
            logger.error("video_listing_failed", channel_id=channel_id, error=str(e))
            raise CatalogError("Failed to fetch videos from YouTube") from e

        regular = [
            item for item in items if parse_iso_duration(item.duration) > self.shorts_max_seconds
        ]
        videos = [_to_video(item) for item in regular[:count]]

        logger.info(
            "videos_listed",
            channel_id=channel_id,
            candidates=len(items),
            shorts_skipped=len(items) - len(regular),
            returned=len(videos),
        )
        return videos

    async def fetch_channel_videos(self, channel_url: str, count: int) -> list[Video]:
        """Resolve a URL and list its recent videos in one call."""
        channel_id = await self.resolve(channel_url)
        return await self.list_recent_videos(channel_id, count)
