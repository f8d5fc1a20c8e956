"""YouTube Data API v3 catalog provider."""

from typing import Any

import httpx

from idea_engine.adapters.catalog.base import CatalogChannel, CatalogProvider, CatalogVideo
from idea_engine.config import settings
from idea_engine.logging import get_logger

logger = get_logger(__name__)

YOUTUBE_DATA_URL = "https://www.googleapis.com/youtube/v3"

# videos.list and playlistItems.list accept at most 50 per page
MAX_PAGE_SIZE = 50


class YouTubeCatalogProvider(CatalogProvider):
    """Reads channels and uploads through the public YouTube Data API.

    Uses an API key only; no OAuth is needed for public channel data.
    """

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key or settings.youtube_api_key
        self.timeout = timeout or settings.catalog_timeout
        self._transport = transport

        if not self.api_key:
            logger.warning("YouTube API key not configured")

    @property
    def name(self) -> str:
        return "youtube"

    async def _get(self, resource: str, params: dict[str, Any]) -> dict[str, Any]:
        if not self.api_key:
            raise ValueError("YouTube API key not configured")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.get(
                f"{YOUTUBE_DATA_URL}/{resource}",
                params={**params, "key": self.api_key},
            )

        if response.status_code != 200:
            logger.error(
                "youtube_data_api_error",
                resource=resource,
                status=response.status_code,
                body=response.text[:500],
            )
        response.raise_for_status()
        return response.json()

    async def search_channels(self, query: str, max_results: int = 1) -> list[str]:
        data = await self._get(
            "search",
            {"part": "id", "q": query, "type": "channel", "maxResults": max_results},
        )
        ids = [item.get("id", {}).get("channelId") for item in data.get("items", [])]
        return [channel_id for channel_id in ids if channel_id]

    async def find_channel_by_username(self, username: str) -> str | None:
        data = await self._get("channels", {"part": "id", "forUsername": username})
        items = data.get("items", [])
        if not items:
            return None
        return items[0].get("id") or None

    async def get_channel(self, channel_id: str) -> CatalogChannel | None:
        data = await self._get("channels", {"part": "contentDetails", "id": channel_id})
        items = data.get("items", [])
        if not items:
            return None
        related = items[0].get("contentDetails", {}).get("relatedPlaylists", {})
        return CatalogChannel(id=channel_id, uploads_playlist_id=related.get("uploads"))

    async def list_playlist_video_ids(self, playlist_id: str, limit: int) -> list[str]:
        data = await self._get(
            "playlistItems",
            {
                "part": "snippet,contentDetails",
                "playlistId": playlist_id,
                "maxResults": min(limit, MAX_PAGE_SIZE),
            },
        )
        ids = [item.get("contentDetails", {}).get("videoId") for item in data.get("items", [])]
        return [video_id for video_id in ids if video_id]

    async def get_videos(self, video_ids: list[str]) -> list[CatalogVideo]:
        if not video_ids:
            return []

        data = await self._get(
            "videos",
            {
                "part": "snippet,statistics,contentDetails",
                "id": ",".join(video_ids[:MAX_PAGE_SIZE]),
            },
        )

        videos = []
        for item in data.get("items", []):
            snippet = item.get("snippet", {})
            statistics = item.get("statistics", {})
            thumbnails = snippet.get("thumbnails", {})
            thumbnail = thumbnails.get("high") or thumbnails.get("medium") or thumbnails.get("default") or {}

            videos.append(
                CatalogVideo(
                    id=item.get("id", ""),
                    title=snippet.get("title", ""),
                    description=snippet.get("description", ""),
                    thumbnail_url=thumbnail.get("url", ""),
                    published_at=snippet.get("publishedAt", ""),
                    duration=item.get("contentDetails", {}).get("duration", ""),
                    view_count=str(statistics.get("viewCount", "0")),
                    like_count=str(statistics.get("likeCount", "0")),
                    tags=list(snippet.get("tags", [])),
                )
            )

        return videos

    async def health_check(self) -> bool:
        return bool(self.api_key)
