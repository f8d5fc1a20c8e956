"""Tests for the CatalogResolver service."""

from unittest.mock import AsyncMock

import httpx
import pytest

from idea_engine.adapters.catalog.base import CatalogChannel, CatalogVideo
from idea_engine.adapters.catalog.stub import STUB_CHANNEL_ID, StubCatalogProvider
from idea_engine.domain.errors import CatalogError, NotFoundError, ResolutionError
from idea_engine.services.catalog import CatalogResolver
from idea_engine.utils.dates import parse_iso_duration


def _video(i: int, duration: str) -> CatalogVideo:
    return CatalogVideo(
        id=f"vid{i}",
        title=f"Video {i}",
        thumbnail_url=f"https://i.ytimg.com/vi/vid{i}/hqdefault.jpg",
        duration=duration,
    )


@pytest.fixture
def resolver(catalog_provider):
    """Get a CatalogResolver over the stub catalog."""
    return CatalogResolver(catalog_provider, shorts_max_seconds=60)


class TestResolve:
    """Tests for channel URL resolution."""

    @pytest.mark.asyncio
    async def test_channel_id_needs_no_lookup(self):
        catalog = StubCatalogProvider()
        catalog.search_channels = AsyncMock()
        catalog.find_channel_by_username = AsyncMock()

        channel_id = await CatalogResolver(catalog).resolve("https://www.youtube.com/channel/UCabc123")

        assert channel_id == "UCabc123"
        catalog.search_channels.assert_not_awaited()
        catalog.find_channel_by_username.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_handle_uses_top_search_hit(self):
        catalog = StubCatalogProvider()
        catalog.search_channels = AsyncMock(return_value=["UCfirst", "UCsecond"])

        channel_id = await CatalogResolver(catalog).resolve("https://www.youtube.com/@chef")

        assert channel_id == "UCfirst"
        catalog.search_channels.assert_awaited_once_with("chef", max_results=1)

    @pytest.mark.asyncio
    async def test_username_uses_legacy_lookup(self):
        catalog = StubCatalogProvider()
        catalog.find_channel_by_username = AsyncMock(return_value="UClegacy")

        channel_id = await CatalogResolver(catalog).resolve("https://www.youtube.com/user/oldname")

        assert channel_id == "UClegacy"
        catalog.find_channel_by_username.assert_awaited_once_with("oldname")

    @pytest.mark.asyncio
    async def test_no_match_raises(self):
        catalog = StubCatalogProvider()
        catalog.search_channels = AsyncMock(return_value=[])

        with pytest.raises(ResolutionError, match="Could not find a channel"):
            await CatalogResolver(catalog).resolve("https://www.youtube.com/c/nobody")

    @pytest.mark.asyncio
    async def test_unrecognized_url_makes_no_calls(self):
        catalog = StubCatalogProvider()
        catalog.search_channels = AsyncMock()
        catalog.get_channel = AsyncMock()
        catalog.list_playlist_video_ids = AsyncMock()

        with pytest.raises(ResolutionError):
            await CatalogResolver(catalog).fetch_channel_videos(
                "https://www.youtube.com/watch?v=abc", 10
            )

        catalog.search_channels.assert_not_awaited()
        catalog.get_channel.assert_not_awaited()
        catalog.list_playlist_video_ids.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_http_error_becomes_catalog_error(self):
        catalog = StubCatalogProvider()
        catalog.search_channels = AsyncMock(side_effect=httpx.ConnectError("boom"))

        with pytest.raises(CatalogError, match="Failed to resolve channel"):
            await CatalogResolver(catalog).resolve("https://www.youtube.com/@chef")


class TestListRecentVideos:
    """Tests for recent-upload listing."""

    @pytest.mark.asyncio
    async def test_shorts_are_filtered(self, resolver):
        videos = await resolver.list_recent_videos(STUB_CHANNEL_ID, 10)

        assert len(videos) == 10
        by_id = {v.id: v for v in resolver.catalog.videos}
        assert all(parse_iso_duration(by_id[v.id].duration) > 60 for v in videos)

    @pytest.mark.asyncio
    async def test_exactly_sixty_seconds_is_a_short(self):
        catalog = StubCatalogProvider(
            videos=[_video(0, "PT60S"), _video(1, "PT1M1S"), _video(2, "PT30S")]
        )

        videos = await CatalogResolver(catalog, shorts_max_seconds=60).list_recent_videos(
            STUB_CHANNEL_ID, 10
        )

        assert [v.id for v in videos] == ["vid1"]

    @pytest.mark.asyncio
    async def test_over_fetches_to_cover_shorts(self):
        catalog = StubCatalogProvider()
        catalog.list_playlist_video_ids = AsyncMock(return_value=[])

        await CatalogResolver(catalog).list_recent_videos(STUB_CHANNEL_ID, 10)

        catalog.list_playlist_video_ids.assert_awaited_once()
        assert catalog.list_playlist_video_ids.await_args.args[1] == 30

    @pytest.mark.asyncio
    async def test_all_shorts_returns_empty(self):
        catalog = StubCatalogProvider(videos=[_video(i, "PT20S") for i in range(5)])

        videos = await CatalogResolver(catalog).list_recent_videos(STUB_CHANNEL_ID, 10)

        assert videos == []

    @pytest.mark.asyncio
    async def test_missing_channel(self):
        catalog = StubCatalogProvider()
        catalog.get_channel = AsyncMock(return_value=None)

        with pytest.raises(NotFoundError, match="Channel not found"):
            await CatalogResolver(catalog).list_recent_videos("UCmissing", 10)

    @pytest.mark.asyncio
    async def test_missing_uploads_playlist(self):
        catalog = StubCatalogProvider()
        catalog.get_channel = AsyncMock(return_value=CatalogChannel(id="UCx"))

        with pytest.raises(NotFoundError, match="uploads playlist"):
            await CatalogResolver(catalog).list_recent_videos("UCx", 10)

    @pytest.mark.asyncio
    async def test_http_error_becomes_catalog_error(self):
        catalog = StubCatalogProvider()
        request = httpx.Request("GET", "https://www.googleapis.com/youtube/v3/videos")
        response = httpx.Response(403, request=request)
        catalog.get_videos = AsyncMock(
            side_effect=httpx.HTTPStatusError("forbidden", request=request, response=response)
        )

        with pytest.raises(CatalogError, match="Failed to fetch videos"):
            await CatalogResolver(catalog).list_recent_videos(STUB_CHANNEL_ID, 10)
