"""Tests for the analysis endpoints."""

import asyncio
import json
from collections.abc import Generator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from idea_engine.adapters.catalog.base import CatalogVideo
from idea_engine.adapters.catalog.stub import StubCatalogProvider
from idea_engine.api.deps import get_analysis_pipeline
from idea_engine.api.routes.analysis import stream_analysis
from idea_engine.config import settings
from idea_engine.domain.errors import QueryPlanningError, ResultValidationError
from idea_engine.main import app

HANDLE_URL = "https://www.youtube.com/@stubchannel"


def _events(body: str) -> list[dict]:
    frames = [frame for frame in body.split("\n\n") if frame.strip()]
    assert all(frame.startswith("data: ") for frame in frames)
    return [json.loads(frame[len("data: "):]) for frame in frames]


@pytest.fixture
def override_pipeline(pipeline) -> Generator:
    """Route API requests to the stub pipeline fixture."""
    app.dependency_overrides[get_analysis_pipeline] = lambda: pipeline
    yield pipeline
    app.dependency_overrides.pop(get_analysis_pipeline, None)


@pytest.fixture
def shorts_only_pipeline(override_pipeline):
    override_pipeline.resolver.catalog = StubCatalogProvider(
        videos=[CatalogVideo(id="s1", title="Short", duration="PT15S")]
    )
    return override_pipeline


class TestRequestValidation:
    """Body and configuration checks shared by both endpoints."""

    @pytest.mark.parametrize("path", ["/api/analyze-channel", "/api/analyze-channel-stream"])
    def test_not_a_youtube_url(self, test_client: TestClient, path: str) -> None:
        response = test_client.post(path, json={"channelUrl": "https://vimeo.com/@someone"})

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "Invalid request data"
        assert data["details"]["validation"] == ["channelUrl: Must be a valid YouTube URL"]

    def test_missing_channel_url(self, test_client: TestClient) -> None:
        response = test_client.post("/api/analyze-channel", json={})

        assert response.status_code == 400
        assert response.json()["details"]["validation"][0].startswith("channelUrl: ")

    def test_malformed_json(self, test_client: TestClient) -> None:
        response = test_client.post(
            "/api/analyze-channel",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_body_must_be_an_object(self, test_client: TestClient) -> None:
        response = test_client.post("/api/analyze-channel", json=[HANDLE_URL])

        assert response.status_code == 400

    def test_missing_credentials(self, test_client: TestClient, override_pipeline, monkeypatch) -> None:
        monkeypatch.setattr(settings, "catalog_provider", "youtube")
        monkeypatch.setattr(settings, "youtube_api_key", None)

        response = test_client.post("/api/analyze-channel-stream", json={"channelUrl": HANDLE_URL})

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Server configuration error"
        assert data["details"]["missing"] == ["YOUTUBE_API_KEY"]


class TestAnalyzeChannelStream:
    """Tests for the server-sent events endpoint."""

    def test_stream_completes(self, test_client: TestClient, override_pipeline) -> None:
        response = test_client.post("/api/analyze-channel-stream", json={"channelUrl": HANDLE_URL})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/event-stream")
        assert response.headers["cache-control"] == "no-cache"
        assert response.headers["x-accel-buffering"] == "no"

        events = _events(response.text)
        progress = [e for e in events if e["type"] == "progress"]
        steps = [int(e["step"].split("/")[0]) for e in progress]
        assert steps == sorted(steps)
        assert steps[0] == 1 and steps[-1] == 7

        final = events[-1]
        assert final["type"] == "complete"
        assert [e["type"] for e in events].count("complete") == 1
        assert len(final["data"]["videoIdeas"]) == 5
        assert len(final["data"]["videos"]) == 5
        assert set(final["data"]) == {
            "channelAnalysis",
            "videos",
            "newsArticles",
            "redditPosts",
            "videoIdeas",
        }

    def test_stream_reports_error(self, test_client: TestClient, shorts_only_pipeline) -> None:
        response = test_client.post("/api/analyze-channel-stream", json={"channelUrl": HANDLE_URL})

        events = _events(response.text)
        assert events[-1] == {"type": "error", "error": "No videos found for this channel"}
        assert all(e["step"] == "1/7" for e in events[:-1])


class TestAnalyzeChannel:
    """Tests for the single-shot JSON endpoint."""

    def test_success(self, test_client: TestClient, override_pipeline) -> None:
        response = test_client.post("/api/analyze-channel", json={"channelUrl": HANDLE_URL})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert len(data["data"]["videoIdeas"]) == 5
        assert data["data"]["channelAnalysis"]["topics"]

    def test_no_videos_is_404(self, test_client: TestClient, shorts_only_pipeline) -> None:
        response = test_client.post("/api/analyze-channel", json={"channelUrl": HANDLE_URL})

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "No videos found for this channel"}

    def test_stage_error_is_502(self, test_client: TestClient, override_pipeline) -> None:
        override_pipeline.planner.plan = AsyncMock(side_effect=QueryPlanningError())

        response = test_client.post("/api/analyze-channel", json={"channelUrl": HANDLE_URL})

        assert response.status_code == 502
        assert response.json()["error"] == "Failed to generate search queries"

    def test_validation_error_is_500(self, test_client: TestClient, override_pipeline) -> None:
        def reject(result):
            raise ResultValidationError(["videoIdeas: List should have 5 items"])

        override_pipeline.validate = reject

        response = test_client.post("/api/analyze-channel", json={"channelUrl": HANDLE_URL})

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Response validation error"
        assert data["details"]["validation"] == ["videoIdeas: List should have 5 items"]


class TestStreamDisconnect:
    """Closing the event stream stops the run behind it."""

    @pytest.mark.asyncio
    async def test_closing_stream_cancels_run(self, pipeline) -> None:
        cancelled = asyncio.Event()

        async def slow_run(channel_url, on_progress=None):
            await on_progress("1/7", "Fetching videos from YouTube...")
            try:
                await asyncio.sleep(30)
            except asyncio.CancelledError:
                cancelled.set()
                raise

        pipeline.run = slow_run
        stream = stream_analysis(pipeline, HANDLE_URL)

        first = await stream.__anext__()
        await stream.aclose()
        await asyncio.wait_for(cancelled.wait(), timeout=1)

        assert _events(first) == [
            {"type": "progress", "step": "1/7", "message": "Fetching videos from YouTube..."}
        ]
        assert cancelled.is_set()
