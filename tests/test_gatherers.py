"""Tests for the news and discussion gatherers."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, patch

import pytest

from idea_engine.adapters.discussions.stub import StubDiscussionProvider
from idea_engine.adapters.news.stub import StubNewsProvider
from idea_engine.domain.models import DiscussionItem, NewsItem
from idea_engine.services.gatherers import (
    NO_DISCUSSIONS_CONTEXT,
    NO_NEWS_CONTEXT,
    DiscussionGatherer,
    NewsGatherer,
    build_discussion_context,
    build_news_context,
)

QUERIES = ["espresso", "grinders", "latte art", "decaf", "cold brew"]


def _article(url: str, title: str = "Title") -> NewsItem:
    return NewsItem(title=title, description="desc", url=url, published_at="", source="Wire")


def _post(url: str, score: int) -> DiscussionItem:
    return DiscussionItem(
        title=f"Post {score}", content="", url=url, subreddit="coffee", score=score, created_at=""
    )


class UnconfiguredNews(StubNewsProvider):
    @property
    def is_configured(self) -> bool:
        return False


class TestNewsGatherer:
    """Tests for the parallel news fan-out."""

    @pytest.mark.asyncio
    async def test_results_are_capped_and_unique(self, news_provider):
        articles = await NewsGatherer(news_provider).search(QUERIES + ["more", "even more"])

        urls = [a.url for a in articles]
        assert len(articles) == 15
        assert len(set(urls)) == len(urls)

    @pytest.mark.asyncio
    async def test_request_parameters(self):
        provider = StubNewsProvider()
        provider.search = AsyncMock(return_value=[])
        now = datetime(2026, 10, 19, tzinfo=UTC)

        await NewsGatherer(provider, lookback_days=7, clock=lambda: now).search(["espresso"])

        provider.search.assert_awaited_once_with(
            "espresso",
            since=now - timedelta(days=7),
            page_size=5,
            language="en",
            sort_by="publishedAt",
        )

    @pytest.mark.asyncio
    async def test_duplicate_url_keeps_first_position_last_value(self):
        provider = StubNewsProvider()
        provider.search = AsyncMock(
            side_effect=[
                [_article("https://a.example/1", "first"), _article("https://a.example/2")],
                [_article("https://a.example/1", "second")],
            ]
        )

        articles = await NewsGatherer(provider).search(["q1", "q2"])

        assert [a.url for a in articles] == ["https://a.example/1", "https://a.example/2"]
        assert articles[0].title == "second"

    @pytest.mark.asyncio
    async def test_failed_query_is_skipped(self):
        provider = StubNewsProvider()
        provider.search = AsyncMock(
            side_effect=[RuntimeError("429"), [_article("https://a.example/ok")]]
        )

        articles = await NewsGatherer(provider).search(["q1", "q2"])

        assert [a.url for a in articles] == ["https://a.example/ok"]

    @pytest.mark.asyncio
    async def test_unconfigured_provider_returns_empty(self):
        provider = UnconfiguredNews()
        provider.search = AsyncMock()

        assert await NewsGatherer(provider).search(QUERIES) == []
        provider.search.assert_not_awaited()


class TestDiscussionGatherer:
    """Tests for the sequential discussion search."""

    @pytest.mark.asyncio
    async def test_sorted_by_score_and_unique(self, discussion_provider):
        posts = await DiscussionGatherer(discussion_provider, delay_seconds=0).search(QUERIES)

        scores = [p.score for p in posts]
        urls = [p.url for p in posts]
        assert scores == sorted(scores, reverse=True)
        assert len(set(urls)) == len(urls)
        assert len(posts) == 15

    @pytest.mark.asyncio
    async def test_pauses_between_requests_only(self):
        provider = StubDiscussionProvider()
        calls: list[str] = []

        async def search(query, **kwargs):
            calls.append(query)
            return []

        provider.search = search

        with patch("idea_engine.services.gatherers.asyncio.sleep", new=AsyncMock()) as sleep:
            await DiscussionGatherer(provider, delay_seconds=1.0).search(QUERIES)

        assert calls == QUERIES
        assert sleep.await_count == len(QUERIES) - 1
        sleep.assert_awaited_with(1.0)

    @pytest.mark.asyncio
    async def test_request_parameters(self):
        provider = StubDiscussionProvider()
        provider.search = AsyncMock(return_value=[])

        await DiscussionGatherer(provider, delay_seconds=0).search(["espresso"])

        provider.search.assert_awaited_once_with(
            "espresso", time_range="week", sort="relevance", limit=10
        )

    @pytest.mark.asyncio
    async def test_all_queries_failing_yields_empty(self):
        provider = StubDiscussionProvider()
        provider.search = AsyncMock(side_effect=RuntimeError("blocked"))

        posts = await DiscussionGatherer(provider, delay_seconds=0).search(QUERIES)

        assert posts == []
        assert provider.search.await_count == len(QUERIES)

    @pytest.mark.asyncio
    async def test_duplicates_across_queries_are_merged(self):
        provider = StubDiscussionProvider()
        provider.search = AsyncMock(
            side_effect=[
                [_post("https://r.example/1", 5), _post("https://r.example/2", 50)],
                [_post("https://r.example/1", 500)],
            ]
        )

        posts = await DiscussionGatherer(provider, delay_seconds=0).search(["q1", "q2"])

        assert [(p.url, p.score) for p in posts] == [
            ("https://r.example/1", 500),
            ("https://r.example/2", 50),
        ]


class TestContextStrings:
    """Tests for prompt context rendering."""

    def test_empty_lists(self):
        assert build_news_context([]) == NO_NEWS_CONTEXT
        assert build_discussion_context([]) == NO_DISCUSSIONS_CONTEXT
        assert NO_DISCUSSIONS_CONTEXT == "No recent Reddit discussions found."

    def test_news_lines(self):
        articles = [_article(f"https://a.example/{i}", f"Story {i}") for i in range(12)]

        lines = build_news_context(articles).splitlines()

        assert len(lines) == 10
        assert lines[0] == "- Story 0 (Wire): desc"

    def test_discussion_lines(self):
        context = build_discussion_context([_post("https://r.example/1", 42)])
        assert context == "- r/coffee: Post 42 (42 upvotes)"
