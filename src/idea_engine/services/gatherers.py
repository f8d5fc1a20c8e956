"""Recent news and discussion gathering.

Both gatherers swallow per-query failures: a run with no context still
produces ideas, just less timely ones.
"""

import asyncio
from datetime import datetime, timedelta

from idea_engine.adapters.discussions.base import DiscussionProvider
from idea_engine.adapters.news.base import NewsProvider
from idea_engine.config import settings
from idea_engine.domain.models import DiscussionItem, NewsItem
from idea_engine.logging import get_logger
from idea_engine.utils.dates import Clock, utc_now

logger = get_logger(__name__)

NEWS_PAGE_SIZE = 5
DISCUSSION_LIMIT = 10
MAX_ITEMS = 15
CONTEXT_ITEMS = 10

NO_NEWS_CONTEXT = "No recent news found."
NO_DISCUSSIONS_CONTEXT = "No recent Reddit discussions found."


class NewsGatherer:
    """Runs all news queries concurrently and merges the results."""

    def __init__(
        self,
        provider: NewsProvider,
        lookback_days: int | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self.provider = provider
        self.lookback_days = lookback_days or settings.news_lookback_days
        self.clock = clock

    async def _search_one(self, query: str, since: datetime) -> list[NewsItem]:
        try:
            return await self.provider.search(
                query,
                since=since,
                page_size=NEWS_PAGE_SIZE,
                language="en",
                sort_by="publishedAt",
            )
        except Exception as e:
            logger.warning("news_query_failed", query=query, error=str(e))
            return []

    async def search(self, queries: list[str] | tuple[str, ...]) -> list[NewsItem]:
        """Search every query in parallel.

        Returns:
            Up to 15 articles, unique by url, in first-seen order
        """
        if not self.provider.is_configured:
            logger.warning("news_search_skipped", reason="not_configured", provider=self.provider.name)
            return []

        since = self.clock() - timedelta(days=self.lookback_days)
        results = await asyncio.gather(*(self._search_one(q, since) for q in queries))

        by_url: dict[str, NewsItem] = {}
        for items in results:
            for item in items:
                if item.url:
                    by_url[item.url] = item

        articles = list(by_url.values())[:MAX_ITEMS]
        logger.info("news_search_completed", queries=len(queries), count=len(articles))
        return articles


class DiscussionGatherer:
    """Runs discussion queries one at a time with a pause between requests.

    Reddit's unauthenticated search rate-limits bursts, so requests are never
    issued concurrently.
    """

    def __init__(
        self,
        provider: DiscussionProvider,
        delay_seconds: float | None = None,
    ) -> None:
        self.provider = provider
        self.delay_seconds = (
            settings.reddit_request_delay_seconds if delay_seconds is None else delay_seconds
        )

    async def search(self, queries: list[str] | tuple[str, ...]) -> list[DiscussionItem]:
        """Search each query in order.

        Returns:
            Up to 15 posts, unique by url, highest score first
        """
        by_url: dict[str, DiscussionItem] = {}

        for i, query in enumerate(queries):
            if i > 0 and self.delay_seconds > 0:
                await asyncio.sleep(self.delay_seconds)
            try:
                items = await self.provider.search(
                    query,
                    time_range="week",
                    sort="relevance",
                    limit=DISCUSSION_LIMIT,
                )
            except Exception as e:
                logger.warning("discussion_query_failed", query=query, error=str(e))
                continue
            for item in items:
                if item.url:
                    by_url[item.url] = item

        posts = sorted(by_url.values(), key=lambda post: post.score, reverse=True)[:MAX_ITEMS]
        logger.info("discussion_search_completed", queries=len(queries), count=len(posts))
        return posts


def build_news_context(articles: list[NewsItem]) -> str:
    """Render articles as prompt context lines."""
    if not articles:
        return NO_NEWS_CONTEXT
    return "\n".join(
        f"- {a.title} ({a.source}): {a.description}" for a in articles[:CONTEXT_ITEMS]
    )


def build_discussion_context(posts: list[DiscussionItem]) -> str:
    """Render posts as prompt context lines."""
    if not posts:
        return NO_DISCUSSIONS_CONTEXT
    return "\n".join(
        f"- r/{p.subreddit}: {p.title} ({p.score} upvotes)" for p in posts[:CONTEXT_ITEMS]
    )
