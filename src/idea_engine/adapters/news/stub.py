"""Stub news provider for testing."""

from datetime import datetime
from urllib.parse import quote_plus

from idea_engine.adapters.news.base import NewsProvider
from idea_engine.domain.models import NewsItem
from idea_engine.logging import get_logger

logger = get_logger(__name__)


class StubNewsProvider(NewsProvider):
    """Returns a few deterministic articles per query."""

    def __init__(self, per_query: int = 3) -> None:
        self.per_query = per_query

    @property
    def name(self) -> str:
        return "stub"

    async def search(
        self,
        query: str,
        since: datetime,
        page_size: int = 5,
        language: str = "en",  # noqa: ARG002
        sort_by: str = "publishedAt",  # noqa: ARG002
    ) -> list[NewsItem]:
        logger.info("stub_news_search", query=query)
        slug = quote_plus(query.lower())
        return [
            NewsItem(
                title=f"{query}: development #{i + 1}",
                description=f"What changed this week around {query}.",
                url=f"https://news.example.com/{slug}/{i}",
                published_at=since.isoformat(),
                source="Example News",
            )
            for i in range(min(self.per_query, page_size))
        ]
