"""NewsAPI.org news search provider."""

from datetime import datetime

import httpx

from idea_engine.adapters.news.base import NewsProvider
from idea_engine.config import settings
from idea_engine.domain.models import NewsItem
from idea_engine.logging import get_logger

logger = get_logger(__name__)

NEWS_API_URL = "https://newsapi.org/v2/everything"


class NewsAPIProvider(NewsProvider):
    """Searches the NewsAPI "everything" endpoint."""

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key or settings.news_api_key
        self.timeout = timeout or settings.news_timeout
        self._transport = transport

    @property
    def name(self) -> str:
        return "newsapi"

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def search(
        self,
        query: str,
        since: datetime,
        page_size: int = 5,
        language: str = "en",
        sort_by: str = "publishedAt",
    ) -> list[NewsItem]:
        if not self.api_key:
            raise ValueError("NewsAPI key not configured")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.get(
                NEWS_API_URL,
                params={
                    "q": query,
                    "language": language,
                    "sortBy": sort_by,
                    "from": since.isoformat(),
                    "pageSize": page_size,
                },
                headers={"X-Api-Key": self.api_key},
            )
            response.raise_for_status()
            data = response.json()

        articles = []
        for article in data.get("articles") or []:
            url = article.get("url")
            if not url:
                continue
            articles.append(
                NewsItem(
                    title=article.get("title") or "",
                    description=article.get("description") or "",
                    url=url,
                    published_at=article.get("publishedAt") or "",
                    source=(article.get("source") or {}).get("name") or "",
                )
            )
        return articles

    async def health_check(self) -> bool:
        return self.is_configured
