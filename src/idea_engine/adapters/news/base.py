"""Base interface for news search providers."""

from abc import ABC, abstractmethod
from datetime import datetime

from idea_engine.domain.models import NewsItem


class NewsProvider(ABC):
    """Abstract base class for news search providers.

    Implementations:
    - NewsAPIProvider: newsapi.org /v2/everything
    - StubNewsProvider: Canned articles for testing
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name identifier."""
        ...

    @property
    def is_configured(self) -> bool:
        """Whether the provider has the credentials it needs."""
        return True

    @abstractmethod
    async def search(
        self,
        query: str,
        since: datetime,
        page_size: int = 5,
        language: str = "en",
        sort_by: str = "publishedAt",
    ) -> list[NewsItem]:
        """Search recent articles.

        Args:
            query: Free-text search query
            since: Oldest publish time to include
            page_size: Maximum number of articles
            language: ISO language code
            sort_by: Provider sort order

        Returns:
            Articles in provider order
        """
        ...

    async def health_check(self) -> bool:
        """Check if the provider is available."""
        return True
