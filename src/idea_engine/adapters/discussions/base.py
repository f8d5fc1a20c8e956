"""Base interface for discussion search providers."""

from abc import ABC, abstractmethod

from idea_engine.domain.models import DiscussionItem


class DiscussionProvider(ABC):
    """Abstract base class for discussion search providers.

    Implementations:
    - RedditProvider: Reddit public search.json endpoint
    - StubDiscussionProvider: Canned posts for testing
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name identifier."""
        ...

    @abstractmethod
    async def search(
        self,
        query: str,
        time_range: str = "week",
        sort: str = "relevance",
        limit: int = 10,
    ) -> list[DiscussionItem]:
        """Search recent posts.

        Args:
            query: Free-text search query
            time_range: Recency window ("day", "week", "month")
            sort: Provider sort order
            limit: Maximum number of posts

        Returns:
            Posts in provider order
        """
        ...

    async def health_check(self) -> bool:
        """Check if the provider is available."""
        return True
