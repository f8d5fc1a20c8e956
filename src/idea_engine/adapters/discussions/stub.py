"""Stub discussion provider for testing."""

from datetime import UTC, datetime
from urllib.parse import quote_plus

from idea_engine.adapters.discussions.base import DiscussionProvider
from idea_engine.domain.models import DiscussionItem
from idea_engine.logging import get_logger

logger = get_logger(__name__)


class StubDiscussionProvider(DiscussionProvider):
    """Returns a few deterministic posts per query."""

    def __init__(self, per_query: int = 3) -> None:
        self.per_query = per_query

    @property
    def name(self) -> str:
        return "stub"

    async def search(
        self,
        query: str,
        time_range: str = "week",  # noqa: ARG002
        sort: str = "relevance",  # noqa: ARG002
        limit: int = 10,
    ) -> list[DiscussionItem]:
        logger.info("stub_discussion_search", query=query)
        slug = quote_plus(query.lower())
        created = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return [
            DiscussionItem(
                title=f"What do you think about {query}? ({i + 1})",
                content=f"Curious how everyone is approaching {query} lately.",
                url=f"https://www.reddit.com/r/stub/comments/{slug}{i}/",
                subreddit="stub",
                score=100 * (i + 1) + len(query),
                created_at=created,
            )
            for i in range(min(self.per_query, limit))
        ]
