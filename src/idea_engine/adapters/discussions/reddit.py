"""Reddit search provider (public JSON endpoint, no auth)."""

from datetime import UTC, datetime

import httpx

from idea_engine.adapters.discussions.base import DiscussionProvider
from idea_engine.config import settings
from idea_engine.domain.models import DiscussionItem
from idea_engine.logging import get_logger

logger = get_logger(__name__)

REDDIT_BASE_URL = "https://www.reddit.com"
REDDIT_SEARCH_URL = f"{REDDIT_BASE_URL}/search.json"


class RedditProvider(DiscussionProvider):
    """Searches Reddit's public search endpoint.

    The endpoint is unauthenticated and aggressively rate limited, so callers
    are expected to pace requests.
    """

    def __init__(
        self,
        user_agent: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.user_agent = user_agent or settings.reddit_user_agent
        self.timeout = timeout or settings.reddit_timeout
        self._transport = transport

    @property
    def name(self) -> str:
        return "reddit"

    async def search(
        self,
        query: str,
        time_range: str = "week",
        sort: str = "relevance",
        limit: int = 10,
    ) -> list[DiscussionItem]:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.get(
                REDDIT_SEARCH_URL,
                params={"q": query, "sort": sort, "limit": limit, "t": time_range},
                headers={"User-Agent": self.user_agent},
            )
            response.raise_for_status()
            data = response.json()

        posts = []
        for child in (data.get("data") or {}).get("children") or []:
            post = child.get("data") or {}
            permalink = post.get("permalink")
            if not permalink:
                continue
            created = datetime.fromtimestamp(float(post.get("created_utc") or 0), tz=UTC)
            posts.append(
                DiscussionItem(
                    title=post.get("title") or "",
                    content=post.get("selftext") or "",
                    url=f"{REDDIT_BASE_URL}{permalink}",
                    subreddit=post.get("subreddit") or "",
                    score=int(post.get("score") or 0),
                    created_at=created.isoformat().replace("+00:00", "Z"),
                )
            )
        return posts
