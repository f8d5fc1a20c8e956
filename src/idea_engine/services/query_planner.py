"""Search query planning for the news and discussion gatherers."""

import json

from idea_engine.adapters.llm.base import LLMMessage, LLMProvider
from idea_engine.config import settings
from idea_engine.domain.errors import QueryPlanningError
from idea_engine.domain.models import ChannelProfile, QueryPlan
from idea_engine.domain.parsers import parse_query_plan
from idea_engine.logging import get_logger
from idea_engine.utils.dates import Clock, DateInfo, current_date_info, utc_now

logger = get_logger(__name__)

SYSTEM_PROMPT_TEMPLATE = (
    "You are a search query expert who writes queries that surface the most recent, "
    "trending content. Today's date is {date}. Every query you write must target {year} "
    "content. Never reference past years. You always respond with valid JSON."
)

USER_PROMPT_TEMPLATE = """Write search queries that find the LATEST trending content for a YouTube channel.

CURRENT DATE: {date}
CURRENT YEAR: {year}

Channel profile:
- Topics: {topics}
- Style: {style}
- Target audience: {audience}

Write exactly 5 NewsAPI queries and exactly 5 Reddit queries.

Rules:
- Use recency words such as "latest", "today", "this week", "recent" and "new"
- Mention {year} or {month} {year} where it helps narrow results to current events
- Cover different angles of the channel's topics, no near-duplicates
- Keep each query short (2-6 words) and natural, the way a person would search
- Reddit queries should read like questions or discussion titles people post

Respond with JSON in exactly this format:
{{
  "newsQueries": ["query1", "query2", "query3", "query4", "query5"],
  "redditQueries": ["query1", "query2", "query3", "query4", "query5"]
}}"""


class QueryPlanner:
    """Turns a channel profile into five news and five discussion queries."""

    def __init__(
        self,
        llm_provider: LLMProvider,
        model: str | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self.llm = llm_provider
        self.model = model or settings.openai_fast_model
        self.clock = clock

    def build_messages(self, profile: ChannelProfile, today: DateInfo) -> list[LLMMessage]:
        return [
            LLMMessage(
                role="system",
                content=SYSTEM_PROMPT_TEMPLATE.format(date=today.date, year=today.year),
            ),
            LLMMessage(
                role="user",
                content=USER_PROMPT_TEMPLATE.format(
                    date=today.date,
                    year=today.year,
                    month=today.month,
                    topics=profile.topics_text,
                    style=profile.style,
                    audience=profile.target_audience,
                ),
            ),
        ]

    async def plan(self, profile: ChannelProfile) -> QueryPlan:
        """Generate the query plan for a channel.

        Short or malformed query lists are replaced wholesale by a plan
        derived from the topics; see parse_query_plan.

        Raises:
            QueryPlanningError: On provider failure, an empty reply, or non-JSON output
        """
        # Captured per call, never at import
        today = current_date_info(self.clock)
        messages = self.build_messages(profile, today)

        try:
            response = await self.llm.complete(
                messages=messages,
                temperature=0.8,
                json_mode=True,
                model=self.model,
            )
        except Exception as e:
            logger.error("query_planning_failed", error=str(e))
            raise QueryPlanningError() from e

        if not response.content.strip():
            logger.error("query_planning_empty")
            raise QueryPlanningError()

        try:
            data = json.loads(response.content)
        except json.JSONDecodeError as e:
            logger.error(
                "query_planning_json_parse_error",
                error=str(e),
                content=response.content[:500],
            )
            raise QueryPlanningError() from e

        if not isinstance(data, dict):
            logger.error("query_planning_not_an_object", kind=type(data).__name__)
            raise QueryPlanningError()

        plan = parse_query_plan(data, profile.topics_text)

        if plan.is_fallback:
            logger.warning("query_plan_fallback_used", topics=profile.topics_text)

        logger.info(
            "queries_planned",
            news=list(plan.news_queries),
            discussions=list(plan.discussion_queries),
            year=today.year,
        )
        return plan
