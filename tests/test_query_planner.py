"""Tests for the QueryPlanner service."""

import json
from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from idea_engine.adapters.llm.base import LLMResponse
from idea_engine.adapters.llm.stub import StubLLMProvider
from idea_engine.domain.errors import QueryPlanningError
from idea_engine.domain.models import ChannelProfile
from idea_engine.services.query_planner import QueryPlanner


def fixed_clock() -> datetime:
    return datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


@pytest.fixture
def profile():
    return ChannelProfile(topics=("Home Espresso", "Coffee Gear"), style="Review")


def _llm_returning(content: str) -> StubLLMProvider:
    llm = StubLLMProvider()
    llm.complete = AsyncMock(return_value=LLMResponse(content=content, model="m"))
    return llm


class TestQueryPlanner:
    """Tests for query plan generation."""

    @pytest.mark.asyncio
    async def test_stub_plan_has_five_of_each(self, llm_provider, profile):
        plan = await QueryPlanner(llm_provider, clock=fixed_clock).plan(profile)

        assert len(plan.news_queries) == 5
        assert len(plan.discussion_queries) == 5
        assert plan.is_fallback is False
        assert plan.total == 10
        assert "Home Espresso" in plan.news_queries[0]

    @pytest.mark.asyncio
    async def test_prompt_carries_current_date(self, profile):
        llm = _llm_returning(json.dumps({"newsQueries": [], "redditQueries": []}))

        await QueryPlanner(llm, model="fast-model", clock=fixed_clock).plan(profile)

        kwargs = llm.complete.await_args.kwargs
        system, user = kwargs["messages"]
        assert "October 19, 2026" in system.content
        assert "CURRENT YEAR: 2026" in user.content
        assert "- Topics: Home Espresso, Coffee Gear" in user.content
        assert kwargs["temperature"] == 0.8
        assert kwargs["json_mode"] is True
        assert kwargs["model"] == "fast-model"

    @pytest.mark.asyncio
    async def test_short_reply_falls_back_entirely(self, profile):
        llm = _llm_returning(
            json.dumps(
                {
                    "newsQueries": ["a", "b", "c", "d", "e"],
                    "redditQueries": ["f", "g"],
                }
            )
        )

        plan = await QueryPlanner(llm, clock=fixed_clock).plan(profile)

        assert plan.is_fallback is True
        assert plan.news_queries[0] == "Home Espresso, Coffee Gear"
        assert plan.discussion_queries[1] == "Home Espresso, Coffee Gear discussion"

    @pytest.mark.asyncio
    async def test_default_topics_still_yield_full_plan(self):
        llm = _llm_returning(json.dumps({}))

        plan = await QueryPlanner(llm, clock=fixed_clock).plan(ChannelProfile(topics=()))

        assert plan.news_queries[0] == "general content"
        assert len(plan.news_queries) == 5
        assert len(plan.discussion_queries) == 5

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "{not json", '"just a string"'])
    async def test_unusable_reply_raises(self, profile, content):
        llm = _llm_returning(content)

        with pytest.raises(QueryPlanningError, match="Failed to generate search queries"):
            await QueryPlanner(llm, clock=fixed_clock).plan(profile)

    @pytest.mark.asyncio
    async def test_provider_failure_raises(self, profile):
        llm = StubLLMProvider()
        llm.complete = AsyncMock(side_effect=TimeoutError())

        with pytest.raises(QueryPlanningError):
            await QueryPlanner(llm, clock=fixed_clock).plan(profile)
