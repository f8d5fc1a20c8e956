"""Tests for the IdeaGenerator service."""

import json
from unittest.mock import AsyncMock

import pytest

from idea_engine.adapters.llm.base import LLMResponse
from idea_engine.adapters.llm.stub import StubLLMProvider
from idea_engine.domain.errors import IdeaGenerationError
from idea_engine.domain.models import ChannelProfile
from idea_engine.services.gatherers import NO_DISCUSSIONS_CONTEXT, NO_NEWS_CONTEXT
from idea_engine.services.idea_generator import IdeaGenerator

TITLES = [f"Old video {i}" for i in range(8)]


@pytest.fixture
def profile():
    return ChannelProfile(topics=("Trail Running", "Ultramarathons"), tone="Energetic")


@pytest.fixture
def idea_generator(llm_provider):
    """Get an IdeaGenerator with stub LLM."""
    return IdeaGenerator(llm_provider)


class TestIdeaGenerator:
    """Tests for idea generation."""

    @pytest.mark.asyncio
    async def test_generate_returns_five_ideas(self, idea_generator, profile):
        ideas = await idea_generator.generate(profile, TITLES, NO_NEWS_CONTEXT, NO_DISCUSSIONS_CONTEXT)

        assert len(ideas) == 5
        assert all(idea.title and idea.thumbnail_prompt and idea.video_description for idea in ideas)
        assert ideas[0].title.startswith("Trail Running")

    @pytest.mark.asyncio
    async def test_prompt_contents(self, profile):
        llm = StubLLMProvider()
        llm.complete = AsyncMock(
            return_value=LLMResponse(content=json.dumps({"ideas": [{"title": "x"}]}), model="m")
        )

        await IdeaGenerator(llm).generate(profile, TITLES, "- Big race (Wire): record", NO_DISCUSSIONS_CONTEXT)

        kwargs = llm.complete.await_args.kwargs
        user = kwargs["messages"][1].content
        assert kwargs["temperature"] == 0.9
        assert kwargs["json_mode"] is True
        assert "- Topics: Trail Running, Ultramarathons" in user
        assert "- Old video 4" in user
        assert "- Old video 5" not in user
        assert "- Big race (Wire): record" in user
        assert NO_DISCUSSIONS_CONTEXT in user

    @pytest.mark.asyncio
    async def test_partial_reply_is_padded(self, profile):
        llm = StubLLMProvider()
        llm.complete = AsyncMock(
            return_value=LLMResponse(
                content=json.dumps(
                    {"ideas": [{"title": "Race Day Fueling", "thumbnailPrompt": "Runner eating gel"}]}
                ),
                model="m",
            )
        )

        ideas = await IdeaGenerator(llm).generate(profile, [], NO_NEWS_CONTEXT, NO_DISCUSSIONS_CONTEXT)

        assert len(ideas) == 5
        assert ideas[0].thumbnail_prompt == "Runner eating gel"
        assert ideas[0].video_description == "Detailed video description coming soon."
        assert ideas[3].title == "Video Idea 4"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content", ["", "nope", json.dumps({"ideas": []}), json.dumps({"topics": []})]
    )
    async def test_unusable_reply_raises(self, profile, content):
        llm = StubLLMProvider()
        llm.complete = AsyncMock(return_value=LLMResponse(content=content, model="m"))

        with pytest.raises(IdeaGenerationError) as exc_info:
            await IdeaGenerator(llm).generate(profile, [], NO_NEWS_CONTEXT, NO_DISCUSSIONS_CONTEXT)

        assert str(exc_info.value) == "Failed to generate video ideas"

    @pytest.mark.asyncio
    async def test_provider_failure_raises(self, profile):
        llm = StubLLMProvider()
        llm.complete = AsyncMock(side_effect=RuntimeError("overloaded"))

        with pytest.raises(IdeaGenerationError, match="Failed to generate video ideas"):
            await IdeaGenerator(llm).generate(profile, [], NO_NEWS_CONTEXT, NO_DISCUSSIONS_CONTEXT)
