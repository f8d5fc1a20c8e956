"""Video idea generation from a channel profile and current context."""

import json

from idea_engine.adapters.llm.base import LLMMessage, LLMProvider
from idea_engine.domain.errors import IdeaGenerationError
from idea_engine.domain.models import ChannelProfile, VideoIdea
from idea_engine.domain.parsers import IDEA_COUNT, parse_video_ideas
from idea_engine.logging import get_logger

logger = get_logger(__name__)

REFERENCE_TITLE_COUNT = 5

SYSTEM_PROMPT = """You are a YouTube content strategist who creates video ideas that fit a channel and ride current trends.

Each idea you create has three parts:
1. A title that is clickable without being misleading
2. A thumbnail content prompt describing ONLY what appears in the image (subjects, objects, text, composition). It never mentions colors, fonts, lighting or artistic style, because the channel's visual style is applied separately.
3. A video description written as three paragraphs: a hook, the main points, and a call to action.

You always respond with valid JSON."""

USER_PROMPT_TEMPLATE = """Create {count} video ideas for this YouTube channel.

CHANNEL PROFILE:
- Topics: {topics}
- Style: {style}
- Tone: {tone}
- Target audience: {audience}
- Content format: {content_format}

RECENT VIDEO TITLES (for reference):
{titles}

TRENDING NEWS:
{news}

TRENDING REDDIT DISCUSSIONS:
{discussions}

Requirements:
- Every idea fits the channel's topics, style and tone
- Build on the news and discussions above where they are relevant
- Do not repeat any of the recent video titles

thumbnailPrompt rules:
- At most 100 words
- Describe only content: who or what is shown, their expression or action, any text overlay and where things sit in the frame
- No style words: no colors, fonts, lighting, camera or art-style terms
- GOOD: "Surprised man holding a cracked smartphone, large text 'IT BROKE?!' on the left, a second phone in the background"
- BAD: "Vibrant red and yellow image with dramatic lighting and bold font showing a man with a phone"

videoDescription rules:
- Exactly three paragraphs separated by a blank line
- Paragraph 1: the hook, why a viewer should care right now
- Paragraph 2: the main points the video covers
- Paragraph 3: a call to action

Respond with JSON in exactly this format:
{{
  "ideas": [
    {{
      "title": "Video title",
      "thumbnailPrompt": "What the thumbnail shows",
      "videoDescription": "Hook paragraph\\n\\nMain points paragraph\\n\\nCall to action paragraph"
    }}
  ]
}}

The "ideas" array must contain exactly {count} objects."""


class IdeaGenerator:
    """Generates exactly five video ideas per run."""

    def __init__(
        self,
        llm_provider: LLMProvider,
        model: str | None = None,
    ) -> None:
        self.llm = llm_provider
        self.model = model

    def build_messages(
        self,
        profile: ChannelProfile,
        reference_titles: list[str],
        news_context: str,
        discussion_context: str,
    ) -> list[LLMMessage]:
        titles = "\n".join(f"- {t}" for t in reference_titles[:REFERENCE_TITLE_COUNT]) or "None"
        return [
            LLMMessage(role="system", content=SYSTEM_PROMPT),
            LLMMessage(
                role="user",
                content=USER_PROMPT_TEMPLATE.format(
                    count=IDEA_COUNT,
                    topics=profile.topics_text,
                    style=profile.style,
                    tone=profile.tone,
                    audience=profile.target_audience,
                    content_format=profile.content_format,
                    titles=titles,
                    news=news_context,
                    discussions=discussion_context,
                ),
            ),
        ]

    async def generate(
        self,
        profile: ChannelProfile,
        reference_titles: list[str],
        news_context: str,
        discussion_context: str,
    ) -> list[VideoIdea]:
        """Generate ideas, repairing or padding the model's answer to exactly five.

        Raises:
            IdeaGenerationError: On provider failure, non-JSON output, or a missing ideas array
        """
        messages = self.build_messages(profile, reference_titles, news_context, discussion_context)

        try:
            response = await self.llm.complete(
                messages=messages,
                temperature=0.9,
                json_mode=True,
                model=self.model,
            )
        except Exception as e:
            logger.error("idea_generation_failed", error=str(e))
            raise IdeaGenerationError() from e

        if not response.content.strip():
            logger.error("idea_generation_empty")
            raise IdeaGenerationError()

        try:
            data = json.loads(response.content)
        except json.JSONDecodeError as e:
            logger.error(
                "idea_generation_json_parse_error",
                error=str(e),
                content=response.content[:500],
            )
            raise IdeaGenerationError() from e

        try:
            ideas = parse_video_ideas(data)
        except IdeaGenerationError as e:
            logger.error("idea_generation_invalid_structure", error=str(e))
            raise IdeaGenerationError() from e

        logger.info("ideas_generated", count=len(ideas), titles=[idea.title for idea in ideas])
        return ideas
