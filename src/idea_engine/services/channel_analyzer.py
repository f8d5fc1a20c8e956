"""Channel profile extraction: thumbnail style (vision) and content analysis (JSON)."""

import json

from idea_engine.adapters.llm.base import LLMMessage, LLMProvider, VisionMessage
from idea_engine.domain.errors import AnalysisError
from idea_engine.domain.models import DEFAULT_THUMBNAIL_STYLE, ChannelProfile, Video
from idea_engine.domain.parsers import parse_channel_profile
from idea_engine.logging import get_logger

logger = get_logger(__name__)

THUMBNAIL_SAMPLE_SIZE = 5
DESCRIPTION_CHARS = 500

THUMBNAIL_SYSTEM_PROMPT = """You are a visual style extraction expert creating specifications for DALL-E image generation.
Analyze the provided thumbnails and create a PRECISE, REPRODUCIBLE style guide.
Focus ONLY on patterns that are CONSISTENT across ALL thumbnails - these define the channel's visual identity.
Your output will be used directly by DALL-E to generate new thumbnails that match this exact style.
Be extremely specific about colors, typography, composition, and visual treatment.
Write as if giving direct instructions to an artist who has never seen these thumbnails."""

THUMBNAIL_USER_PROMPT = """You are analyzing YouTube thumbnails to create a precise visual style guide for DALL-E image generation.

Your task: Identify the CONSISTENT patterns across ALL thumbnails. Focus ONLY on what repeats in every thumbnail.

Provide a detailed style specification in this format:

**COLOR PALETTE:**
List exact colors: "bright red", "electric blue #00A3FF", "neon yellow"
Background treatment: "solid blue gradient", "blurred photo", "bright colored backdrop"
Saturation: "heavily oversaturated", "natural colors", "muted pastels"

**TEXT STYLE:**
Font: "extremely bold sans-serif", "thick blocky letters", "modern rounded font"
Size: "text fills 40% of thumbnail", "large dominant headline", "small subtitle"
Placement: "centered at top", "diagonal across center", "bottom-left corner"
Effects: "thick white outline + black shadow", "3D extrusion", "glowing effect", "none"
Colors: "white text on dark background", "yellow with black outline"

**LAYOUT & COMPOSITION:**
Subject placement: "person on right 1/3", "centered close-up face", "full-body left side"
Subject size: "face fills 50% of frame", "small figure in corner", "split 50/50"
Background: "solid gradient", "blurred scene", "clean studio backdrop", "busy pattern"
Elements arrangement: "text above, subject below", "subject left, text right"

**PHOTOGRAPHY STYLE:**
Image type: "professional photo", "3D render", "illustrated cartoon", "screenshot"
Angle: "straight-on eye level", "slight upward angle", "dramatic low angle"
Lighting: "high-key bright", "dramatic side light", "soft even lighting"
Treatment: "high contrast sharp", "slightly soft", "heavy color grading"

**GRAPHIC ELEMENTS:**
Recurring additions: "large red arrow pointing", "yellow circle highlights", "emoji reactions"
Borders/frames: "thin white border", "rounded corners", "vignette edges"
Badges: "red 'NEW' badge top-right", "number counter bottom-left"

Write as direct DALL-E instructions (400-600 words). Be specific and prescriptive. Every detail should be reproducible."""

CONTENT_SYSTEM_PROMPT = (
    "You are a YouTube content analyst. You MUST respond with valid JSON matching the exact "
    "structure requested. All field names must be exactly as specified."
)

CONTENT_USER_PROMPT_TEMPLATE = """Analyze these YouTube videos from a channel and provide a detailed analysis:

Videos:
{videos}

You MUST respond with a JSON object in this EXACT format:
{{
  "topics": ["topic1", "topic2", "topic3"],
  "style": "Educational",
  "tone": "Professional",
  "targetAudience": "description of target audience",
  "contentFormat": "description of content format"
}}

Requirements:
- topics: Array of 3-5 main topics covered (MUST be an array of strings)
- style: Overall content style (e.g., "Educational", "Entertainment", "Tutorial", "Review", "Commentary")
- tone: Communication tone (e.g., "Professional", "Casual", "Humorous", "Energetic", "Calm")
- targetAudience: Detailed description of who watches this content (age, interests, expertise level)
- contentFormat: Format and structure of videos (e.g., "Long-form tutorials", "Quick tips", "Story-driven", "List format")

Analyze the patterns in titles, topics, and how content is presented.
Respond ONLY with valid JSON in the exact format shown above, no other text."""


def render_video_summaries(videos: list[Video]) -> str:
    """Render videos as the numbered list used in the content-analysis prompt."""
    blocks = []
    for i, video in enumerate(videos, start=1):
        tags = ", ".join(video.tags) if video.tags else "None"
        blocks.append(
            f"{i}. Title: {video.title}\n"
            f"   Description: {video.description[:DESCRIPTION_CHARS]}\n"
            f"   Tags: {tags}\n"
            f"   Views: {video.view_count}"
        )
    return "\n\n".join(blocks)


class ChannelAnalyzer:
    """Builds a ChannelProfile from a channel's recent videos.

    Thumbnail style extraction degrades to a default guide on any failure.
    Content analysis does not: without topics and audience the later stages
    have nothing to work from, so its failure ends the run.
    """

    def __init__(
        self,
        llm_provider: LLMProvider,
        model: str | None = None,
    ) -> None:
        self.llm = llm_provider
        self.model = model

    async def analyze(self, videos: list[Video]) -> ChannelProfile:
        """Run both analyses and combine them.

        Raises:
            AnalysisError: If content analysis yields no usable JSON
        """
        thumbnail_style = await self.extract_thumbnail_style(videos)
        return await self.analyze_content(videos, thumbnail_style)

    async def extract_thumbnail_style(self, videos: list[Video]) -> str:
        """Describe the channel's thumbnail look as instructions for an image model.

        Never raises; returns DEFAULT_THUMBNAIL_STYLE when analysis is not possible.
        """
        thumbnail_urls = [v.thumbnail_url for v in videos[:THUMBNAIL_SAMPLE_SIZE] if v.thumbnail_url]

        if not thumbnail_urls:
            logger.info("thumbnail_style_skipped", reason="no_thumbnails")
            return DEFAULT_THUMBNAIL_STYLE

        if not self.llm.supports_vision:
            logger.warning("thumbnail_style_skipped", reason="no_vision", provider=self.llm.name)
            return DEFAULT_THUMBNAIL_STYLE

        messages = [
            VisionMessage(role="system", text=THUMBNAIL_SYSTEM_PROMPT),
            VisionMessage(
                role="user",
                text=THUMBNAIL_USER_PROMPT,
                image_urls=thumbnail_urls,
                image_detail="high",
            ),
        ]

        try:
            response = await self.llm.complete_with_vision(
                messages=messages,
                temperature=0.2,
                max_tokens=3000,
                model=self.model,
            )
        except Exception as e:
            logger.warning("thumbnail_style_failed", error=str(e), thumbnail_count=len(thumbnail_urls))
            return DEFAULT_THUMBNAIL_STYLE

        style = response.content.strip()
        if not style:
            logger.warning("thumbnail_style_empty")
            return DEFAULT_THUMBNAIL_STYLE

        logger.info(
            "thumbnail_style_extracted",
            thumbnail_count=len(thumbnail_urls),
            words=len(style.split()),
        )
        return style

    async def analyze_content(self, videos: list[Video], thumbnail_style: str) -> ChannelProfile:
        """Derive topics, style, tone, audience and format from video metadata.

        Raises:
            AnalysisError: On provider failure, an empty reply, or non-JSON output
        """
        messages = [
            LLMMessage(role="system", content=CONTENT_SYSTEM_PROMPT),
            LLMMessage(
                role="user",
                content=CONTENT_USER_PROMPT_TEMPLATE.format(videos=render_video_summaries(videos)),
            ),
        ]

        try:
            response = await self.llm.complete(
                messages=messages,
                temperature=0.7,
                json_mode=True,
                model=self.model,
            )
        except Exception as e:
            logger.error("channel_analysis_failed", error=str(e))
            raise AnalysisError() from e

        if not response.content.strip():
            logger.error("channel_analysis_empty")
            raise AnalysisError()

        try:
            data = json.loads(response.content)
        except json.JSONDecodeError as e:
            logger.error(
                "channel_analysis_json_parse_error",
                error=str(e),
                content=response.content[:500],
            )
            raise AnalysisError() from e

        profile = parse_channel_profile(data, thumbnail_style)

        logger.info(
            "channel_analyzed",
            topics=list(profile.topics),
            style=profile.style,
            tone=profile.tone,
        )
        return profile
