"""Thumbnail rendering for generated ideas."""

from collections.abc import Awaitable, Callable
from dataclasses import replace

from idea_engine.adapters.image_gen.base import ImageGenProvider, ImageGenRequest
from idea_engine.domain.models import PLACEHOLDER_THUMBNAIL_URL, VideoIdea
from idea_engine.logging import get_logger

logger = get_logger(__name__)

# Called with a human-readable status line
ThumbnailProgress = Callable[[str], Awaitable[None]]

THUMBNAIL_PROMPT_TEMPLATE = """YouTube video thumbnail, 16:9 widescreen format, professional quality.

MANDATORY STYLE SPECIFICATIONS (DO NOT DEVIATE):
{style_guide}

THUMBNAIL CONTENT:
{content}

STRICT INSTRUCTIONS: Reproduce the style specifications above exactly. Match the color palette, \
text treatment, layout, photography style and graphic elements precisely. The thumbnail must look \
like it belongs to the same channel as the analyzed examples. Show only the content described above."""


def build_thumbnail_prompt(content_prompt: str, style_guide: str) -> str:
    """Combine an idea's content prompt with the channel's style guide."""
    return THUMBNAIL_PROMPT_TEMPLATE.format(
        style_guide=style_guide.strip(),
        content=content_prompt.strip(),
    )


class ThumbnailRenderer:
    """Renders one thumbnail per idea, substituting a placeholder on failure."""

    def __init__(self, image_provider: ImageGenProvider) -> None:
        self.image_provider = image_provider

    async def render(self, content_prompt: str, style_guide: str) -> str:
        """Render a single thumbnail.

        Returns:
            The image URL, or PLACEHOLDER_THUMBNAIL_URL if generation failed
        """
        request = ImageGenRequest(
            prompt=build_thumbnail_prompt(content_prompt, style_guide),
            aspect_ratio="16:9",
            quality="hd",
            style="natural",
            size="1792x1024",
        )

        try:
            result = await self.image_provider.generate(request)
        except Exception as e:
            logger.warning("thumbnail_render_exception", provider=self.image_provider.name, error=str(e))
            return PLACEHOLDER_THUMBNAIL_URL

        if not result.success or not result.image_url:
            logger.warning(
                "thumbnail_render_failed",
                provider=self.image_provider.name,
                error=result.error_message,
            )
            return PLACEHOLDER_THUMBNAIL_URL

        return result.image_url

    async def render_all(
        self,
        ideas: list[VideoIdea],
        style_guide: str,
        on_progress: ThumbnailProgress | None = None,
    ) -> list[VideoIdea]:
        """Render thumbnails one idea at a time, in order.

        Returns:
            New VideoIdea records with thumbnail_url set
        """
        total = len(ideas)
        rendered: list[VideoIdea] = []

        for i, idea in enumerate(ideas, start=1):
            if on_progress:
                await on_progress(f"Generating thumbnail {i}/{total}...")

            url = await self.render(idea.thumbnail_prompt, style_guide)
            rendered.append(replace(idea, thumbnail_url=url))

            if url != PLACEHOLDER_THUMBNAIL_URL and on_progress:
                await on_progress(f"Thumbnail {i}/{total} ready")

        logger.info(
            "thumbnails_rendered",
            total=total,
            placeholders=sum(1 for idea in rendered if idea.thumbnail_url == PLACEHOLDER_THUMBNAIL_URL),
        )
        return rendered
