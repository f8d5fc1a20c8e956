"""Stub image generation provider for testing."""

import asyncio
from urllib.parse import quote_plus
from uuid import uuid4

from idea_engine.adapters.image_gen.base import ImageGenProvider, ImageGenRequest, ImageGenResult
from idea_engine.logging import get_logger

logger = get_logger(__name__)


class StubImageGenProvider(ImageGenProvider):
    """Stub provider that returns placeholder images for testing.

    Simulates image generation without making API calls.
    """

    def __init__(self, latency_ms: int = 0) -> None:
        """Initialize the stub provider.

        Args:
            latency_ms: Simulated latency in milliseconds
        """
        self.latency_ms = latency_ms

    @property
    def name(self) -> str:
        return "stub"

    async def generate(self, request: ImageGenRequest) -> ImageGenResult:
        """Return a placeholder image URL sized for the request."""
        if self.latency_ms:
            await asyncio.sleep(self.latency_ms / 1000)

        image_id = uuid4().hex[:8]
        size = request.size or self.get_aspect_ratio_size(request.aspect_ratio)
        label = quote_plus(f"Thumbnail {image_id}")
        placeholder_url = f"https://placehold.co/{size}/1a1a1a/ffffff?text={label}"

        logger.info(
            "stub_image_generated",
            prompt_length=len(request.prompt),
            aspect_ratio=request.aspect_ratio,
            image_id=image_id,
        )

        return ImageGenResult(
            success=True,
            image_url=placeholder_url,
            metadata={
                "provider": self.name,
                "prompt": request.prompt[:100],
                "aspect_ratio": request.aspect_ratio,
                "image_id": image_id,
                "is_placeholder": True,
            },
        )
