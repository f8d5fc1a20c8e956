"""OpenAI DALL-E 3 image generation provider."""

import httpx

from idea_engine.adapters.image_gen.base import ImageGenProvider, ImageGenRequest, ImageGenResult
from idea_engine.config import get_settings
from idea_engine.logging import get_logger

logger = get_logger(__name__)


class OpenAIDalleProvider(ImageGenProvider):
    """DALL-E 3 image generation via OpenAI API.

    Cost: ~$0.08 per image at 1792x1024 standard, ~$0.12 HD
    """

    # DALL-E 3 supported sizes
    SUPPORTED_SIZES = {
        "16:9": "1792x1024",
        "9:16": "1024x1792",
        "1:1": "1024x1024",
    }

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the DALL-E provider.

        Args:
            api_key: OpenAI API key. If None, uses config setting.
            model: Model to use (dall-e-3 or dall-e-2)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        settings = get_settings()
        self.api_key = api_key or settings.openai_api_key
        self.model = model or settings.image_model
        self.timeout = timeout or settings.image_timeout
        self.base_url = "https://api.openai.com/v1/images/generations"
        self._transport = transport

        if not self.api_key:
            logger.warning("OpenAI API key not configured for DALL-E provider")

    @property
    def name(self) -> str:
        return "dalle3"

    def _get_size(self, request: ImageGenRequest) -> str:
        """Get the DALL-E size for the request."""
        if request.size:
            return request.size

        size = self.SUPPORTED_SIZES.get(request.aspect_ratio)
        if not size:
            logger.warning(
                "unsupported_aspect_ratio",
                aspect_ratio=request.aspect_ratio,
                using_default="1792x1024",
            )
            size = "1792x1024"

        return size

    async def generate(self, request: ImageGenRequest) -> ImageGenResult:
        """Generate an image using DALL-E 3.

        Args:
            request: Image generation request

        Returns:
            ImageGenResult with image URL
        """
        if not self.api_key:
            return ImageGenResult(
                success=False,
                error_message="OpenAI API key not configured",
            )

        size = self._get_size(request)

        logger.info(
            "dalle_generation_started",
            prompt_length=len(request.prompt),
            size=size,
            quality=request.quality,
            model=self.model,
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.base_url,
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json",
                    },
                    json={
                        "model": self.model,
                        "prompt": request.prompt,
                        "n": 1,
                        "size": size,
                        "quality": request.quality,
                        "style": request.style,
                    },
                )

                if response.status_code != 200:
                    try:
                        error_msg = response.json().get("error", {}).get("message", "Unknown error")
                    except ValueError:
                        error_msg = response.text[:200] or "Unknown error"
                    logger.error(
                        "dalle_generation_failed",
                        status_code=response.status_code,
                        error=error_msg,
                    )
                    return ImageGenResult(
                        success=False,
                        error_message=f"DALL-E API error: {error_msg}",
                    )

                data = response.json()

        except httpx.TimeoutException:
            logger.error("dalle_generation_timeout")
            return ImageGenResult(
                success=False,
                error_message="DALL-E API timeout",
            )
        except httpx.HTTPError as e:
            logger.error("dalle_generation_exception", error=str(e))
            return ImageGenResult(
                success=False,
                error_message=f"DALL-E API exception: {str(e)}",
            )

        images = data.get("data") or [{}]
        image_url = images[0].get("url")
        revised_prompt = images[0].get("revised_prompt")

        if not image_url:
            return ImageGenResult(
                success=False,
                error_message="No image URL returned from DALL-E",
            )

        logger.info(
            "dalle_generation_completed",
            image_url_length=len(image_url),
            revised_prompt_length=len(revised_prompt) if revised_prompt else 0,
        )

        return ImageGenResult(
            success=True,
            image_url=image_url,
            metadata={
                "provider": self.name,
                "model": self.model,
                "quality": request.quality,
                "size": size,
                "revised_prompt": revised_prompt,
            },
        )

    async def health_check(self) -> bool:
        """Check if the OpenAI API is accessible."""
        if not self.api_key:
            return False

        try:
            async with httpx.AsyncClient(timeout=10.0, transport=self._transport) as client:
                response = await client.get(
                    "https://api.openai.com/v1/models",
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
                return response.status_code == 200
        except httpx.HTTPError:
            return False
