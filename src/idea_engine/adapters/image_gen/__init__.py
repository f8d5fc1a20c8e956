"""Image generation adapters for thumbnail rendering."""

from idea_engine.adapters.image_gen.base import ImageGenProvider, ImageGenRequest, ImageGenResult
from idea_engine.adapters.image_gen.openai_dalle import OpenAIDalleProvider
from idea_engine.adapters.image_gen.stub import StubImageGenProvider

__all__ = [
    "ImageGenProvider",
    "ImageGenRequest",
    "ImageGenResult",
    "OpenAIDalleProvider",
    "StubImageGenProvider",
]
