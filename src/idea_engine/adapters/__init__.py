"""Adapters for external services."""

from idea_engine.adapters.catalog.base import CatalogProvider
from idea_engine.adapters.discussions.base import DiscussionProvider
from idea_engine.adapters.image_gen.base import ImageGenProvider
from idea_engine.adapters.llm.base import LLMProvider
from idea_engine.adapters.news.base import NewsProvider

__all__ = [
    "CatalogProvider",
    "DiscussionProvider",
    "ImageGenProvider",
    "LLMProvider",
    "NewsProvider",
]
