"""News search adapters."""

from idea_engine.adapters.news.base import NewsProvider
from idea_engine.adapters.news.newsapi import NewsAPIProvider
from idea_engine.adapters.news.stub import StubNewsProvider

__all__ = ["NewsAPIProvider", "NewsProvider", "StubNewsProvider"]
