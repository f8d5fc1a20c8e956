"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app modules
os.environ["LLM_PROVIDER"] = "stub"
os.environ["IMAGE_PROVIDER"] = "stub"
os.environ["CATALOG_PROVIDER"] = "stub"
os.environ["NEWS_PROVIDER"] = "stub"
os.environ["DISCUSSION_PROVIDER"] = "stub"
os.environ["REDDIT_REQUEST_DELAY_SECONDS"] = "0"
os.environ["LOG_LEVEL"] = "WARNING"


@pytest.fixture(scope="session")
def test_client() -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI app."""
    from idea_engine.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def llm_provider():
    """Get a stub LLM provider."""
    from idea_engine.adapters.llm.stub import StubLLMProvider

    return StubLLMProvider()


@pytest.fixture
def image_provider():
    """Get a stub image generation provider."""
    from idea_engine.adapters.image_gen.stub import StubImageGenProvider

    return StubImageGenProvider()


@pytest.fixture
def catalog_provider():
    """Get a stub catalog provider with 30 uploads (every third a Short)."""
    from idea_engine.adapters.catalog.stub import StubCatalogProvider

    return StubCatalogProvider()


@pytest.fixture
def news_provider():
    """Get a stub news provider."""
    from idea_engine.adapters.news.stub import StubNewsProvider

    return StubNewsProvider()


@pytest.fixture
def discussion_provider():
    """Get a stub discussion provider."""
    from idea_engine.adapters.discussions.stub import StubDiscussionProvider

    return StubDiscussionProvider()


@pytest.fixture
def pipeline(llm_provider, image_provider, catalog_provider, news_provider, discussion_provider):
    """Get an analysis pipeline wired to stub providers."""
    from idea_engine.services.pipeline import AnalysisPipeline

    return AnalysisPipeline(
        llm=llm_provider,
        image_gen=image_provider,
        catalog=catalog_provider,
        news=news_provider,
        discussions=discussion_provider,
        discussion_delay_seconds=0,
    )
