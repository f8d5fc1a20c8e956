"""Discussion search adapters."""

from idea_engine.adapters.discussions.base import DiscussionProvider
from idea_engine.adapters.discussions.reddit import RedditProvider
from idea_engine.adapters.discussions.stub import StubDiscussionProvider

__all__ = ["DiscussionProvider", "RedditProvider", "StubDiscussionProvider"]
