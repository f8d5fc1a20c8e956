"""API route modules."""

from idea_engine.api.routes import analysis, health

__all__ = ["analysis", "health"]
