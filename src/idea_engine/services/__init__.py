"""Application services."""

from idea_engine.services.catalog import CatalogResolver
from idea_engine.services.channel_analyzer import ChannelAnalyzer
from idea_engine.services.gatherers import DiscussionGatherer, NewsGatherer
from idea_engine.services.idea_generator import IdeaGenerator
from idea_engine.services.pipeline import AnalysisPipeline, PipelineRun
from idea_engine.services.query_planner import QueryPlanner
from idea_engine.services.thumbnails import ThumbnailRenderer

__all__ = [
    "AnalysisPipeline",
    "CatalogResolver",
    "ChannelAnalyzer",
    "DiscussionGatherer",
    "IdeaGenerator",
    "NewsGatherer",
    "PipelineRun",
    "QueryPlanner",
    "ThumbnailRenderer",
]
