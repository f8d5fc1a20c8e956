"""Channel analysis pipeline service."""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from pydantic import ValidationError

from idea_engine.adapters.catalog.base import CatalogProvider
from idea_engine.adapters.catalog.stub import StubCatalogProvider
from idea_engine.adapters.discussions.base import DiscussionProvider
from idea_engine.adapters.discussions.stub import StubDiscussionProvider
from idea_engine.adapters.image_gen.base import ImageGenProvider
from idea_engine.adapters.image_gen.stub import StubImageGenProvider
from idea_engine.adapters.llm.base import LLMProvider
from idea_engine.adapters.llm.stub import StubLLMProvider
from idea_engine.adapters.news.base import NewsProvider
from idea_engine.adapters.news.stub import StubNewsProvider
from idea_engine.config import settings
from idea_engine.domain.enums import PipelineStage
from idea_engine.domain.errors import NoVideosFoundError, PipelineError, ResultValidationError
from idea_engine.domain.models import AnalysisResult
from idea_engine.domain.schemas import (
    NEWS_DISPLAY_COUNT,
    REDDIT_DISPLAY_COUNT,
    VIDEO_DISPLAY_COUNT,
    AnalysisResultSchema,
    format_validation_error,
)
from idea_engine.logging import bind_run_context, clear_run_context, get_logger
from idea_engine.services.catalog import CatalogResolver
from idea_engine.services.channel_analyzer import ChannelAnalyzer
from idea_engine.services.gatherers import (
    DiscussionGatherer,
    NewsGatherer,
    build_discussion_context,
    build_news_context,
)
from idea_engine.services.idea_generator import IdeaGenerator
from idea_engine.services.query_planner import QueryPlanner
from idea_engine.services.thumbnails import ThumbnailRenderer
from idea_engine.utils.dates import utc_now

logger = get_logger(__name__)

# on_progress(step, message), e.g. ("3/7", "Generating search queries...")
ProgressCallback = Callable[[str, str], Awaitable[None]]


@dataclass
class PipelineRun:
    """Bookkeeping for a single analysis run."""

    channel_url: str
    run_id: str = field(default_factory=lambda: uuid4().hex[:12])
    stage: PipelineStage = PipelineStage.PENDING
    started_at: datetime = field(default_factory=utc_now)

    @property
    def elapsed_seconds(self) -> float:
        return (utc_now() - self.started_at).total_seconds()


class AnalysisPipeline:
    """Orchestrates the end-to-end channel analysis.

    Stages run strictly in order:
    1. Fetch the channel's recent non-Short videos
    2. Extract thumbnail style and analyze content
    3. Plan news and discussion search queries
    4. Search news and discussions (concurrently)
    5. Generate five video ideas
    6. Render a thumbnail per idea
    7. Validate the assembled result

    The pipeline knows nothing about transports; callers observe progress
    through the on_progress callback passed to run().
    """

    def __init__(
        self,
        llm: LLMProvider | None = None,
        image_gen: ImageGenProvider | None = None,
        catalog: CatalogProvider | None = None,
        news: NewsProvider | None = None,
        discussions: DiscussionProvider | None = None,
        video_count: int | None = None,
        discussion_delay_seconds: float | None = None,
    ) -> None:
        """Initialize the pipeline with adapters.

        Args:
            llm: Text and vision completion provider (defaults from settings)
            image_gen: Thumbnail image provider (defaults from settings)
            catalog: Video catalog provider (defaults from settings)
            news: News search provider (defaults from settings)
            discussions: Discussion search provider (defaults from settings)
            video_count: Number of videos to analyze
            discussion_delay_seconds: Pause between discussion searches
        """
        self.llm = llm or self._get_llm_provider()
        self.image_gen = image_gen or self._get_image_provider()
        self.catalog = catalog or self._get_catalog_provider()
        self.news = news or self._get_news_provider()
        self.discussions = discussions or self._get_discussion_provider()
        self.video_count = video_count or settings.video_fetch_count

        self.resolver = CatalogResolver(self.catalog)
        self.analyzer = ChannelAnalyzer(self.llm)
        self.planner = QueryPlanner(self.llm)
        self.news_gatherer = NewsGatherer(self.news)
        self.discussion_gatherer = DiscussionGatherer(
            self.discussions, delay_seconds=discussion_delay_seconds
        )
        self.idea_generator = IdeaGenerator(self.llm)
        self.thumbnails = ThumbnailRenderer(self.image_gen)

        logger.info(
            "analysis_pipeline_initialized",
            llm=self.llm.name,
            image_gen=self.image_gen.name,
            catalog=self.catalog.name,
            news=self.news.name,
            discussions=self.discussions.name,
        )

    def _get_llm_provider(self) -> LLMProvider:
        """Get the configured LLM provider."""
        provider_name = settings.llm_provider.lower()

        if provider_name == "stub":
            return StubLLMProvider()
        elif provider_name == "openai":
            from idea_engine.adapters.llm.openai import OpenAIProvider

            return OpenAIProvider()

        logger.warning("unknown_provider", kind="llm", provider=provider_name, using="stub")
        return StubLLMProvider()

    def _get_image_provider(self) -> ImageGenProvider:
        """Get the configured image generation provider."""
        provider_name = settings.image_provider.lower()

        if provider_name == "stub":
            return StubImageGenProvider()
        elif provider_name == "openai":
            from idea_engine.adapters.image_gen.openai_dalle import OpenAIDalleProvider

            return OpenAIDalleProvider()

        logger.warning("unknown_provider", kind="image", provider=provider_name, using="stub")
        return StubImageGenProvider()

    def _get_catalog_provider(self) -> CatalogProvider:
        """Get the configured video catalog provider."""
        provider_name = settings.catalog_provider.lower()

        if provider_name == "stub":
            return StubCatalogProvider()
        elif provider_name == "youtube":
            from idea_engine.adapters.catalog.youtube import YouTubeCatalogProvider

            return YouTubeCatalogProvider()

        logger.warning("unknown_provider", kind="catalog", provider=provider_name, using="stub")
        return StubCatalogProvider()

    def _get_news_provider(self) -> NewsProvider:
        """Get the configured news provider."""
        provider_name = settings.news_provider.lower()

        if provider_name == "stub":
            return StubNewsProvider()
        elif provider_name == "newsapi":
            from idea_engine.adapters.news.newsapi import NewsAPIProvider

            return NewsAPIProvider()

        logger.warning("unknown_provider", kind="news", provider=provider_name, using="stub")
        return StubNewsProvider()

    def _get_discussion_provider(self) -> DiscussionProvider:
        """Get the configured discussion provider."""
        provider_name = settings.discussion_provider.lower()

        if provider_name == "stub":
            return StubDiscussionProvider()
        elif provider_name == "reddit":
            from idea_engine.adapters.discussions.reddit import RedditProvider

            return RedditProvider()

        logger.warning("unknown_provider", kind="discussions", provider=provider_name, using="stub")
        return StubDiscussionProvider()

    def _enter(self, run: PipelineRun, stage: PipelineStage) -> None:
        logger.info("pipeline_stage_entered", stage=stage.value, previous=run.stage.value)
        run.stage = stage

    async def run(
        self,
        channel_url: str,
        on_progress: ProgressCallback | None = None,
    ) -> AnalysisResult:
        """Analyze a channel and generate video ideas.

        Args:
            channel_url: YouTube channel URL
            on_progress: Awaited with (step, message) before and after each stage

        Returns:
            The validated AnalysisResult

        Raises:
            PipelineError: If any stage fails. Errors that are not already
                PipelineErrors are wrapped, keeping their message.
        """
        run = PipelineRun(channel_url=channel_url)
        bind_run_context(run_id=run.run_id, channel_url=channel_url)
        logger.info("pipeline_run_started")

        async def emit(step: str, message: str) -> None:
            if on_progress:
                await on_progress(step, message)

        try:
            result = await self._execute(run, emit)
        except asyncio.CancelledError:
            logger.warning("pipeline_run_cancelled", stage=run.stage.value)
            run.stage = PipelineStage.FAILED
            raise
        except PipelineError as e:
            self._fail(run, e)
            raise
        except Exception as e:
            self._fail(run, e)
            raise PipelineError(str(e)) from e
        finally:
            clear_run_context("run_id", "channel_url")

        return result

    def _fail(self, run: PipelineRun, error: Exception) -> None:
        logger.error(
            "pipeline_run_failed",
            stage=run.stage.value,
            error=str(error),
            error_type=type(error).__name__,
            elapsed_seconds=round(run.elapsed_seconds, 2),
        )
        run.stage = PipelineStage.FAILED

    async def _execute(self, run: PipelineRun, emit: ProgressCallback) -> AnalysisResult:
        # 1/7 Videos
        stage = PipelineStage.FETCHING_VIDEOS
        self._enter(run, stage)
        await emit(stage.step, "Fetching videos from YouTube...")
        videos = await self.resolver.fetch_channel_videos(run.channel_url, self.video_count)
        if not videos:
            raise NoVideosFoundError()
        await emit(stage.step, f"Found {len(videos)} videos")

        # 2/7 Style and content
        stage = PipelineStage.ANALYZING_CONTENT
        self._enter(run, stage)
        await emit(stage.step, "Analyzing channel content and thumbnail style...")
        profile = await self.analyzer.analyze(videos)
        await emit(stage.step, f"Analysis complete: {', '.join(profile.topics[:3])}")

        # 3/7 Queries
        stage = PipelineStage.PLANNING_QUERIES
        self._enter(run, stage)
        await emit(stage.step, "Generating search queries...")
        plan = await self.planner.plan(profile)
        await emit(stage.step, f"Generated {plan.total} queries")

        # 4/7 News and discussions
        stage = PipelineStage.SEARCHING
        self._enter(run, stage)
        await emit(stage.step, "Searching recent news and Reddit discussions...")
        articles, posts = await asyncio.gather(
            self.news_gatherer.search(plan.news_queries),
            self.discussion_gatherer.search(plan.discussion_queries),
        )
        await emit(stage.step, f"Found {len(articles)} news articles and {len(posts)} Reddit posts")

        # 5/7 Ideas
        stage = PipelineStage.GENERATING_IDEAS
        self._enter(run, stage)
        await emit(stage.step, "Generating video ideas...")
        ideas = await self.idea_generator.generate(
            profile,
            reference_titles=[video.title for video in videos],
            news_context=build_news_context(articles),
            discussion_context=build_discussion_context(posts),
        )
        await emit(stage.step, f"Generated {len(ideas)} ideas")

        # 6/7 Thumbnails
        stage = PipelineStage.RENDERING_THUMBNAILS
        self._enter(run, stage)

        async def thumbnail_progress(message: str) -> None:
            await emit(PipelineStage.RENDERING_THUMBNAILS.step, message)

        ideas = await self.thumbnails.render_all(ideas, profile.thumbnail_style, thumbnail_progress)
        await emit(stage.step, "All thumbnails generated")

        # 7/7 Validation
        stage = PipelineStage.VALIDATING
        self._enter(run, stage)
        await emit(stage.step, "Validating results...")
        result = AnalysisResult(
            channel_analysis=profile,
            videos=tuple(videos[:VIDEO_DISPLAY_COUNT]),
            news_articles=tuple(articles[:NEWS_DISPLAY_COUNT]),
            reddit_posts=tuple(posts[:REDDIT_DISPLAY_COUNT]),
            video_ideas=tuple(ideas),
        )
        self.validate(result)
        await emit(stage.step, "Analysis complete")

        self._enter(run, PipelineStage.COMPLETE)
        logger.info(
            "pipeline_run_completed",
            videos=len(result.videos),
            news=len(result.news_articles),
            discussions=len(result.reddit_posts),
            ideas=len(result.video_ideas),
            elapsed_seconds=round(run.elapsed_seconds, 2),
        )
        return result

    @staticmethod
    def validate(result: AnalysisResult) -> None:
        """Check the result against the response schema.

        Raises:
            ResultValidationError: With one "path: message" entry per issue
        """
        try:
            AnalysisResultSchema.model_validate(result.to_dict())
        except ValidationError as e:
            issues = format_validation_error(e)
            logger.error("result_validation_failed", issues=issues)
            raise ResultValidationError(issues) from e

    async def health_check(self) -> dict[str, bool]:
        """Check health of all pipeline components.

        Returns:
            Dict mapping component names to health status
        """
        return {
            "llm": await self.llm.health_check(),
            "image_gen": await self.image_gen.health_check(),
            "catalog": await self.catalog.health_check(),
            "news": await self.news.health_check(),
            "discussions": await self.discussions.health_check(),
        }
