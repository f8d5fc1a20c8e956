"""Health check endpoints."""

from fastapi import APIRouter, status
from pydantic import BaseModel

from idea_engine.api.deps import AnalysisPipelineDep
from idea_engine.config import settings
from idea_engine.logging import get_logger

router = APIRouter(tags=["Health"])
logger = get_logger(__name__)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    real_providers: dict[str, bool] | None = None


class ReadinessResponse(BaseModel):
    """Readiness check response."""

    ready: bool
    configured: bool
    missing: list[str] = []
    components: dict[str, bool] | None = None


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Basic health check endpoint that verifies the API is running.",
)
async def health_check() -> HealthResponse:
    """Basic health check - is the API up?

    Reports which providers are real (True) and which are stubs (False).
    """
    from idea_engine import __version__

    providers = {
        "llm": settings.llm_provider,
        "image_gen": settings.image_provider,
        "catalog": settings.catalog_provider,
        "news": settings.news_provider,
        "discussions": settings.discussion_provider,
    }

    return HealthResponse(
        status="healthy",
        version=__version__,
        real_providers={k: v.lower() != "stub" for k, v in providers.items()},
    )


@router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    summary="Readiness check",
    description="Verifies credentials are present and every provider answers its health check.",
)
async def readiness_check(pipeline: AnalysisPipelineDep) -> ReadinessResponse:
    """Readiness check including provider health."""
    missing = settings.missing_credentials()
    if missing:
        logger.warning("readiness_missing_credentials", missing=missing)

    components = await pipeline.health_check()

    return ReadinessResponse(
        ready=not missing and all(components.values()),
        configured=not missing,
        missing=missing,
        components=components,
    )


@router.get(
    "/health/live",
    status_code=status.HTTP_200_OK,
    summary="Liveness probe",
    description="Simple liveness probe for Kubernetes.",
)
async def liveness_check() -> dict[str, str]:
    """Kubernetes liveness probe - is the process alive?"""
    return {"status": "alive"}
