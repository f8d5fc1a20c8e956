"""Channel analysis endpoints (single-shot JSON and server-sent events)."""

import asyncio
import json
from collections.abc import AsyncIterator
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import ValidationError

from idea_engine.api.deps import AnalysisPipelineDep
from idea_engine.config import settings
from idea_engine.domain.enums import StreamEventType
from idea_engine.domain.errors import (
    ConfigurationError,
    NoVideosFoundError,
    NotFoundError,
    PipelineError,
    ResolutionError,
    ResultValidationError,
    StageError,
)
from idea_engine.domain.schemas import AnalyzeChannelRequest, format_validation_error
from idea_engine.logging import get_logger
from idea_engine.services.pipeline import AnalysisPipeline

router = APIRouter(prefix="/api", tags=["Analysis"])
logger = get_logger(__name__)

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


def _error_response(
    status_code: int,
    error: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    content: dict[str, Any] = {"success": False, "error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def _parse_request(request: Request) -> AnalyzeChannelRequest | JSONResponse:
    """Validate the body and configuration before any stage runs.

    Returns the parsed request, or the error response to send instead.
    """
    try:
        body = await request.json()
    except ValueError:
        logger.info("analysis_request_rejected", reason="malformed_json")
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            "Invalid request data",
            {"validation": ["body: Malformed JSON"]},
        )

    if not isinstance(body, dict):
        logger.info("analysis_request_rejected", reason="not_an_object")
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            "Invalid request data",
            {"validation": ["body: Expected a JSON object"]},
        )

    try:
        payload = AnalyzeChannelRequest.model_validate(body)
    except ValidationError as e:
        issues = format_validation_error(e)
        logger.info("analysis_request_rejected", reason="validation", issues=issues)
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            "Invalid request data",
            {"validation": issues},
        )

    try:
        settings.require_credentials()
    except ConfigurationError as e:
        logger.error("analysis_request_misconfigured", missing=e.missing)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Server configuration error",
            {"missing": e.missing},
        )

    return payload


def _status_for(error: PipelineError) -> int:
    if isinstance(error, ResolutionError | NotFoundError | NoVideosFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, StageError):
        return status.HTTP_502_BAD_GATEWAY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def format_sse(event: dict[str, Any]) -> str:
    """Encode one event as a server-sent event frame."""
    return f"data: {json.dumps(event)}\n\n"


async def stream_analysis(pipeline: AnalysisPipeline, channel_url: str) -> AsyncIterator[str]:
    """Run the pipeline in a background task and yield its events as SSE frames.

    The stream ends after a single complete or error event. If the client goes
    away the generator is closed and the run task is cancelled.
    """
    queue: asyncio.Queue[dict[str, Any] | None] = asyncio.Queue()

    async def on_progress(step: str, message: str) -> None:
        await queue.put({"type": StreamEventType.PROGRESS.value, "step": step, "message": message})

    async def run() -> None:
        try:
            result = await pipeline.run(channel_url, on_progress=on_progress)
            await queue.put({"type": StreamEventType.COMPLETE.value, "data": result.to_dict()})
        except PipelineError as e:
            await queue.put({"type": StreamEventType.ERROR.value, "error": str(e)})
        finally:
            await queue.put(None)

    task = asyncio.create_task(run())
    try:
        while True:
            event = await queue.get()
            if event is None:
                break
            yield format_sse(event)
    finally:
        if not task.done():
            logger.info("analysis_stream_closed_early", channel_url=channel_url)
            task.cancel()


@router.post(
    "/analyze-channel-stream",
    summary="Analyze a channel (streaming)",
    description="Runs the analysis and streams progress as server-sent events.",
    response_model=None,
)
async def analyze_channel_stream(
    request: Request,
    pipeline: AnalysisPipelineDep,
) -> StreamingResponse | JSONResponse:
    """Analyze a channel, reporting progress as server-sent events.

    Events are JSON objects with a type of progress, error or complete. The
    stream ends after the first error or complete event.
    """
    parsed = await _parse_request(request)
    if isinstance(parsed, JSONResponse):
        return parsed

    logger.info("analysis_stream_requested", channel_url=parsed.channel_url)

    return StreamingResponse(
        stream_analysis(pipeline, parsed.channel_url),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )


@router.post(
    "/analyze-channel",
    summary="Analyze a channel",
    description="Runs the full analysis and returns the result in one response.",
    response_model=None,
)
async def analyze_channel(
    request: Request,
    pipeline: AnalysisPipelineDep,
) -> JSONResponse:
    """Analyze a channel and return the result as a single JSON envelope."""
    parsed = await _parse_request(request)
    if isinstance(parsed, JSONResponse):
        return parsed

    logger.info("analysis_requested", channel_url=parsed.channel_url)

    try:
        result = await pipeline.run(parsed.channel_url)
    except ResultValidationError as e:
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Response validation error",
            {"validation": e.issues},
        )
    except PipelineError as e:
        return _error_response(_status_for(e), str(e))

    return JSONResponse(content={"success": True, "data": result.to_dict()})
