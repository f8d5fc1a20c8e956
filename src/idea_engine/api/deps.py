"""FastAPI dependencies."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from idea_engine.services.pipeline import AnalysisPipeline


@lru_cache
def get_analysis_pipeline() -> AnalysisPipeline:
    """Get the process-wide pipeline instance, built from settings on first use."""
    return AnalysisPipeline()


AnalysisPipelineDep = Annotated[AnalysisPipeline, Depends(get_analysis_pipeline)]
