"""LLM provider adapters."""

from idea_engine.adapters.llm.base import LLMMessage, LLMProvider, LLMResponse, VisionMessage
from idea_engine.adapters.llm.openai import OpenAIProvider
from idea_engine.adapters.llm.stub import StubLLMProvider

__all__ = [
    "LLMMessage",
    "LLMProvider",
    "LLMResponse",
    "OpenAIProvider",
    "StubLLMProvider",
    "VisionMessage",
]
