"""Prompt generation: OpenAI completion with YouTube and web search alongside."""

from .aggregator import generate
from .clients import search_duckduckgo, search_youtube
from .completion import CompletionClient, build_completion_client
from .context import ServiceContext, build_context
from .errors import (
    BadRequest,
    ConfigurationError,
    GenerationError,
    ServiceUnavailable,
    UpstreamFailure,
)
from .schemas import (
    AggregatedResponse,
    ErrorResponse,
    GenerateRequest,
    HealthResponse,
    VideoResult,
    WebResult,
)

__all__ = [
    "generate",
    "search_youtube",
    "search_duckduckgo",
    "CompletionClient",
    "build_completion_client",
    "ServiceContext",
    "build_context",
    "GenerationError",
    "BadRequest",
    "ServiceUnavailable",
    "UpstreamFailure",
    "ConfigurationError",
    "AggregatedResponse",
    "ErrorResponse",
    "GenerateRequest",
    "HealthResponse",
    "VideoResult",
    "WebResult",
]
