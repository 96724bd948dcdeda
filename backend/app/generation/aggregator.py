"""
Generate handler: completion + video search + web search in parallel, joined on all three.

The completion branch is mandatory; the two searches are best-effort and degrade
to empty lists inside their own clients.
"""

import concurrent.futures
import logging

from app.generation.clients import search_duckduckgo, search_youtube
from app.generation.context import ServiceContext
from app.generation.errors import (
    BadRequest,
    GenerationError,
    ServiceUnavailable,
    UpstreamFailure,
)
from app.generation.schemas import AggregatedResponse

logger = logging.getLogger(__name__)


def _settled_list(future: concurrent.futures.Future, source: str) -> list:
    """Result of a best-effort branch, or [] if it raised anyway."""
    try:
        return future.result()
    except Exception as e:
        logger.error("%s search failed unexpectedly: %s", source, e)
        return []


def _fan_out(prompt: str, context: ServiceContext) -> AggregatedResponse:
    settings = context.settings
    timeout = settings.search_timeout_seconds
    with concurrent.futures.ThreadPoolExecutor(max_workers=3) as executor:
        ai_future = executor.submit(context.completion.complete, prompt)
        video_future = executor.submit(
            search_youtube, prompt, settings.youtube_api_key, context.session, timeout
        )
        web_future = executor.submit(search_duckduckgo, prompt, context.session, timeout)
        # Wait for every branch; no fail-fast on the first error
        concurrent.futures.wait(
            [ai_future, video_future, web_future],
            return_when=concurrent.futures.ALL_COMPLETED,
        )

    youtube_results = _settled_list(video_future, "YouTube")
    web_results = _settled_list(web_future, "Web")

    ai_text = (ai_future.result() or "").strip()
    if not ai_text:
        raise UpstreamFailure("Failed to retrieve AI response")

    return AggregatedResponse(
        aiResponse=ai_text,
        youtubeResults=youtube_results,
        webResults=web_results,
    )


def generate(prompt: str | None, context: ServiceContext) -> AggregatedResponse:
    """
    Answer a prompt with AI text plus related videos and web pages.

    Raises:
        BadRequest: prompt missing or blank (no outbound calls).
        ServiceUnavailable: completion client not configured (no outbound calls).
        UpstreamFailure: completion failed or came back empty, or orchestration broke.
    """
    if context.completion is None:
        raise ServiceUnavailable(
            "OpenAI service is not available. Please check your configuration."
        )
    if not prompt or not prompt.strip():
        raise BadRequest("Prompt is required")

    try:
        return _fan_out(prompt, context)
    except GenerationError:
        raise
    except Exception as e:
        logger.exception("Error processing request: %s", e)
        raise UpstreamFailure("Failed to process request. Please try again later.") from e
