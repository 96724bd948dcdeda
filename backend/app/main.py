"""
Prompt aggregation API: OpenAI completion plus YouTube and web search results.
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from app.config import Settings, get_settings
from app.generation import (
    AggregatedResponse,
    ConfigurationError,
    ErrorResponse,
    GenerateRequest,
    GenerationError,
    HealthResponse,
    ServiceContext,
    build_context,
    generate,
)
from app.logging_config import configure_logging
from app.middleware import RateLimitMiddleware, RequestLoggingMiddleware
from app.rate_limit import RateLimitConfig, RateLimiter

logger = logging.getLogger(__name__)


def _resolve_static_file(static_root: Path, full_path: str) -> Optional[Path]:
    """Map a request path to a file under the static root; None if absent or outside it."""
    if not full_path:
        return None
    candidate = (static_root / full_path).resolve()
    if not candidate.is_relative_to(static_root) or not candidate.is_file():
        return None
    return candidate


def create_app(
    settings: Optional[Settings] = None,
    context: Optional[ServiceContext] = None,
) -> FastAPI:
    """
    Build the application.

    Refuses to start without OPENAI_API_KEY. A prebuilt `context` (tests) skips
    client construction.
    """
    settings = settings or get_settings()
    if not settings.openai_api_key:
        raise ConfigurationError("OPENAI_API_KEY is not set.")
    if not settings.youtube_api_key:
        logger.warning("YOUTUBE_API_KEY is not set. YouTube results will be disabled.")

    context = context or build_context(settings)
    static_root = Path(settings.static_dir).resolve()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Server is running on port %s", settings.port)
        logger.info("Environment: %s", settings.environment)
        logger.info("OpenAI API Key: %s", "Set" if context.openai_configured else "Not set")
        logger.info("YouTube API Key: %s", "Enabled" if context.youtube_configured else "Disabled")
        yield
        context.close()
        logger.info("Server closed")

    app = FastAPI(title="Prompt Aggregator", version="0.1.0", lifespan=lifespan)
    app.state.context = context

    limiter = RateLimiter(
        RateLimitConfig(
            max_requests=settings.rate_limit_max_requests,
            window_seconds=settings.rate_limit_window_seconds,
        )
    )
    app.add_middleware(RateLimitMiddleware, limiter=limiter, path_prefix="/api/")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    @app.exception_handler(GenerationError)
    async def generation_error_handler(request: Request, exc: GenerationError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Prompt is required"})

    @app.get("/health", response_model=HealthResponse)
    def health():
        return HealthResponse(
            status="ok",
            environment=settings.environment,
            openai=context.openai_configured,
            youtube=context.youtube_configured,
        )

    @app.post(
        "/api/generate",
        response_model=AggregatedResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    )
    def generate_endpoint(body: GenerateRequest, request: Request):
        """
        Completion for the prompt, plus up to three YouTube videos and three web results.

        The search lists are always present; they are empty when a search fails
        or (for YouTube) when no API key is configured.
        """
        return generate(body.prompt, request.app.state.context)

    # SPA frontend: real files from the build directory, index.html for everything else
    @app.get("/{full_path:path}", include_in_schema=False)
    def frontend(full_path: str):
        asset = _resolve_static_file(static_root, full_path)
        if asset is not None:
            return FileResponse(asset)
        index = static_root / "index.html"
        if index.is_file():
            return FileResponse(index)
        return JSONResponse(status_code=404, content={"error": "Not found"})

    return app


def run() -> None:
    """Console entry point: configure logging, build the app, serve with uvicorn."""
    settings = get_settings()
    configure_logging(settings.log_level)
    try:
        app = create_app(settings)
    except ConfigurationError as e:
        logger.error("Error: %s", e)
        sys.exit(1)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
