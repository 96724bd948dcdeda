"""Pytest fixtures shared by the generation and API tests."""

from unittest.mock import MagicMock

import pytest
import requests

from app.config import Settings
from app.generation.completion import CompletionClient
from app.generation.context import ServiceContext
from app.generation.schemas import VideoResult, WebResult


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        openai_api_key="test-openai-key",
        youtube_api_key="test-youtube-key",
        environment="test",
        static_dir=str(tmp_path / "dist"),
    )


@pytest.fixture
def settings_without_youtube(settings):
    return settings.model_copy(update={"youtube_api_key": ""})


@pytest.fixture
def completion():
    client = MagicMock(spec=CompletionClient)
    client.complete.return_value = "TCP uses a 3-way handshake..."
    return client


@pytest.fixture
def context(settings, completion):
    return ServiceContext(settings=settings, completion=completion, session=MagicMock())


@pytest.fixture
def video_results():
    return [
        VideoResult(
            title="TCP handshake explained",
            description="SYN, SYN-ACK, ACK",
            thumbnail="https://i.ytimg.com/vi/abc123/mqdefault.jpg",
            videoId="abc123",
            url="https://www.youtube.com/watch?v=abc123",
        ),
        VideoResult(
            title="Networking basics",
            description="Intro to TCP/IP",
            thumbnail=None,
            videoId="def456",
            url="https://www.youtube.com/watch?v=def456",
        ),
    ]


@pytest.fixture
def web_results():
    return [
        WebResult(
            title="Transmission Control Protocol",
            description="Transmission Control Protocol - A core protocol of the Internet.",
            url="https://duckduckgo.com/Transmission_Control_Protocol",
        )
    ]


def make_http_response(payload=None, status_code: int = 200, json_error: Exception | None = None):
    """Stand-in for requests.Response with json() and raise_for_status()."""
    response = MagicMock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def http_response():
    return make_http_response
