"""Tests for request/response schemas and settings."""

import pytest
from pydantic import ValidationError

from app.config import Settings
from app.generation.schemas import (
    AggregatedResponse,
    GenerateRequest,
    HealthResponse,
    VideoResult,
    WebResult,
)


class TestVideoResult:
    def test_valid_video(self):
        video = VideoResult(
            title="t", description="d", videoId="abc", url="https://www.youtube.com/watch?v=abc"
        )
        assert video.thumbnail is None

    def test_video_id_required(self):
        with pytest.raises(ValidationError):
            VideoResult(title="t", description="d", url="u")


class TestWebResult:
    def test_shape(self):
        assert set(WebResult(title="t", description="d", url="u").model_dump()) == {
            "title",
            "description",
            "url",
        }

    def test_url_required(self):
        with pytest.raises(ValidationError):
            WebResult(title="t", description="d")


class TestGenerateRequest:
    def test_prompt_optional(self):
        assert GenerateRequest().prompt is None

    def test_non_string_prompt_rejected(self):
        with pytest.raises(ValidationError):
            GenerateRequest(prompt=["not", "a", "string"])


class TestAggregatedResponse:
    def test_lists_default_empty(self):
        response = AggregatedResponse(aiResponse="text")
        assert response.youtubeResults == []
        assert response.webResults == []

    def test_camel_case_keys(self):
        assert list(AggregatedResponse(aiResponse="x").model_dump()) == [
            "aiResponse",
            "youtubeResults",
            "webResults",
        ]

    def test_ai_response_required(self):
        with pytest.raises(ValidationError):
            AggregatedResponse()


class TestHealthResponse:
    def test_status_defaults_ok(self):
        health = HealthResponse(environment="production", openai=True, youtube=False)
        assert health.model_dump() == {
            "status": "ok",
            "environment": "production",
            "openai": True,
            "youtube": False,
        }


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("OPENAI_API_KEY", "YOUTUBE_API_KEY", "OPENAI_MODEL", "ENVIRONMENT", "PORT"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)
        assert settings.openai_api_key == ""
        assert settings.youtube_api_key == ""
        assert settings.openai_model == "gpt-4"
        assert settings.environment == "development"
        assert settings.port == 3000

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.setenv("YOUTUBE_API_KEY", "yt-test")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("ENVIRONMENT", "production")
        settings = Settings(_env_file=None)
        assert settings.openai_api_key == "sk-test"
        assert settings.youtube_api_key == "yt-test"
        assert settings.port == 8080
        assert settings.environment == "production"
