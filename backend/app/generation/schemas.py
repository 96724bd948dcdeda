from typing import Optional

from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    title: str
    description: str
    url: str


class VideoResult(SearchResult):
    thumbnail: Optional[str] = None
    videoId: str


class WebResult(SearchResult):
    pass


class GenerateRequest(BaseModel):
    prompt: Optional[str] = None


class AggregatedResponse(BaseModel):
    aiResponse: str
    youtubeResults: list[VideoResult] = Field(default_factory=list)
    webResults: list[WebResult] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str = "ok"
    environment: str
    openai: bool
    youtube: bool


class ErrorResponse(BaseModel):
    error: str
