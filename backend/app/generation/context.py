"""Process-wide services shared by every generate request."""

from dataclasses import dataclass, field
from typing import Optional

import requests

from app.config import Settings
from app.generation.completion import CompletionClient, build_completion_client


@dataclass
class ServiceContext:
    """Built once at startup and read-only afterwards."""

    settings: Settings
    completion: Optional[CompletionClient] = None
    # Reused for connection pooling across search calls
    session: requests.Session = field(default_factory=requests.Session)

    @property
    def openai_configured(self) -> bool:
        return bool(self.settings.openai_api_key)

    @property
    def youtube_configured(self) -> bool:
        return bool(self.settings.youtube_api_key)

    def close(self) -> None:
        self.session.close()


def build_context(settings: Settings) -> ServiceContext:
    return ServiceContext(settings=settings, completion=build_completion_client(settings))
