"""OpenAI chat completion client used for the mandatory branch of a generate request."""

import logging
from typing import Optional

from openai import OpenAI, OpenAIError

from app.config import Settings
from app.generation.errors import UpstreamFailure

logger = logging.getLogger(__name__)


class CompletionClient:
    """Single request/response chat completion. No streaming, no retries."""

    def __init__(self, client: OpenAI, model: str):
        self._client = client
        self.model = model

    def complete(self, prompt: str) -> str:
        """Return the raw message content for the prompt; raises UpstreamFailure."""
        try:
            resp = self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
            )
        except OpenAIError as e:
            logger.error("OpenAI completion error: %s", e)
            raise UpstreamFailure("Failed to retrieve AI response") from e

        if not resp.choices:
            logger.error("OpenAI completion returned no choices")
            raise UpstreamFailure("Failed to retrieve AI response")
        content = resp.choices[0].message.content
        if not content:
            logger.error("OpenAI completion returned no message content")
            raise UpstreamFailure("Failed to retrieve AI response")
        return content


def build_completion_client(settings: Settings) -> Optional[CompletionClient]:
    """Construct the client once at startup. Returns None when it cannot be built."""
    if not settings.openai_api_key:
        logger.error("OPENAI_API_KEY is not set; completion client disabled")
        return None
    try:
        client = OpenAI(api_key=settings.openai_api_key, max_retries=0)
    except OpenAIError as e:
        logger.error("Error initializing OpenAI client: %s", e)
        return None
    logger.info("OpenAI client initialized (model=%s)", settings.openai_model)
    return CompletionClient(client, settings.openai_model)
