"""
DuckDuckGo Instant Answer client for general web results. No API key required.
"""

import logging
from typing import Optional

import requests

from app.generation.schemas import WebResult

logger = logging.getLogger(__name__)

DDG_INSTANT_ANSWER_URL = "https://api.duckduckgo.com/"
MAX_RESULTS = 3


def _title_from_text(text: str) -> str:
    # Related topics read "Title - description"
    return text.split(" - ")[0] or text


def search_duckduckgo(
    query: str,
    session: Optional[requests.Session] = None,
    timeout: float = 10.0,
) -> list[WebResult]:
    """Return up to three related topics that carry both a URL and text; never raises."""
    try:
        response = (session or requests).get(
            DDG_INSTANT_ANSWER_URL,
            params={"q": query, "format": "json"},
            timeout=timeout,
        )
        response.raise_for_status()
        data = response.json()

        topics = data.get("RelatedTopics") or []
        usable = [
            topic
            for topic in topics
            if isinstance(topic, dict) and topic.get("FirstURL") and topic.get("Text")
        ]
        return [
            WebResult(
                title=_title_from_text(topic["Text"]),
                description=topic["Text"],
                url=topic["FirstURL"],
            )
            for topic in usable[:MAX_RESULTS]
        ]

    except requests.exceptions.RequestException as e:
        logger.error("Web search error for query '%s': %s", query, e)
        return []
    except (ValueError, TypeError, AttributeError) as e:
        logger.error("Web search returned an unusable response for query '%s': %s", query, e)
        return []
