"""
YouTube Data API video search client. Uses YOUTUBE_API_KEY; disabled without it.
"""

import logging
from typing import Optional

import requests

from app.generation.schemas import VideoResult

logger = logging.getLogger(__name__)

YOUTUBE_SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"
YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
MAX_RESULTS = 3


def _to_result(item: dict) -> Optional[VideoResult]:
    video_id = (item.get("id") or {}).get("videoId")
    if not video_id:
        return None
    snippet = item.get("snippet") or {}
    thumbnail = ((snippet.get("thumbnails") or {}).get("medium") or {}).get("url")
    return VideoResult(
        title=snippet.get("title") or "",
        description=snippet.get("description") or "",
        thumbnail=thumbnail,
        videoId=video_id,
        url=YOUTUBE_WATCH_URL.format(video_id=video_id),
    )


def search_youtube(
    query: str,
    api_key: str,
    session: Optional[requests.Session] = None,
    timeout: float = 10.0,
) -> list[VideoResult]:
    """Return up to three videos for the query; never raises."""
    if not api_key:
        logger.info("YouTube API key not found, skipping video results")
        return []

    try:
        response = (session or requests).get(
            YOUTUBE_SEARCH_URL,
            params={
                "part": "snippet",
                "maxResults": MAX_RESULTS,
                "key": api_key,
                "q": query,
                "type": "video",
            },
            timeout=timeout,
        )
        response.raise_for_status()
        data = response.json()

        results = []
        for item in data.get("items", []):
            result = _to_result(item)
            if result is not None:
                results.append(result)
        return results[:MAX_RESULTS]

    except requests.exceptions.HTTPError as e:
        logger.error("YouTube API error (HTTP %s): %s", e.response.status_code if e.response is not None else "?", e)
        return []
    except requests.exceptions.RequestException as e:
        logger.error("YouTube API error: %s", e)
        return []
    except (ValueError, TypeError, AttributeError) as e:
        # Undecodable body or unexpected payload shape
        logger.error("YouTube API returned an unusable response: %s", e)
        return []
