"""Auxiliary search clients: YouTube and DuckDuckGo."""

from .duckduckgo import search_duckduckgo
from .youtube import search_youtube

__all__ = ["search_youtube", "search_duckduckgo"]
