"""Tavily web search used to ground resource lookups."""

from __future__ import annotations

import logging
from typing import Any

from langchain_tavily import TavilySearch

from study_assistant.config import settings

logger = logging.getLogger("uvicorn.error")


class WebSearchUnavailable(RuntimeError):
    """Raised when no search backend is configured."""


def search_web(query: str, max_results: int | None = None) -> list[dict[str, str]]:
    """Run a Tavily search and normalise the hits.

    Parameters
    ----------
    query : str
    max_results : int, optional
        Defaults to ``settings.web_search_max_results``.

    Returns
    -------
    list[dict[str, str]]
        One ``{"title", "url", "snippet"}`` dict per hit, in ranking order.
        ``url`` may be empty when the backend returned none.

    Raises
    ------
    WebSearchUnavailable
        If ``TAVILY_API_KEY`` is not configured.
    """
    query = (query or "").strip()
    if not query:
        return []
    if not settings.tavily_api_key:
        raise WebSearchUnavailable("TAVILY_API_KEY not configured.")

    limit = max_results or settings.web_search_max_results
    logger.info("WEB SEARCH HIT")
    search = TavilySearch(max_results=limit, tavily_api_key=settings.tavily_api_key)

    try:
        results = search.invoke({"query": query})
    except TypeError:
        # Some tool versions accept a raw string input.
        results = search.invoke(query)

    if isinstance(results, dict) and "results" in results:
        results_list = results.get("results") or []
    elif isinstance(results, list):
        results_list = results
    else:
        logger.warning("WEB SEARCH: unexpected result shape %s", type(results).__name__)
        return []

    hits = [_normalize_hit(item) for item in results_list[:limit] if isinstance(item, dict)]
    logger.info("WEB SEARCH RESULTS: %s", len(hits))
    return hits


def _normalize_hit(item: dict[str, Any]) -> dict[str, str]:
    return {
        "title": str(item.get("title") or item.get("name") or ""),
        "url": str(item.get("url") or item.get("link") or ""),
        "snippet": str(item.get("content") or item.get("snippet") or item.get("summary") or ""),
    }


def format_search_context(hits: list[dict[str, str]]) -> str:
    """Render hits as the numbered text block handed to the model."""
    lines = []
    for idx, hit in enumerate(hits, start=1):
        entry = f"Result {idx}: {hit.get('title') or 'Untitled'}"
        if hit.get("url"):
            entry += f"\nURL: {hit['url']}"
        if hit.get("snippet"):
            entry += f"\nSnippet: {hit['snippet']}"
        lines.append(entry)
    return "\n\n".join(lines).strip()
