"""Research agent: web-grounded study resources for a topic."""

import logging
from urllib.parse import urlparse

from study_assistant.llm.gateway import AIGateway, Citation, GenerateOptions, get_gateway
from study_assistant.prompts.research import RESEARCH_PROMPT, RESEARCH_SEARCH_QUERY
from study_assistant.schemas.generation import ResourceSearchResult
from study_assistant.schemas.profile import Resource
from study_assistant.utils.constants import (
    NO_RESOURCES_SUMMARY,
    RESOURCE_SEARCH_ERROR,
    WEB_SEARCH_TOOL,
)

logger = logging.getLogger("uvicorn.error")


def extract_resources(citations: list[Citation]) -> list[Resource]:
    """Map grounding citations to resources, dropping any without a usable URL."""
    resources = []
    for citation in citations:
        url = (citation.url or "").strip()
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            continue
        resources.append(
            Resource(
                title=(citation.title or "").strip() or parsed.hostname,
                url=url,
                source=parsed.hostname,
                type="Web",
            )
        )
    return resources


def find_resources(topic: str, course_context: str, gateway: AIGateway | None = None) -> ResourceSearchResult:
    """Search the web for study material on ``topic``.

    Never raises: on failure the summary explains what went wrong and the
    resource list is empty.

    Parameters
    ----------
    topic : str
    course_context : str
        Usually the course name.
    gateway : AIGateway, optional

    Returns
    -------
    ResourceSearchResult
    """
    logger.info("RESEARCH HIT")
    gateway = gateway or get_gateway()
    options = GenerateOptions(
        tools=(WEB_SEARCH_TOOL,),
        search_query=RESEARCH_SEARCH_QUERY.format(topic=topic, course_context=course_context),
    )
    try:
        result = gateway.generate(
            RESEARCH_PROMPT.format(topic=topic, course_context=course_context), options
        )
    except Exception as exc:
        logger.error("Failed to find resources for %r: %s", topic, exc)
        return ResourceSearchResult(summary=RESOURCE_SEARCH_ERROR, resources=[])

    resources = extract_resources(result.citations)
    logger.info("RESEARCH: citations=%d resources=%d", len(result.citations), len(resources))
    return ResourceSearchResult(summary=result.text or NO_RESOURCES_SUMMARY, resources=resources)
