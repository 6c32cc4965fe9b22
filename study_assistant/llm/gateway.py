"""Boundary around every call to the generative model.

A gateway takes an instruction, an optional response schema and optional
capabilities, issues exactly one model request and returns the text plus any
web citations it was grounded on. It never retries; callers own the failure
policy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from study_assistant.llm.ollama_client import get_chat_model
from study_assistant.schemas.profile import ChatTurn
from study_assistant.tools import web_search
from study_assistant.utils.constants import WEB_SEARCH_TOOL

logger = logging.getLogger(__name__)

GROUNDING_PREAMBLE = """\
Use the web search results below as your sources. Only recommend resources
that appear in them and cite their URLs.

Web search results:
{web_context}
"""


class GatewayError(RuntimeError):
    """The model backend could not be reached or failed mid-request."""


@dataclass(frozen=True)
class Citation:
    title: str
    url: str


@dataclass
class GatewayResult:
    text: str
    citations: list[Citation] = field(default_factory=list)


@dataclass
class GenerateOptions:
    """Per-call knobs.

    ``response_schema`` is a JSON schema the backend is asked to honour; it is
    advisory, so callers still validate the text they get back.
    """

    response_schema: dict[str, Any] | None = None
    temperature: float | None = None
    tools: tuple[str, ...] = ()
    search_query: str | None = None
    system_instruction: str | None = None
    prior_turns: list[ChatTurn] = field(default_factory=list)


class AIGateway(Protocol):
    def generate(self, prompt: str, options: GenerateOptions | None = None) -> GatewayResult:
        ...


def build_messages(prompt: str, options: GenerateOptions, grounding: str = "") -> list[BaseMessage]:
    """Assemble system instruction, replayed turns and the new prompt in order."""
    messages: list[BaseMessage] = []
    system_parts = [part for part in (options.system_instruction, grounding) if part]
    if system_parts:
        messages.append(SystemMessage(content="\n\n".join(system_parts)))
    for turn in options.prior_turns:
        if turn.role == "user":
            messages.append(HumanMessage(content=turn.text))
        else:
            messages.append(AIMessage(content=turn.text))
    messages.append(HumanMessage(content=prompt))
    return messages


class LangChainGateway:
    """Gateway backed by a LangChain chat model and Tavily search."""

    def __init__(self, model_factory=get_chat_model, search_fn=None):
        self._model_factory = model_factory
        self._search_fn = search_fn or web_search.search_web

    def generate(self, prompt: str, options: GenerateOptions | None = None) -> GatewayResult:
        options = options or GenerateOptions()
        citations: list[Citation] = []
        grounding = ""
        if WEB_SEARCH_TOOL in options.tools:
            hits = self._search(options.search_query or prompt)
            citations = [Citation(title=hit.get("title", ""), url=hit.get("url", "")) for hit in hits]
            if hits:
                grounding = GROUNDING_PREAMBLE.format(
                    web_context=web_search.format_search_context(hits)
                )

        llm = self._model_factory(
            temperature=options.temperature,
            response_format=options.response_schema,
        )
        messages = build_messages(prompt, options, grounding)
        logger.info("Gateway LLM call started (messages=%d)", len(messages))
        try:
            response = llm.invoke(messages)
        except Exception as exc:
            logger.error("Gateway LLM call failed: %s", exc)
            raise GatewayError(str(exc)) from exc
        logger.info("Gateway LLM call finished")
        content = getattr(response, "content", str(response))
        if not isinstance(content, str):
            content = str(content)
        return GatewayResult(text=content.strip(), citations=citations)

    def _search(self, query: str) -> list[dict[str, str]]:
        try:
            return self._search_fn(query)
        except web_search.WebSearchUnavailable as exc:
            logger.warning("Web search unavailable, answering ungrounded: %s", exc)
        except Exception:
            logger.exception("Web search failed, answering ungrounded")
        return []


_default_gateway: AIGateway | None = None


def get_gateway() -> AIGateway:
    """Return the process-wide gateway, creating it on first use."""
    global _default_gateway
    if _default_gateway is None:
        _default_gateway = LangChainGateway()
    return _default_gateway


def set_gateway(gateway: AIGateway | None) -> None:
    """Swap the process-wide gateway (``None`` restores the default)."""
    global _default_gateway
    _default_gateway = gateway
