"""Tests for the LangChain-backed gateway."""

from types import SimpleNamespace

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from study_assistant.llm import gateway as gateway_module
from study_assistant.llm.gateway import GatewayError, GenerateOptions, LangChainGateway
from study_assistant.schemas.profile import ChatTurn
from study_assistant.tools.web_search import WebSearchUnavailable


class _FakeChatModel:
    def __init__(self, content="ok", error=None):
        self.content = content
        self.error = error
        self.messages = None

    def invoke(self, messages):
        self.messages = messages
        if self.error is not None:
            raise self.error
        return SimpleNamespace(content=self.content)


def _factory(model, seen):
    def _make(**kwargs):
        seen.append(kwargs)
        return model

    return _make


def test_schema_call_forwards_format_and_temperature():
    model = _FakeChatModel(content="  [] \n")
    seen = []
    gateway = LangChainGateway(model_factory=_factory(model, seen), search_fn=lambda _q: pytest.fail("no search"))
    schema = {"type": "array"}

    result = gateway.generate("plan my week", GenerateOptions(response_schema=schema, temperature=0.3))

    assert result.text == "[]"
    assert result.citations == []
    assert seen == [{"temperature": 0.3, "response_format": schema}]
    assert len(model.messages) == 1
    assert isinstance(model.messages[0], HumanMessage)
    assert model.messages[0].content == "plan my week"


def test_multi_turn_call_orders_system_history_then_prompt():
    model = _FakeChatModel()
    gateway = LangChainGateway(model_factory=_factory(model, []))
    options = GenerateOptions(
        system_instruction="You are JEdu.",
        prior_turns=[ChatTurn(role="user", text="q1"), ChatTurn(role="model", text="a1")],
    )

    gateway.generate("q2", options)

    kinds = [type(m) for m in model.messages]
    assert kinds == [SystemMessage, HumanMessage, AIMessage, HumanMessage]
    assert [m.content for m in model.messages[1:]] == ["q1", "a1", "q2"]


def test_web_search_call_grounds_prompt_and_returns_citations():
    model = _FakeChatModel(content="Use these.")
    queries = []

    def _search(query):
        queries.append(query)
        return [
            {"title": "MIT OCW", "url": "https://ocw.mit.edu/x", "snippet": "Lectures"},
            {"title": "No link", "url": "", "snippet": ""},
        ]

    gateway = LangChainGateway(model_factory=_factory(model, []), search_fn=_search)
    result = gateway.generate("find resources", GenerateOptions(tools=("web_search",), search_query="limits"))

    assert queries == ["limits"]
    assert [c.url for c in result.citations] == ["https://ocw.mit.edu/x", ""]
    assert isinstance(model.messages[0], SystemMessage)
    assert "URL: https://ocw.mit.edu/x" in model.messages[0].content
    assert result.text == "Use these."


def test_web_search_defaults_query_to_prompt():
    queries = []
    gateway = LangChainGateway(
        model_factory=_factory(_FakeChatModel(), []),
        search_fn=lambda q: queries.append(q) or [],
    )
    gateway.generate("binary trees", GenerateOptions(tools=("web_search",)))
    assert queries == ["binary trees"]


def test_web_search_unavailable_answers_ungrounded():
    model = _FakeChatModel(content="General advice.")

    def _search(_query):
        raise WebSearchUnavailable("TAVILY_API_KEY not configured.")

    gateway = LangChainGateway(model_factory=_factory(model, []), search_fn=_search)
    result = gateway.generate("find resources", GenerateOptions(tools=("web_search",)))

    assert result.citations == []
    assert result.text == "General advice."
    assert len(model.messages) == 1


def test_model_failure_is_wrapped_in_gateway_error():
    model = _FakeChatModel(error=ConnectionError("refused"))
    gateway = LangChainGateway(model_factory=_factory(model, []))
    with pytest.raises(GatewayError, match="refused"):
        gateway.generate("hello")


def test_get_gateway_is_swappable():
    sentinel = object()
    gateway_module.set_gateway(sentinel)
    try:
        assert gateway_module.get_gateway() is sentinel
    finally:
        gateway_module.set_gateway(None)
    assert isinstance(gateway_module.get_gateway(), LangChainGateway)
    gateway_module.set_gateway(None)
