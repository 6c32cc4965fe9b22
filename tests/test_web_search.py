"""Tests for Tavily search normalisation and fallbacks."""

import pytest

from study_assistant.tools import web_search as web_search_module


def test_search_web_returns_empty_when_query_missing():
    assert web_search_module.search_web("   ") == []


def test_search_web_raises_when_api_key_missing(monkeypatch):
    monkeypatch.setattr(web_search_module.settings, "tavily_api_key", "")
    with pytest.raises(web_search_module.WebSearchUnavailable, match="TAVILY_API_KEY not configured"):
        web_search_module.search_web("calculus limits")


def test_search_web_normalises_and_truncates_results(monkeypatch):
    monkeypatch.setattr(web_search_module.settings, "tavily_api_key", "test-key")

    class FakeTavilyTool:
        def __init__(self, **kwargs):
            assert kwargs["max_results"] == 2
            assert kwargs["tavily_api_key"] == "test-key"

        def invoke(self, payload):
            assert payload == {"query": "calculus limits"}
            return {
                "results": [
                    {"title": "MIT OCW", "url": "https://ocw.mit.edu", "content": "Lecture notes"},
                    {"name": "Khan", "link": "https://khanacademy.org", "snippet": "Videos"},
                    {"title": "Third", "url": "https://example.com/3", "content": "Should be truncated"},
                ]
            }

    monkeypatch.setattr(web_search_module, "TavilySearch", FakeTavilyTool)
    hits = web_search_module.search_web("calculus limits", max_results=2)

    assert hits == [
        {"title": "MIT OCW", "url": "https://ocw.mit.edu", "snippet": "Lecture notes"},
        {"title": "Khan", "url": "https://khanacademy.org", "snippet": "Videos"},
    ]


def test_search_web_falls_back_to_string_query_after_type_error(monkeypatch):
    monkeypatch.setattr(web_search_module.settings, "tavily_api_key", "test-key")

    class FakeTavilyTool:
        def __init__(self, **kwargs):
            pass

        def invoke(self, payload):
            if isinstance(payload, dict):
                raise TypeError("dict payload not supported")
            return [{"title": "Fallback result", "url": "https://example.com", "snippet": "notes"}]

    monkeypatch.setattr(web_search_module, "TavilySearch", FakeTavilyTool)
    hits = web_search_module.search_web("limits")
    assert hits[0]["title"] == "Fallback result"


def test_search_web_ignores_unknown_result_shapes(monkeypatch):
    monkeypatch.setattr(web_search_module.settings, "tavily_api_key", "test-key")

    class FakeTavilyTool:
        def __init__(self, **kwargs):
            pass

        def invoke(self, payload):
            return 12345

    monkeypatch.setattr(web_search_module, "TavilySearch", FakeTavilyTool)
    assert web_search_module.search_web("any query") == []


def test_format_search_context_numbers_results():
    text = web_search_module.format_search_context(
        [
            {"title": "A", "url": "https://a.example", "snippet": "alpha"},
            {"title": "", "url": "", "snippet": ""},
        ]
    )
    assert text == "Result 1: A\nURL: https://a.example\nSnippet: alpha\n\nResult 2: Untitled"
