"""Tests for topic explanations."""

import json

from study_assistant.agents import explainer_agent
from study_assistant.llm.gateway import GatewayError, GatewayResult
from study_assistant.prompts.explainer import EXPLANATION_RESPONSE_SCHEMA
from study_assistant.schemas.profile import Task


class _FakeGateway:
    def __init__(self, text="", error=None):
        self.text = text
        self.error = error
        self.calls = []

    def generate(self, prompt, options=None):
        self.calls.append((prompt, options))
        if self.error is not None:
            raise self.error
        return GatewayResult(text=self.text)


def test_explain_topic_parses_overview_and_ordered_sections():
    payload = {
        "overview": "Limits describe behaviour near a point.",
        "sections": [
            {"point": "Intuition", "detail": "Approach from both sides."},
            {"point": "Formal definition", "detail": "Epsilon and delta."},
        ],
    }
    gateway = _FakeGateway(json.dumps(payload))
    explanation = explainer_agent.explain_topic("Limits", "Subject: Algebra. Description: intro", gateway=gateway)

    assert explanation.overview.startswith("Limits describe")
    assert [s.point for s in explanation.sections] == ["Intuition", "Formal definition"]

    prompt, options = gateway.calls[0]
    assert "Topic: Limits" in prompt
    assert "Context: Subject: Algebra. Description: intro" in prompt
    assert options.response_schema == EXPLANATION_RESPONSE_SCHEMA
    assert options.tools == ()


def test_explain_topic_returns_none_on_gateway_error():
    gateway = _FakeGateway(error=GatewayError("down"))
    assert explainer_agent.explain_topic("Limits", "ctx", gateway=gateway) is None


def test_explain_topic_returns_none_on_malformed_json():
    gateway = _FakeGateway('{"overview": "missing sections"}')
    assert explainer_agent.explain_topic("Limits", "ctx", gateway=gateway) is None


def test_explain_topic_returns_none_on_empty_reply():
    assert explainer_agent.explain_topic("Limits", "ctx", gateway=_FakeGateway("")) is None


def test_task_context_uses_subject_label_and_description():
    task = Task(id="t1", title="Limits", subject_id="Algebra", description="Read chapter 2")
    assert explainer_agent.task_context(task) == "Subject: Algebra. Description: Read chapter 2"
