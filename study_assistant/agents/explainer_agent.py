"""Explainer agent: structured topic explanations."""

import logging

from study_assistant.llm.gateway import AIGateway, GenerateOptions, get_gateway
from study_assistant.prompts.explainer import EXPLAINER_PROMPT, EXPLANATION_RESPONSE_SCHEMA
from study_assistant.schemas.profile import Explanation, Task
from study_assistant.utils.llm_parse import parse_llm_json

logger = logging.getLogger("uvicorn.error")


def task_context(task: Task) -> str:
    return f"Subject: {task.subject_id}. Description: {task.description}"


def explain_topic(topic: str, context: str, gateway: AIGateway | None = None) -> Explanation | None:
    """Request an overview plus ordered key-point sections for ``topic``.

    Returns ``None`` when the model could not be reached or its reply did not
    match the explanation shape; callers render that as "could not load".
    """
    logger.info("EXPLAINER HIT")
    gateway = gateway or get_gateway()
    prompt = EXPLAINER_PROMPT.format(topic=topic, context=context)
    try:
        result = gateway.generate(prompt, GenerateOptions(response_schema=EXPLANATION_RESPONSE_SCHEMA))
        return parse_llm_json(result.text, Explanation)
    except Exception as exc:
        logger.error("Failed to explain topic %r: %s", topic, exc)
        return None
