"""LLM JSON parsing helpers with schema validation."""

from __future__ import annotations

import json
import re
from typing import Any, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")

_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


def _normalize(data: Any) -> Any:
    if isinstance(data, dict):
        priority = data.get("priority")
        if isinstance(priority, str):
            data["priority"] = priority.strip().capitalize()
        for value in data.values():
            _normalize(value)
    elif isinstance(data, list):
        for item in data:
            _normalize(item)
    return data


def parse_json_with_schema(raw: str, schema: Any) -> Any:
    """Decode ``raw`` and validate it against ``schema``.

    ``schema`` may be a pydantic model or any type ``TypeAdapter`` accepts,
    e.g. ``list[RawTask]``.
    """
    data = _normalize(json.loads(raw))
    adapter = TypeAdapter(schema)
    if isinstance(data, dict) and _expects_list(adapter):
        data = _unwrap_single_list(data)
    return adapter.validate_python(data)


def _expects_list(adapter: TypeAdapter) -> bool:
    return adapter.json_schema().get("type") == "array"


def _unwrap_single_list(data: dict) -> Any:
    # Models sometimes wrap the requested array: {"tasks": [...]}
    lists = [value for value in data.values() if isinstance(value, list)]
    if len(lists) == 1:
        return lists[0]
    return data


def _strip_fences(raw: str) -> str:
    match = _FENCE_RE.match(raw.strip())
    return match.group(1) if match else raw


def _sanitize_invalid_escapes(raw: str) -> str:
    return re.sub(r'\\([^"\\/bfnrtu])', r"\1", raw)


def _extract_json_block(raw: str) -> str | None:
    if not raw:
        return None
    starts = [idx for idx in (raw.find("{"), raw.find("[")) if idx != -1]
    if not starts:
        return None
    start = min(starts)
    opener = raw[start]
    closer = "}" if opener == "{" else "]"
    depth = 0
    in_string = False
    escaped = False
    for idx in range(start, len(raw)):
        char = raw[idx]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return raw[start : idx + 1]
    return None


def parse_llm_json(raw: str | None, schema: Any) -> Any:
    """Best-effort parse of model output followed by strict validation.

    Tries the raw text, then the text with markdown fences and invalid escapes
    removed, then the first balanced JSON block embedded in prose. Schema
    violations are never repaired.

    Raises
    ------
    ValueError
        If no candidate decodes as JSON (``pydantic.ValidationError`` is a
        ``ValueError`` too and is raised when the decoded data does not match).
    """
    if not raw or not raw.strip():
        raise ValueError("Empty model response.")

    text = _strip_fences(raw)
    candidates = [text, _sanitize_invalid_escapes(text)]
    extracted = _extract_json_block(text)
    if extracted:
        candidates.append(_sanitize_invalid_escapes(extracted))

    for candidate in candidates:
        try:
            return parse_json_with_schema(candidate, schema)
        except json.JSONDecodeError:
            continue
    raise ValueError("Unable to parse JSON from model response.")
