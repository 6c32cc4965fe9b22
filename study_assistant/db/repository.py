"""Key-value snapshot stores and the profile repository built on them."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

from pydantic import ValidationError

from study_assistant.schemas.profile import Course, Task
from study_assistant.utils.constants import COURSE_KEY, TASKS_KEY

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def load(self, key: str) -> str | None:
        ...

    def save(self, key: str, value: str) -> None:
        ...

    def clear(self) -> None:
        ...


class InMemoryStore:
    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def load(self, key: str) -> str | None:
        return self._data.get(key)

    def save(self, key: str, value: str) -> None:
        self._data[key] = value

    def clear(self) -> None:
        self._data.clear()


class JsonFileStore:
    """All keys live in a single JSON object on disk.

    A missing or unreadable file reads as an empty store; the next save
    rewrites it.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable snapshot file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        tmp.replace(self.path)

    def load(self, key: str) -> str | None:
        return self._read().get(key)

    def save(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()


def _decode(raw: str | None, key: str) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.warning("Corrupt snapshot under %s: %s", key, exc)
        return None


class ProfileRepository:
    """Saves and restores the current course and its task collection."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def load_course(self) -> Course | None:
        """Return the saved course, or ``None`` when there is no usable profile."""
        data = _decode(self.store.load(COURSE_KEY), COURSE_KEY)
        if not isinstance(data, dict):
            return None
        try:
            return Course.model_validate(data)
        except ValidationError as exc:
            logger.warning("Discarding invalid course snapshot: %s", exc)
            return None

    def load_tasks(self) -> list[Task]:
        """Return saved tasks, skipping records that cannot be read."""
        data = _decode(self.store.load(TASKS_KEY), TASKS_KEY)
        if not isinstance(data, list):
            return []
        tasks = []
        for item in data:
            if not isinstance(item, dict):
                continue
            try:
                tasks.append(Task.model_validate(item))
            except ValidationError as exc:
                logger.warning("Skipping invalid task snapshot: %s", exc)
        return tasks

    def save_course(self, course: Course) -> None:
        self.store.save(COURSE_KEY, course.model_dump_json(by_alias=True))

    def save_tasks(self, tasks: list[Task]) -> None:
        payload = [task.model_dump(mode="json", by_alias=True) for task in tasks]
        self.store.save(TASKS_KEY, json.dumps(payload, ensure_ascii=False))

    def reset(self) -> None:
        self.store.clear()
