"""Profile, task and study-content records.

Field names are snake_case in Python and camelCase on the wire so persisted
snapshots keep camelCase keys (``studentName``, ``isCompleted``).
Every model ignores unknown keys and defaults missing ones so stale snapshots
still load.
"""

from __future__ import annotations

import uuid
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

Priority = Literal["High", "Medium", "Low"]
Role = Literal["user", "model"]

DEFAULT_TASK_XP = 50


def new_task_id() -> str:
    return f"generated-{uuid.uuid4().hex}"


class ProfileModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class SnapshotModel(ProfileModel):
    """Persisted record; explicit nulls fall back to the field default."""

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value, info: ValidationInfo):
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class Subject(SnapshotModel):
    id: str = ""
    name: str = ""
    syllabus_topics: list[str] = Field(default_factory=list)
    proficiency: int = 50


class Course(SnapshotModel):
    """A student's academic profile; the prompt context for every AI flow."""

    id: str = ""
    student_name: str = ""
    name: str = ""
    degree: str = "Not specified"
    semester: str = ""
    subjects: list[Subject] = Field(default_factory=list)
    exam_date: str | None = None
    daily_study_hours: int = 2


class Task(SnapshotModel):
    """One scheduled unit of study work.

    ``subject_id`` holds the subject *name* as produced by the model. It is a
    display label, not a reference that is guaranteed to resolve.
    """

    id: str = Field(default_factory=new_task_id)
    title: str = ""
    subject_id: str = ""
    description: str = ""
    duration_minutes: int = 0
    priority: Priority = "Medium"
    date: str = ""
    is_completed: bool = False
    xp: int = DEFAULT_TASK_XP


class ExplanationPoint(ProfileModel):
    point: str
    detail: str


class Explanation(ProfileModel):
    overview: str
    sections: list[ExplanationPoint]


class Resource(ProfileModel):
    title: str
    url: str
    source: str
    type: str = "Web"


class ChatTurn(ProfileModel):
    role: Role
    text: str
