"""Schemas for model output that must be validated before it is trusted."""

from __future__ import annotations

import re
from datetime import date

from pydantic import Field, field_validator

from study_assistant.schemas.profile import Priority, ProfileModel, Resource

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class RawTask(ProfileModel):
    title: str
    subject_id: str
    description: str
    duration_minutes: int = Field(gt=0)
    priority: Priority
    date: str

    @field_validator("date")
    @classmethod
    def _iso_date(cls, value: str) -> str:
        value = value.strip()
        # fromisoformat also accepts compact and week dates.
        if not _ISO_DATE_RE.match(value):
            raise ValueError("date must use YYYY-MM-DD")
        date.fromisoformat(value)
        return value


class ResourceSearchResult(ProfileModel):
    summary: str
    resources: list[Resource] = Field(default_factory=list)
