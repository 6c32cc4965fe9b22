"""Request and response schemas for the HTTP API."""

from __future__ import annotations

import uuid
from typing import Literal

from pydantic import BaseModel, Field

from study_assistant.schemas.profile import ChatTurn, Course, Explanation, Resource, Subject, Task


class SubjectInput(BaseModel):
    name: str = ""
    syllabus_topics: list[str] = Field(default_factory=list)
    proficiency: int = Field(default=50, ge=0, le=100)


class CourseSetupRequest(BaseModel):
    """Profile wizard submission; range checks happen here and nowhere deeper."""

    student_name: str = Field(min_length=1)
    name: str = Field(min_length=1)
    semester: str = ""
    exam_date: str | None = None
    daily_study_hours: int = Field(default=2, ge=1, le=16)
    subjects: list[SubjectInput] = Field(default_factory=list)

    def to_course(self) -> Course:
        """Build the course, discarding subjects left without a name."""
        subjects = [
            Subject(
                id=str(idx),
                name=subject.name.strip(),
                syllabus_topics=[t.strip() for t in subject.syllabus_topics if t.strip()],
                proficiency=subject.proficiency,
            )
            for idx, subject in enumerate(self.subjects, start=1)
            if subject.name.strip()
        ]
        return Course(
            id=uuid.uuid4().hex,
            student_name=self.student_name.strip(),
            name=self.name.strip(),
            semester=self.semester,
            exam_date=self.exam_date or None,
            daily_study_hours=self.daily_study_hours,
            subjects=subjects,
        )


class ProfileResponse(BaseModel):
    course: Course | None = None
    tasks: list[Task] = Field(default_factory=list)
    generation_failed: bool = False


class TaskGroup(BaseModel):
    date: str
    is_today: bool
    tasks: list[Task]


class ProgressResponse(BaseModel):
    total_tasks: int
    completed_tasks: int
    completion_percent: int
    today_tasks: int
    today_completed: int
    today_xp_earned: int
    today_xp_available: int


class ExplanationResponse(BaseModel):
    status: Literal["ok", "failed"]
    explanation: Explanation | None = None


class ResourcesResponse(BaseModel):
    status: Literal["ok", "empty"]
    summary: str
    resources: list[Resource] = Field(default_factory=list)


class ChatRequest(BaseModel):
    """A new tutor message plus the transcript so far (held by the client)."""

    history: list[ChatTurn] = Field(default_factory=list)
    message: str = Field(min_length=1)


class ChatResponse(BaseModel):
    reply: str
    history: list[ChatTurn]
