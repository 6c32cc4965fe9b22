"""Planner agent: turns a course profile into a week of study tasks."""

from __future__ import annotations

import logging
from datetime import date, timedelta

from study_assistant.config import settings
from study_assistant.llm.gateway import AIGateway, GatewayError, GenerateOptions, get_gateway
from study_assistant.prompts.planner import NO_EXAM_DATE, PLANNER_PROMPT, SCHEDULE_RESPONSE_SCHEMA
from study_assistant.schemas.generation import RawTask
from study_assistant.schemas.profile import Course, Task, new_task_id
from study_assistant.utils.constants import DEFAULT_STUDENT_NAME
from study_assistant.utils.llm_parse import parse_llm_json
from study_assistant.utils.schedule import reward_points

logger = logging.getLogger("uvicorn.error")


def _course_terms(course: Course) -> str:
    semester = (course.semester or "").strip()
    if not semester:
        return course.degree
    return f"{course.degree}, Semester {semester}"


def build_schedule_prompt(course: Course, today: date) -> str:
    """Render the scheduling brief for ``course`` anchored at ``today``."""
    horizon = settings.planning_horizon_days
    subject_lines = "\n".join(
        f"- {subject.name}: {', '.join(topic.strip() for topic in subject.syllabus_topics if topic.strip())}"
        for subject in course.subjects
    )
    return PLANNER_PROMPT.format(
        student_name=course.student_name or DEFAULT_STUDENT_NAME,
        horizon_days=horizon,
        course_name=course.name,
        course_terms=_course_terms(course),
        daily_hours=course.daily_study_hours,
        subject_lines=subject_lines or "- (no subjects listed)",
        exam_date=course.exam_date or NO_EXAM_DATE,
        today=today.isoformat(),
        last_day=(today + timedelta(days=max(horizon - 1, 0))).isoformat(),
    )


def enrich_tasks(raw_tasks: list[RawTask]) -> list[Task]:
    """Give each validated task an id, an open completion flag and its xp."""
    return [
        Task(
            id=new_task_id(),
            title=raw.title,
            subject_id=raw.subject_id,
            description=raw.description,
            duration_minutes=raw.duration_minutes,
            priority=raw.priority,
            date=raw.date,
            is_completed=False,
            xp=reward_points(raw.duration_minutes),
        )
        for raw in raw_tasks
    ]


def generate_schedule(
    course: Course,
    gateway: AIGateway | None = None,
    today: date | None = None,
) -> list[Task]:
    """Generate the study schedule for ``course``.

    Parameters
    ----------
    course : Course
    gateway : AIGateway, optional
        Defaults to the process-wide gateway.
    today : date, optional
        First day of the planning horizon; defaults to the current date.

    Returns
    -------
    list[Task]
        Tasks in the order the model returned them. Empty when the call
        failed or the response did not match the schedule schema, so callers
        must read an empty list as "generation failed", not "nothing to do".
    """
    logger.info("PLANNER HIT")
    gateway = gateway or get_gateway()
    prompt = build_schedule_prompt(course, today or date.today())
    options = GenerateOptions(
        response_schema=SCHEDULE_RESPONSE_SCHEMA,
        temperature=settings.schedule_temperature,
    )

    try:
        result = gateway.generate(prompt, options)
        raw_tasks = parse_llm_json(result.text, list[RawTask])
    except (GatewayError, ValueError) as exc:
        logger.error("Failed to generate schedule: %s", exc)
        return []
    except Exception:
        logger.exception("Failed to generate schedule")
        return []

    tasks = enrich_tasks(raw_tasks)
    logger.info("Planner produced %d tasks", len(tasks))
    return tasks
