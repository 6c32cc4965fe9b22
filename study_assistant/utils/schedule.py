"""Pure helpers over task collections: rewards, grouping, completion, progress."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from study_assistant.schemas.profile import DEFAULT_TASK_XP, Task
from study_assistant.utils.constants import XP_PER_MINUTE


def reward_points(duration_minutes: int) -> int:
    """Return ``duration_minutes * 1.5`` rounded half-up (33 -> 50, 35 -> 53)."""
    points = Decimal(duration_minutes) * Decimal(XP_PER_MINUTE)
    return int(points.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def group_tasks_by_date(tasks: list[Task]) -> list[tuple[str, list[Task]]]:
    """Group tasks by ISO date, dates ascending, task order preserved."""
    groups: dict[str, list[Task]] = {}
    for task in tasks:
        groups.setdefault(task.date, []).append(task)
    return [(day, groups[day]) for day in sorted(groups)]


def find_task(tasks: list[Task], task_id: str) -> Task | None:
    for task in tasks:
        if task.id == task_id:
            return task
    return None


def toggle_task_completion(tasks: list[Task], task_id: str) -> list[Task]:
    """Return a new list with the completion flag of ``task_id`` flipped.

    Raises
    ------
    KeyError
        If no task has ``task_id``.
    """
    if find_task(tasks, task_id) is None:
        raise KeyError(task_id)
    return [
        task.model_copy(update={"is_completed": not task.is_completed})
        if task.id == task_id
        else task
        for task in tasks
    ]


def tasks_for_day(tasks: list[Task], day: date | str) -> list[Task]:
    key = day.isoformat() if isinstance(day, date) else day
    return [task for task in tasks if task.date == key]


@dataclass(frozen=True)
class ProgressSummary:
    total_tasks: int
    completed_tasks: int
    completion_percent: int
    today_tasks: int
    today_completed: int
    today_xp_earned: int
    today_xp_available: int


def progress_summary(tasks: list[Task], today: date) -> ProgressSummary:
    completed = [task for task in tasks if task.is_completed]
    todays = tasks_for_day(tasks, today)
    todays_done = [task for task in todays if task.is_completed]
    percent = round(len(completed) / len(tasks) * 100) if tasks else 0
    return ProgressSummary(
        total_tasks=len(tasks),
        completed_tasks=len(completed),
        completion_percent=percent,
        today_tasks=len(todays),
        today_completed=len(todays_done),
        today_xp_earned=sum(task.xp or DEFAULT_TASK_XP for task in todays_done),
        today_xp_available=sum(task.xp or DEFAULT_TASK_XP for task in todays),
    )
