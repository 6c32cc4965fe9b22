"""FastAPI application exposing the study planner and per-task assistant."""

from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import date

from fastapi import FastAPI, HTTPException

from study_assistant.agents.explainer_agent import explain_topic, task_context
from study_assistant.agents.planner_agent import generate_schedule
from study_assistant.agents.research_agent import find_resources
from study_assistant.agents.tutor_agent import send_message
from study_assistant.db.repository_factory import get_repository
from study_assistant.llm.gateway import get_gateway
from study_assistant.schemas.api import (
    ChatRequest,
    ChatResponse,
    CourseSetupRequest,
    ExplanationResponse,
    ProfileResponse,
    ProgressResponse,
    ResourcesResponse,
    TaskGroup,
)
from study_assistant.schemas.profile import Course, Task
from study_assistant.utils.schedule import (
    find_task,
    group_tasks_by_date,
    progress_summary,
    toggle_task_completion,
)

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title="Study Assistant", version="0.1.0")


def today() -> date:
    return date.today()


def _require_course() -> Course:
    course = get_repository().load_course()
    if course is None:
        raise HTTPException(status_code=404, detail="No study profile yet")
    return course


def _require_task(task_id: str) -> Task:
    task = find_task(get_repository().load_tasks(), task_id)
    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


def _generate_and_save(course: Course) -> ProfileResponse:
    repo = get_repository()
    tasks = generate_schedule(course, gateway=get_gateway(), today=today())
    repo.save_tasks(tasks)
    if not tasks:
        logger.warning("Schedule generation returned no tasks")
    return ProfileResponse(course=course, tasks=tasks, generation_failed=not tasks)


@app.get("/profile", response_model=ProfileResponse)
def get_profile():
    repo = get_repository()
    course = repo.load_course()
    if course is None:
        return ProfileResponse()
    return ProfileResponse(course=course, tasks=repo.load_tasks())


@app.post("/profile", response_model=ProfileResponse)
def create_profile(request: CourseSetupRequest):
    """Save a new profile and generate its first week of tasks."""
    course = request.to_course()
    get_repository().save_course(course)
    return _generate_and_save(course)


@app.delete("/profile", status_code=204)
def reset_profile():
    get_repository().reset()


@app.post("/schedule", response_model=ProfileResponse)
def regenerate_schedule():
    return _generate_and_save(_require_course())


@app.get("/tasks/grouped", response_model=list[TaskGroup])
def grouped_tasks():
    current = today().isoformat()
    return [
        TaskGroup(date=day, is_today=day == current, tasks=tasks)
        for day, tasks in group_tasks_by_date(get_repository().load_tasks())
    ]


@app.post("/tasks/{task_id}/toggle", response_model=Task)
def toggle_task(task_id: str):
    repo = get_repository()
    try:
        tasks = toggle_task_completion(repo.load_tasks(), task_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Task not found") from exc
    repo.save_tasks(tasks)
    return find_task(tasks, task_id)


@app.get("/progress", response_model=ProgressResponse)
def progress():
    summary = progress_summary(get_repository().load_tasks(), today())
    return ProgressResponse(**asdict(summary))


@app.post("/tasks/{task_id}/explain", response_model=ExplanationResponse)
def explain_task(task_id: str):
    task = _require_task(task_id)
    explanation = explain_topic(task.title, task_context(task), gateway=get_gateway())
    if explanation is None:
        return ExplanationResponse(status="failed")
    return ExplanationResponse(status="ok", explanation=explanation)


@app.post("/tasks/{task_id}/resources", response_model=ResourcesResponse)
def task_resources(task_id: str):
    task = _require_task(task_id)
    course = _require_course()
    result = find_resources(task.title, course.name, gateway=get_gateway())
    return ResourcesResponse(
        status="ok" if result.resources else "empty",
        summary=result.summary,
        resources=result.resources,
    )


@app.post("/tasks/{task_id}/chat", response_model=ChatResponse)
def chat(task_id: str, request: ChatRequest):
    """Send one tutor message; the transcript travels with the request."""
    _require_task(task_id)
    message = request.message.strip()
    if not message:
        raise HTTPException(status_code=422, detail="Message must not be blank")
    course = get_repository().load_course()
    student_name = course.student_name if course else ""
    history = list(request.history)
    reply = send_message(history, message, student_name, gateway=get_gateway())
    return ChatResponse(reply=reply, history=history)
