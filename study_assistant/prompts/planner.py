"""Weekly schedule generation prompt template and response schema."""

PLANNER_PROMPT = """\
You are an elite academic strategist for a student named {student_name}. Create a
professional, high-performance {horizon_days}-day study schedule based on the
following profile:

Course: {course_name} ({course_terms}).
Daily Capacity: {daily_hours} hours of focused deep work.
Subjects & Syllabus:
{subject_lines}
Target Exam Date: {exam_date}.

Objective:
Generate a structured, logical sequence of study tasks for the next {horizon_days} days
starting from {today}.
- Ensure topics flow logically (foundational concepts before advanced ones).
- Break down complex syllabus items into manageable "Deep Work" sessions.
- Prioritize based on exam proximity and high-yield topics.
- Use the subject name as subjectId.
- Use ISO dates (YYYY-MM-DD) between {today} and {last_day}.

Return ONLY a JSON array, no extra text.
"""

NO_EXAM_DATE = "None specified"

SCHEDULE_RESPONSE_SCHEMA = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "title": {"type": "string"},
            "subjectId": {"type": "string", "description": "Use the subject name as ID"},
            "description": {"type": "string"},
            "durationMinutes": {"type": "integer"},
            "priority": {"type": "string", "enum": ["High", "Medium", "Low"]},
            "date": {"type": "string", "description": "YYYY-MM-DD format"},
        },
        "required": ["title", "subjectId", "description", "durationMinutes", "priority", "date"],
    },
}
