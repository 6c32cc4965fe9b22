"""Shared magic values used across agents and the API."""

# Reward points granted per scheduled minute of study.
XP_PER_MINUTE = "1.5"

# Display name used in prompts when the profile has none.
DEFAULT_STUDENT_NAME = "Student"

# Capability name understood by the gateway for live web grounding.
WEB_SEARCH_TOOL = "web_search"

# Degraded results returned instead of raising.
TUTOR_FALLBACK_REPLY = "Sorry, I missed that."
NO_RESOURCES_SUMMARY = "No resources found."
RESOURCE_SEARCH_ERROR = "Error searching for resources."

# Snapshot keys in the key-value store.
COURSE_KEY = "scholar_course"
TASKS_KEY = "scholar_tasks"
