"""Study resource search prompt templates."""

RESEARCH_PROMPT = """\
Find authoritative academic resources, certification courses, and high-quality
educational content for learning "{topic}".
Context: The student is studying {course_context}.

Prioritize:
1. University-backed content (MIT OpenCourseWare, Harvard Online, etc.)
2. Professional Certifications (Coursera, edX, Google Career Certificates)
3. Reputable technical documentation or tutorials.

Return a professional summary of why these resources are relevant.
"""

RESEARCH_SEARCH_QUERY = "{topic} {course_context} course tutorial documentation"
