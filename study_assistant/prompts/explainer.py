"""Topic explanation prompt template and response schema."""

EXPLAINER_PROMPT = """\
Act as a Professor specializing in this field.
Topic: {topic}
Context: {context}

Provide a comprehensive academic explanation of this topic.

Structure your response as a JSON object with:
1. "overview": A professional 2-3 sentence executive summary of the topic.
2. "sections": An array of objects, where each object has:
   - "point": A clear, academic subheading (e.g., "Theoretical Framework").
   - "detail": A detailed explanation suitable for a university-level student (2-3 paragraphs).

Maintain a formal, educational tone. Output only JSON.
"""

EXPLANATION_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "overview": {"type": "string"},
        "sections": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "point": {"type": "string"},
                    "detail": {"type": "string"},
                },
                "required": ["point", "detail"],
            },
        },
    },
    "required": ["overview", "sections"],
}
