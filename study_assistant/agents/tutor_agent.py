"""Tutor agent: persona-driven multi-turn study chat."""

import logging

from study_assistant.llm.gateway import AIGateway, GenerateOptions, get_gateway
from study_assistant.prompts.tutor import TUTOR_SYSTEM_PROMPT
from study_assistant.schemas.profile import ChatTurn
from study_assistant.utils.constants import DEFAULT_STUDENT_NAME, TUTOR_FALLBACK_REPLY

logger = logging.getLogger("uvicorn.error")


def chat_turn(
    prior_turns: list[ChatTurn],
    message: str,
    student_name: str = DEFAULT_STUDENT_NAME,
    gateway: AIGateway | None = None,
) -> str:
    """Answer ``message`` given the earlier transcript.

    The persona and the whole transcript are replayed on every call; nothing
    is held open between turns.
    """
    logger.info("TUTOR HIT")
    gateway = gateway or get_gateway()
    options = GenerateOptions(
        system_instruction=TUTOR_SYSTEM_PROMPT.format(
            student_name=student_name or DEFAULT_STUDENT_NAME
        ),
        prior_turns=list(prior_turns),
    )
    try:
        result = gateway.generate(message, options)
    except Exception as exc:
        logger.error("Tutor reply failed: %s", exc)
        return TUTOR_FALLBACK_REPLY
    return result.text or TUTOR_FALLBACK_REPLY


def send_message(
    transcript: list[ChatTurn],
    message: str,
    student_name: str = DEFAULT_STUDENT_NAME,
    gateway: AIGateway | None = None,
) -> str:
    """Append the user turn, fetch the reply, append the model turn.

    ``transcript`` is mutated in place; the user turn is visible before the
    reply is requested.
    """
    prior = list(transcript)
    transcript.append(ChatTurn(role="user", text=message))
    reply = chat_turn(prior, message, student_name, gateway)
    transcript.append(ChatTurn(role="model", text=reply))
    return reply
