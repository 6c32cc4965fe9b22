"""Factory for the Ollama-backed chat model."""

from __future__ import annotations

from typing import Any

from langchain_ollama import ChatOllama

from study_assistant.config import settings


def get_chat_model(
    temperature: float | None = None,
    response_format: dict[str, Any] | str | None = None,
):
    """Return a ChatOllama instance configured from settings.

    Parameters
    ----------
    temperature : float, optional
        Sampling temperature; the server default is used when omitted.
    response_format : dict or str, optional
        JSON schema (or ``"json"``) forwarded as Ollama's ``format`` to
        constrain the shape of the reply.

    Returns
    -------
    langchain_ollama.ChatOllama
        A chat model connected to the local Ollama server.
    """
    kwargs: dict[str, Any] = {
        "base_url": settings.ollama_base_url,
        "model": settings.ollama_model,
        "client_kwargs": {"timeout": settings.ollama_timeout_seconds},
    }
    if temperature is not None:
        kwargs["temperature"] = temperature
    if response_format is not None:
        kwargs["format"] = response_format
    return ChatOllama(**kwargs)
