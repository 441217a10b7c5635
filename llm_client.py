"""Gemini via its OpenAI-compatible Chat Completions endpoint: client, messages, one-shot call."""

from __future__ import annotations

import logging
from typing import Any

from openai import OpenAI

from helpp_config import ApiConfig

logger = logging.getLogger(__name__)

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"


def get_chat_client(api_key: str) -> OpenAI:
    """OpenAI SDK client pointed at Gemini. SDK-level retries are off: one request per question."""
    return OpenAI(api_key=api_key, base_url=GEMINI_OPENAI_BASE_URL, max_retries=0)


def build_messages(user_text: str, system_prompt: str | None) -> list[dict[str, str]]:
    """Build messages for a single turn: [system?, user]."""
    messages: list[dict[str, str]] = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": user_text})
    return messages


def create_message(
    client: OpenAI,
    user_text: str,
    *,
    model: str,
    system_prompt: str | None = None,
) -> str:
    """
    Chat Completions API: one shot, no streaming. Returns the first choice's text,
    or an empty string if the model sent none. API errors are not caught here.
    """
    kwargs: dict[str, Any] = {
        "model": model,
        "messages": build_messages(user_text, system_prompt),
        "stream": False,
    }
    response = client.chat.completions.create(**kwargs)

    choice = (response.choices or [None])[0]
    if choice is None:
        return ""
    return getattr(choice.message, "content", None) or ""


def ask(config: ApiConfig, question: str, *, client: OpenAI | None = None) -> str:
    """Send question with config's model and system instruction; return the answer text."""
    if client is None:
        client = get_chat_client(config.api_key)
    logger.debug(
        "Sending question to %s (system instruction: %s)",
        config.model_name,
        "yes" if config.system_instruction else "no",
    )
    return create_message(
        client,
        question,
        model=config.model_name,
        system_prompt=config.system_instruction,
    )
