"""Single question round: join argument words, ask the model, print the answer."""

from __future__ import annotations

from collections.abc import Iterable

from openai import OpenAI

from helpp_config import ApiConfig
from llm_client import ask


def build_prompt(words: Iterable[str]) -> str:
    return " ".join(words)


def run_question(
    config: ApiConfig,
    question: str,
    *,
    client: OpenAI | None = None,
) -> None:
    """Ask once and print the answer to stdout. Errors propagate to the caller."""
    answer = ask(config, question, client=client)
    print(answer)
