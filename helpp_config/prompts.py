"""System instructions per verbosity level."""

from __future__ import annotations

from helpp_config.schemas import DetailsLevel

SYSTEM_INSTRUCTIONS = {
    DetailsLevel.DEFAULT: (
        "You are a CLI helping tool, give me very short (1-2 lines) answers to user questions,"
        " with an example command/code snippet if applicable."
    ),
    DetailsLevel.DETAILED: (
        "You are a CLI helping tool, give me short (3-5 lines) answer to user question,"
        " with an example command/code snippet if applicable."
    ),
    DetailsLevel.MORE_DETAILED: (
        "You are a CLI helping tool, give me somewhat detailed (7-10 lines) answer to user question,"
        " with an example command/code snippets"
    ),
    # FULL_DETAILS: no override, model defaults apply
}


def system_instruction_for(level: DetailsLevel) -> str | None:
    return SYSTEM_INSTRUCTIONS.get(DetailsLevel(level))
