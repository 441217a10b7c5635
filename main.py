#!/usr/bin/env python3
"""CLI entry point: argparse, init/load the user env file, ask one question, print the answer."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import NoReturn

from openai import OpenAIError

from ask_cli import build_prompt, run_question
from helpp_config import ConfigError, DetailsLevel, init_user_env, load_api_config

LOG_LEVEL_ENV = "HELPP_LOG_LEVEL"


def _configure_logging(prog: str) -> None:
    name = os.environ.get(LOG_LEVEL_ENV, "WARNING").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=f"{prog}: %(levelname)s %(message)s", stream=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        usage="%(prog)s [-d|-dd|-ddd] QUESTION...",
        description="Ask Gemini a quick question from the command line.",
        epilog="NOTE: You can specify only one of d flags.",
    )
    details = parser.add_mutually_exclusive_group()
    details.add_argument(
        "-d",
        dest="details_level",
        action="store_const",
        const=DetailsLevel.DETAILED,
        help="ask model to include more details.",
    )
    details.add_argument(
        "-dd",
        dest="details_level",
        action="store_const",
        const=DetailsLevel.MORE_DETAILED,
        help="ask model to include even more details.",
    )
    details.add_argument(
        "-ddd",
        dest="details_level",
        action="store_const",
        const=DetailsLevel.FULL_DETAILS,
        help="ask model to include as much details as possible (default Gemini settings).",
    )
    parser.set_defaults(details_level=DetailsLevel.DEFAULT)
    # Everything after the flags is the question, even words starting with '-'
    parser.add_argument("question", nargs=argparse.REMAINDER, metavar="QUESTION", help="question words")
    return parser


def _fail(prog: str, err: Exception) -> NoReturn:
    print(f"{prog}: {err}", file=sys.stderr)
    sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(parser.prog)

    try:
        env_file = init_user_env()
    except OSError as e:
        _fail(parser.prog, e)

    question = args.question
    # REMAINDER keeps the "--" separator on some Python versions
    if question[:1] == ["--"]:
        question = question[1:]

    if not question:
        parser.print_help(sys.stderr)
        sys.exit(1)

    try:
        config = load_api_config(env_file, args.details_level)
        run_question(config, build_prompt(question))
    except (ConfigError, OSError, OpenAIError) as e:
        _fail(parser.prog, e)


if __name__ == "__main__":
    main()
