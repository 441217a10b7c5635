"""Pydantic runtime config, verbosity levels and config file constants."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field

APP_NAME = "helpp"

# Relative to the user's home directory
CONFIG_DIR = ".config/" + APP_NAME
ENV_FILE = "env"
CONFIG_DIR_PERMISSION = 0o755
ENV_FILE_PERMISSION = 0o600

ENV_API_KEY = "GEMINI_API_KEY"
ENV_MODEL_NAME = "GEMINI_MODEL_NAME"
DEFAULT_MODEL_NAME = "gemini-2.0-flash"

# Order matters: written to a fresh env file as-is
DEFAULT_ENV = {
    ENV_API_KEY: "",
    ENV_MODEL_NAME: DEFAULT_MODEL_NAME,
}


class ConfigError(Exception):
    """Config file missing, unreadable, or without required values."""


class DetailsLevel(IntEnum):
    """How long an answer the model is asked for (-d, -dd, -ddd)."""

    DEFAULT = 0
    DETAILED = 1
    MORE_DETAILED = 2
    FULL_DETAILS = 3


class ApiConfig(BaseModel):
    """Everything one request needs; built once per run from the env file."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1, repr=False)
    model_name: str = Field(min_length=1)
    system_instruction: str | None = Field(
        default=None,
        description="None leaves the API's default system behaviour",
    )
