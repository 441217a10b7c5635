"""Locate/create the per-user env file and load it into an ApiConfig."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import dotenv_values, load_dotenv
from dotenv.parser import parse_stream

from helpp_config.prompts import system_instruction_for
from helpp_config.schemas import (
    CONFIG_DIR,
    CONFIG_DIR_PERMISSION,
    DEFAULT_ENV,
    ENV_API_KEY,
    ENV_FILE,
    ENV_FILE_PERMISSION,
    ENV_MODEL_NAME,
    ApiConfig,
    ConfigError,
    DetailsLevel,
)

logger = logging.getLogger(__name__)


def _write_default_env(env_file: Path) -> None:
    """Create env_file owner-only with DEFAULT_ENV, one KEY=value per line."""
    content = "".join(f"{key}={value}\n" for key, value in DEFAULT_ENV.items())
    # O_EXCL: never clobber a file created between the exists() check and here
    fd = os.open(env_file, os.O_WRONLY | os.O_CREAT | os.O_EXCL, ENV_FILE_PERMISSION)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(content)


def init_user_env(home: Path | None = None) -> Path:
    """
    Return the absolute path of the user's env file, creating it with defaults
    (empty API key, default model name) if it does not exist yet.
    Safe to call repeatedly; an existing file is never rewritten.
    """
    if home is None:
        try:
            home = Path.home()
        except RuntimeError as e:
            raise OSError(f"Cannot resolve home directory: {e}") from e

    config_dir = Path(home) / CONFIG_DIR
    env_file = (config_dir / ENV_FILE).absolute()
    logger.debug("Config file: %s", env_file)

    if env_file.exists():
        return env_file

    config_dir.mkdir(mode=CONFIG_DIR_PERMISSION, parents=True, exist_ok=True)
    _write_default_env(env_file)
    logger.info("Created default config at %s; set %s there before asking questions.", env_file, ENV_API_KEY)
    return env_file


def _check_env_file(env_file: Path) -> None:
    """Raise ConfigError if env_file is missing, unreadable or has lines dotenv cannot parse."""
    if not env_file.is_file():
        raise ConfigError(f"Error loading env file, please check the config path ({env_file})")
    try:
        with open(env_file, encoding="utf-8") as f:
            bad_lines = [binding.original.line for binding in parse_stream(f) if binding.error]
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error loading env file, please check the config path ({env_file}): {e}") from e
    if bad_lines:
        lines = ", ".join(str(line) for line in bad_lines)
        raise ConfigError(
            f"Error loading env file, please check the config path ({env_file}): cannot parse line(s) {lines}"
        )


def read_env_file(env_file: Path) -> dict[str, str]:
    """Parse env_file without touching os.environ. Keys without a value map to ''."""
    env_file = Path(env_file)
    _check_env_file(env_file)
    try:
        values = dotenv_values(env_file, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error loading env file, please check the config path ({env_file}): {e}") from e
    return {key: value or "" for key, value in values.items()}


def load_api_config(env_file: Path, details_level: DetailsLevel = DetailsLevel.DEFAULT) -> ApiConfig:
    """
    Load env_file into the process environment (already-set variables win),
    read back the API key and model name, and pick the system instruction
    for details_level. Raises ConfigError naming any missing/empty key.
    """
    env_file = Path(env_file)
    _check_env_file(env_file)
    try:
        load_dotenv(env_file, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error loading env file, please check the config path ({env_file}): {e}") from e

    api_key = os.environ.get(ENV_API_KEY, "")
    model_name = os.environ.get(ENV_MODEL_NAME, "")

    missing = [key for key, value in ((ENV_API_KEY, api_key), (ENV_MODEL_NAME, model_name)) if not value]
    if missing:
        raise ConfigError(
            f"{' and '.join(missing)} isn't set, please check your config file ({env_file})"
        )

    level = DetailsLevel(details_level)
    logger.debug("Model: %s, details level: %s", model_name, level.name)
    return ApiConfig(
        api_key=api_key,
        model_name=model_name,
        system_instruction=system_instruction_for(level),
    )
