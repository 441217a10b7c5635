"""User config for the helpp CLI: env file location, loading and verbosity prompts."""

from helpp_config.schemas import (
    ApiConfig,
    ConfigError,
    DetailsLevel,
    DEFAULT_MODEL_NAME,
    ENV_API_KEY,
    ENV_MODEL_NAME,
)
from helpp_config.prompts import system_instruction_for
from helpp_config.store import init_user_env, load_api_config, read_env_file

__all__ = [
    "init_user_env",
    "load_api_config",
    "read_env_file",
    "system_instruction_for",
    "ApiConfig",
    "ConfigError",
    "DetailsLevel",
    "DEFAULT_MODEL_NAME",
    "ENV_API_KEY",
    "ENV_MODEL_NAME",
]
