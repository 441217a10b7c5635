"""Shared fixtures: isolated home directory and a clean GEMINI_* environment."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from helpp_config import ENV_API_KEY, ENV_MODEL_NAME


@pytest.fixture(autouse=True)
def clean_env():
    """load_dotenv writes straight into os.environ; restore it after every test."""
    with patch.dict(os.environ):
        os.environ.pop(ENV_API_KEY, None)
        os.environ.pop(ENV_MODEL_NAME, None)
        yield


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def write_env(home):
    """Write an env file at the default location with the given lines."""

    def _write(*lines: str):
        env_file = home / ".config" / "helpp" / "env"
        env_file.parent.mkdir(parents=True, exist_ok=True)
        env_file.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return env_file

    return _write
