"""Runtime settings for modcheck.

Credentials come from the environment (optionally via a ``.env`` file).
Everything else can also be set from a YAML file, and CLI options win over
both.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv

from modcheck.errors import ConfigurationError

DEFAULT_MODEL = "omni-moderation-latest"
DEFAULT_CONTENT_PATH = "content.txt"

_ENV_VARS: dict[str, str] = {
    "api_key": "OPENAI_API_KEY",
    "model": "MODCHECK_MODEL",
    "content_path": "MODCHECK_CONTENT_PATH",
    "log_level": "MODCHECK_LOG_LEVEL",
}

# Credentials are read from the environment only.
_FILE_KEYS = {"model", "content_path", "wait_threshold", "score_threshold", "top_n", "log_level"}


@dataclass
class Settings:
    """Resolved configuration for one run."""

    api_key: str = ""
    model: str = DEFAULT_MODEL
    content_path: str = DEFAULT_CONTENT_PATH
    wait_threshold: float = 0.1
    score_threshold: float = 0.1
    top_n: int = 3
    log_level: str = "WARNING"

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError(
                "OPENAI_API_KEY environment variable is required. "
                "Please set it in your environment or .env file."
            )
        return self.api_key


def _load_file(path: str | Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to load config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    unknown = sorted(set(data) - _FILE_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown config keys in {path}: {', '.join(unknown)}")
    return data


def _coerce(settings: Settings) -> Settings:
    try:
        coerced = replace(
            settings,
            wait_threshold=float(settings.wait_threshold),
            score_threshold=float(settings.score_threshold),
            top_n=int(settings.top_n),
            log_level=str(settings.log_level).upper(),
        )
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid setting value: {e}") from e

    if coerced.top_n < 0:
        raise ConfigurationError(f"top_n must not be negative: {coerced.top_n}")
    if coerced.wait_threshold < 0 or coerced.score_threshold < 0:
        raise ConfigurationError("Thresholds must not be negative")
    return coerced


def load_settings(config_path: str | Path | None = None, **overrides: Any) -> Settings:
    """Resolve settings from ``.env``, the environment, *config_path* and *overrides*.

    Later sources win.  ``None`` overrides are ignored so CLI options that
    were not given leave earlier values alone.
    """
    load_dotenv(find_dotenv(usecwd=True))

    values: dict[str, Any] = {}
    for name, var in _ENV_VARS.items():
        env_value = os.environ.get(var)
        if env_value:
            values[name] = env_value

    if config_path:
        values.update(_load_file(config_path))

    known = {f.name for f in fields(Settings)}
    for name, value in overrides.items():
        if name not in known:
            raise ConfigurationError(f"Unknown setting: {name}")
        if value is not None:
            values[name] = value

    return _coerce(Settings(**values))
