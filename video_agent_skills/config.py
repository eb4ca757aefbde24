"""API key resolution from flags, the environment and the per-user config file."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values

from video_agent_skills.errors import ConfigFileError, MissingAPIKeyError

logger = logging.getLogger(__name__)

APP_NAME = "video-agent-skills"
API_KEY_ENV_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY")


def default_config_env_path() -> Path | None:
    """Return ``~/.config/video-agent-skills/.env``, or None without a home directory."""
    try:
        home = Path.home()
    except RuntimeError:
        return None
    return home / ".config" / APP_NAME / ".env"


def load_env_file(path: str | Path | None) -> dict[str, str]:
    """Parse a ``KEY=value`` config file.

    Blank lines and ``#`` comments are skipped, a leading ``export`` is dropped
    and matching quotes around the value are stripped. Lines without ``=`` are
    ignored. A missing file is treated as empty.

    Raises:
        ConfigFileError: the path is a directory or cannot be read.
    """
    if path is None:
        return {}
    path = Path(path)
    if not path.exists():
        return {}
    if path.is_dir():
        raise ConfigFileError(f"env path is a directory: {path}")

    try:
        raw = dotenv_values(path, interpolate=False)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(f"cannot read env file {path}: {e}") from e

    values: dict[str, str] = {}
    for key, value in raw.items():
        key = key.strip()
        if not key or value is None:
            continue
        values[key] = value
    return values


def merge_environment(
    file_values: Mapping[str, str], environ: Mapping[str, str] | None = None
) -> dict[str, str]:
    """Overlay the process environment on config-file values.

    Variables already set to a non-empty value in ``environ`` always win. The
    process environment is never modified.
    """
    if environ is None:
        environ = os.environ
    merged = dict(environ)
    for key, value in file_values.items():
        if not merged.get(key):
            merged[key] = value
    return merged


def resolve_api_key(flag_value: str | None, env: Mapping[str, str]) -> str:
    """Pick the API key: ``-api-key`` flag, then GEMINI_API_KEY, then GOOGLE_API_KEY."""
    key = (flag_value or "").strip()
    if key:
        return key
    for name in API_KEY_ENV_VARS:
        key = (env.get(name) or "").strip()
        if key:
            logger.debug("Using API key from %s", name)
            return key
    raise MissingAPIKeyError(
        "missing API key: set GEMINI_API_KEY or GOOGLE_API_KEY, or pass -api-key"
    )


def load_api_key(
    flag_value: str | None = None,
    config_path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Resolve the API key the way the CLI does.

    Problems with the config file are logged as warnings and the file is then
    treated as absent.
    """
    try:
        file_values = load_env_file(config_path)
    except ConfigFileError as e:
        logger.warning("ignoring config file: %s", e)
        file_values = {}

    return resolve_api_key(flag_value, merge_environment(file_values, environ))
