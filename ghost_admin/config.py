"""Configuration loader for the Ghost Admin API client.

Loads a YAML config file with environment variable overrides.
All env vars use the GHOST_ADMIN_ prefix.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from ghost_admin.client import GhostConfig
from ghost_admin.constants import (
    DEFAULT_GHOST_PATH,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_VERSION,
)

ENV_PREFIX = "GHOST_ADMIN_"


def load_config(path: Path | None = None) -> GhostConfig:
    """Load client config from YAML file with env var overrides.

    Env vars override YAML values. Mapping:
      GHOST_ADMIN_API_URL → ghost.api_url
      GHOST_ADMIN_API_KEY → ghost.admin_api_key
      GHOST_ADMIN_VERSION → ghost.version
      GHOST_ADMIN_GHOST_PATH → ghost.ghost_path
      GHOST_ADMIN_USER_AGENT → ghost.user_agent
      GHOST_ADMIN_TIMEOUT → ghost.timeout
    """
    raw: dict[str, Any] = {}
    if path and path.exists():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}

    ghost = raw.get("ghost", {}) if isinstance(raw, dict) else {}
    if not isinstance(ghost, dict):
        ghost = {}

    return GhostConfig(
        api_url=_env_or("API_URL", _str_value(ghost.get("api_url"), "")),
        admin_api_key=_env_or("API_KEY", _str_value(ghost.get("admin_api_key"), "")),
        version=_env_or("VERSION", _str_value(ghost.get("version"), DEFAULT_VERSION)),
        ghost_path=_env_or("GHOST_PATH", _str_value(ghost.get("ghost_path"), DEFAULT_GHOST_PATH)),
        user_agent=_env_or("USER_AGENT", _str_value(ghost.get("user_agent"), "")),
        timeout=_env_float("TIMEOUT", ghost.get("timeout", DEFAULT_HTTP_TIMEOUT)),
    )


def _str_value(value: Any, default: str) -> str:
    # Unquoted YAML scalars such as `version: 5.0` load as numbers.
    return default if value is None else str(value)


def _env_or(suffix: str, default: str) -> str:
    return os.environ.get(f"{ENV_PREFIX}{suffix}", default)


def _env_float(suffix: str, default: float | None) -> float:
    val = os.environ.get(f"{ENV_PREFIX}{suffix}")
    if val is None:
        return DEFAULT_HTTP_TIMEOUT if default is None else float(default)
    try:
        return float(val)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{suffix} must be a number, got {val!r}") from exc
