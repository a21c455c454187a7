"""Environment-driven service configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_LIMIT = 200
HARD_LIMIT = 5000


@dataclass(frozen=True, slots=True)
class ServiceConfig:
    log_level: str = "INFO"
    default_limit: int = DEFAULT_LIMIT
    hard_limit: int = HARD_LIMIT
    encoding: str = "utf-8"
    decode_errors: str = "replace"


def _env_int(name: str, default: int) -> int:
    env = os.getenv(name)
    if env is None or env == "":
        return default
    try:
        value = int(env)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc
    if value < 1:
        raise ValueError(f"{name} must be >= 1")
    return value


def resolve_service_config() -> ServiceConfig:
    """Return config with optional env overrides applied.

    Reads LOGLINE_LOG_LEVEL, LOGLINE_DEFAULT_LIMIT and LOGLINE_ENCODING.
    """
    default_limit = _env_int("LOGLINE_DEFAULT_LIMIT", DEFAULT_LIMIT)
    return ServiceConfig(
        log_level=os.getenv("LOGLINE_LOG_LEVEL", "INFO").upper(),
        default_limit=min(default_limit, HARD_LIMIT),
        encoding=os.getenv("LOGLINE_ENCODING") or "utf-8",
    )
