from __future__ import annotations
import logging
import os
from pathlib import Path


# Defaults
DEFAULT_MAX_DEPTH = 200
DEFAULT_LOG_LEVEL = 'WARNING'


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_max_depth() -> int:
    return int_from_env('TOYLISP_MAX_DEPTH', DEFAULT_MAX_DEPTH)


def get_log_level() -> int:
    name = os.environ.get('TOYLISP_LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"TOYLISP_LOG_LEVEL is not a log level: {name!r}")
    return level


def get_prelude_path() -> Path | None:
    raw = os.environ.get('TOYLISP_PRELUDE')
    if not raw or not raw.strip():
        return None
    return Path(raw.strip())
