from __future__ import annotations
import logging
import os
from typing import Optional

# Defaults
_DEFAULT_MAX_EVAL_DEPTH = 1000


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_max_eval_depth() -> int:
    """Deepest nesting of evaluate() calls before evaluation is aborted."""
    return int_from_env('MAL_MAX_EVAL_DEPTH', _DEFAULT_MAX_EVAL_DEPTH)


def get_log_level() -> Optional[int]:
    """Level for the `mal` logger from MAL_LOG_LEVEL, or None when unset."""
    raw = os.environ.get('MAL_LOG_LEVEL')
    if not raw or not raw.strip():
        return None
    name = raw.strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"MAL_LOG_LEVEL must be a logging level name, got {raw!r}")
    return level
