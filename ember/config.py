from __future__ import annotations
import logging
import os

DEFAULT_RECURSION_LIMIT = 10000
DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger("ember.config")


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r", var, raw)
        return default
    return value if value > 0 else default


def get_recursion_limit() -> int:
    return int_from_env("EMBER_RECURSION_LIMIT", DEFAULT_RECURSION_LIMIT)


def get_log_level() -> str:
    raw = os.environ.get("EMBER_LOG_LEVEL", "").strip().upper()
    # getLevelName maps a known level name back to its number
    return raw if isinstance(logging.getLevelName(raw), int) else DEFAULT_LOG_LEVEL
