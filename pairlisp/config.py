from __future__ import annotations
import logging
import os
from typing import Optional

# Defaults
_DEFAULT_LOG_LEVEL = logging.WARNING
_DEFAULT_BIND_NIL = True

_FALSE_VALUES = {"0", "false", "no", "off"}

PACKAGE_LOGGER = "pairlisp"


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE_VALUES


def level_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    # getLevelName maps unknown names to the string "Level <name>"
    return level if isinstance(level, int) else default


def get_log_level() -> int:
    return level_from_env('PAIRLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL)


def get_bind_nil() -> bool:
    return flag_from_env('PAIRLISP_BIND_NIL', _DEFAULT_BIND_NIL)


def configure_logging(level: Optional[int] = None) -> None:
    # Only the level; handlers are left to the embedding application
    logging.getLogger(PACKAGE_LOGGER).setLevel(get_log_level() if level is None else level)
