from __future__ import annotations
import logging
import os
from typing import Optional


_DEFAULT_PROMPT = 'lisk> '
_DEFAULT_LOG_LEVEL = 'WARNING'


def get_prompt() -> str:
    return os.environ.get('LISK_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    """Resolve LISK_LOG_LEVEL (a level name such as DEBUG) to a logging level."""
    raw = os.environ.get('LISK_LOG_LEVEL', '').strip().upper() or _DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get('LISK_RECURSION_LIMIT')
    if not raw or not raw.strip():
        return None
    try:
        limit = int(raw)
    except ValueError:
        return None
    return limit if limit > 0 else None
