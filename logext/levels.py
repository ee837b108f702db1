from __future__ import annotations

import logging

TRACE = 5
DEBUG = logging.DEBUG
INFO = logging.INFO
WARN = logging.WARNING
ERROR = logging.ERROR

logging.addLevelName(TRACE, "TRACE")


def level_from_name(name: str | None, default: int = logging.INFO) -> int:
    """Map a level name such as `TRACE` or `warn` to its numeric value."""
    key = (name or "").strip().upper()
    if key == "WARN":
        key = "WARNING"
    value = logging.getLevelName(key)
    return value if isinstance(value, int) else default
