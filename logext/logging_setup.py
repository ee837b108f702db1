from __future__ import annotations

import json
import logging
import sys
import time
from pathlib import Path
from typing import Optional

from logext.levels import level_from_name
from logext.settings import Settings, settings as default_settings


TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(marker)s %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record; `marker` is null for unmarked records."""

    def format(self, record: logging.LogRecord) -> str:
        marker = getattr(record, "marker", None)
        payload = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "marker": None if marker is None else str(marker),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _formatter(log_format: str) -> logging.Formatter:
    if log_format == "text":
        # `marker` only exists on records logged with one.
        return logging.Formatter(TEXT_FORMAT, defaults={"marker": "-"})
    return JsonFormatter()


def _open_log_file(path: str) -> logging.FileHandler:
    log_path = Path(path).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(log_path, mode="a", encoding="utf-8")


def setup_logging(config: Optional[Settings] = None) -> None:
    """
    Route every channel through the root logger.

    Replaces the root handlers with a stdout handler plus, when `LOG_FILE` is set,
    a file handler; both use the `LOG_FORMAT` formatter and the `LOG_LEVEL` threshold.
    See `logext.settings.Settings` for the variables.
    """

    config = config or default_settings
    level = level_from_name(config.log_level)
    formatter = _formatter(config.log_format)

    root = logging.getLogger()
    root.setLevel(level)
    for existing in list(root.handlers):
        root.removeHandler(existing)

    handlers: list[logging.Handler] = [logging.StreamHandler(stream=sys.stdout)]
    file_error: Optional[OSError] = None
    if config.log_file:
        try:
            handlers.append(_open_log_file(config.log_file))
        except OSError as e:
            file_error = e

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if file_error is not None:
        # Console logging keeps working without the file.
        root.warning("Cannot write log file %s: %s", config.log_file, file_error)
