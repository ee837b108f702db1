from __future__ import annotations

import inspect
import logging
import os
from typing import Any, MutableMapping, Optional, Protocol

from logext.levels import DEBUG, ERROR, INFO, TRACE, WARN
from logext.markers import Marker


_wrapper_files: set[str] = {os.path.normcase(__file__)}


def register_wrapper_file(path: str) -> None:
    """
    Treat frames from `path` as part of the logging call itself.

    Records then point at the code that called into the wrapper instead of the wrapper.
    """

    _wrapper_files.add(os.path.normcase(path))


def _wrapper_depth() -> int:
    depth = 0
    frame = inspect.currentframe()
    try:
        caller = frame.f_back if frame is not None else None
        while caller is not None and os.path.normcase(caller.f_code.co_filename) in _wrapper_files:
            depth += 1
            caller = caller.f_back
        return depth
    finally:
        del frame


class ChannelLogger(logging.LoggerAdapter):
    """
    Logger for one channel with marker support and a `trace` level.

    Write methods take `(msg, *args, **kwargs)` or `(marker, msg, *args, **kwargs)`;
    the marker may also be given as `marker=`. It is attached to the record as `record.marker`.
    """

    def __init__(self, logger: logging.Logger) -> None:
        super().__init__(logger, {})

    @property
    def name(self) -> str:
        return self.logger.name

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        marker = kwargs.pop("marker", None)
        if marker is not None:
            kwargs["extra"] = {**(kwargs.get("extra") or {}), "marker": marker}
        return msg, kwargs

    def log(self, level: int, msg: Any, *args: Any, **kwargs: Any) -> None:
        if isinstance(msg, Marker):
            if not args:
                raise TypeError("a message must follow the marker")
            kwargs["marker"] = msg
            msg, *args = args
        if not self.isEnabledFor(level):
            return
        msg, kwargs = self.process(msg, kwargs)
        kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + _wrapper_depth()
        self.logger.log(level, msg, *args, **kwargs)

    def is_enabled(self, level: int, marker: Optional[Marker] = None) -> bool:
        # Markers do not affect the level check.
        return self.isEnabledFor(level)

    def is_trace_enabled(self, marker: Optional[Marker] = None) -> bool:
        return self.is_enabled(TRACE, marker)

    def is_debug_enabled(self, marker: Optional[Marker] = None) -> bool:
        return self.is_enabled(DEBUG, marker)

    def is_info_enabled(self, marker: Optional[Marker] = None) -> bool:
        return self.is_enabled(INFO, marker)

    def is_warn_enabled(self, marker: Optional[Marker] = None) -> bool:
        return self.is_enabled(WARN, marker)

    def is_error_enabled(self, marker: Optional[Marker] = None) -> bool:
        return self.is_enabled(ERROR, marker)

    def trace(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.log(TRACE, msg, *args, **kwargs)

    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.log(DEBUG, msg, *args, **kwargs)

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.log(INFO, msg, *args, **kwargs)

    def warn(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.log(WARN, msg, *args, **kwargs)

    warning = warn

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.log(ERROR, msg, *args, **kwargs)


class LoggerProvider(Protocol):
    def get_logger(self, name: str) -> ChannelLogger: ...


class StdlibLoggerProvider:
    """Get-or-create channel loggers from the `logging` manager."""

    def get_logger(self, name: str) -> ChannelLogger:
        return ChannelLogger(logging.getLogger(name))


_default_provider = StdlibLoggerProvider()
_provider: LoggerProvider = _default_provider


def get_provider() -> LoggerProvider:
    return _provider


def set_provider(provider: Optional[LoggerProvider]) -> LoggerProvider:
    """Install `provider` (None restores the default) and return the previous one."""
    global _provider
    previous = _provider
    _provider = provider if provider is not None else _default_provider
    return previous
