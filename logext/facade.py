from __future__ import annotations

import inspect
from types import FrameType
from typing import Any, Optional

from logext.errors import StaticFacadeError
from logext.markers import Marker
from logext.provider import ChannelLogger, get_provider, register_wrapper_file


register_wrapper_file(__file__)


def _is_class_body(frame: FrameType) -> bool:
    # Class bodies run unoptimized with the class namespace as locals.
    if frame.f_code.co_flags & inspect.CO_OPTIMIZED or frame.f_locals is frame.f_globals:
        return False
    return frame.f_locals.get("__qualname__") == frame.f_code.co_qualname


def _channel_name(frame: FrameType) -> str:
    """
    Channel of the code running in `frame`: `module.Class` inside a class, else `module`.

    Functions nested in a method belong to the method's class; a class body belongs to its class.
    """

    module = frame.f_globals.get("__name__", "__main__")
    parts = frame.f_code.co_qualname.split(".")
    if not _is_class_body(frame):
        parts = parts[:-1]
    while parts and parts[-1] == "<locals>":
        parts = parts[:-2]
    return ".".join([module, *parts]) if parts else module


class Log:
    """
    Static logging facade.

    Every call resolves the logger for the calling class, so there is no need to keep a
    module-level `logger = logging.getLogger(...)` around:

        class Importer:
            def run(self) -> None:
                Log.info("importing %s", self.path)  # logged on channel "<module>.Importer"

    A `Marker` can be passed first (`Log.warn(AUDIT, "denied %s", user)`) or as `marker=`;
    attach an exception with `exc_info=`.
    """

    NAME = f"{__name__}.Log"

    def __new__(cls, *args: Any, **kwargs: Any) -> "Log":
        raise StaticFacadeError(f"{cls.NAME} is a static facade and cannot be instantiated", facade=cls.NAME)

    @staticmethod
    def _caller_name() -> str:
        frame = inspect.currentframe()
        try:
            caller = frame.f_back if frame is not None else None
            while caller is not None:
                name = _channel_name(caller)
                if name != Log.NAME:
                    return name
                caller = caller.f_back
            return Log.NAME
        finally:
            del frame

    @staticmethod
    def _get_logger() -> ChannelLogger:
        return get_provider().get_logger(Log._caller_name())

    @staticmethod
    def get_name() -> str:
        return Log._get_logger().name

    @staticmethod
    def is_trace_enabled(marker: Optional[Marker] = None) -> bool:
        return Log._get_logger().is_trace_enabled(marker)

    @staticmethod
    def trace(msg: Any, *args: Any, **kwargs: Any) -> None:
        Log._get_logger().trace(msg, *args, **kwargs)

    @staticmethod
    def is_debug_enabled(marker: Optional[Marker] = None) -> bool:
        return Log._get_logger().is_debug_enabled(marker)

    @staticmethod
    def debug(msg: Any, *args: Any, **kwargs: Any) -> None:
        Log._get_logger().debug(msg, *args, **kwargs)

    @staticmethod
    def is_info_enabled(marker: Optional[Marker] = None) -> bool:
        return Log._get_logger().is_info_enabled(marker)

    @staticmethod
    def info(msg: Any, *args: Any, **kwargs: Any) -> None:
        Log._get_logger().info(msg, *args, **kwargs)

    @staticmethod
    def is_warn_enabled(marker: Optional[Marker] = None) -> bool:
        return Log._get_logger().is_warn_enabled(marker)

    @staticmethod
    def warn(msg: Any, *args: Any, **kwargs: Any) -> None:
        Log._get_logger().warn(msg, *args, **kwargs)

    warning = warn

    @staticmethod
    def is_error_enabled(marker: Optional[Marker] = None) -> bool:
        return Log._get_logger().is_error_enabled(marker)

    @staticmethod
    def error(msg: Any, *args: Any, **kwargs: Any) -> None:
        Log._get_logger().error(msg, *args, **kwargs)
