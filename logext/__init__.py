"""
Static logging facade over the standard `logging` package.

`Log` resolves the caller's channel (`module.Class`) on every call:

    from logext import Log

    class Importer:
        def run(self) -> None:
            Log.info("started")
"""

from logext.errors import StaticFacadeError
from logext.facade import Log
from logext.levels import TRACE
from logext.log import get_logger
from logext.logging_setup import setup_logging
from logext.markers import Marker, get_detached_marker, get_marker
from logext.provider import ChannelLogger, LoggerProvider, StdlibLoggerProvider, get_provider, set_provider

__all__ = [
    "ChannelLogger",
    "Log",
    "LoggerProvider",
    "Marker",
    "StaticFacadeError",
    "StdlibLoggerProvider",
    "TRACE",
    "get_detached_marker",
    "get_logger",
    "get_marker",
    "get_provider",
    "set_provider",
    "setup_logging",
]
