from __future__ import annotations

from logext.provider import ChannelLogger, get_provider


def get_logger(name: str) -> ChannelLogger:
    """
    Logger for an explicitly named channel.

    Same loggers as `Log`, without stack inspection; the caller passes its own channel name.
    Formatting/handlers/levels are configured centrally in `logext.logging_setup.setup_logging()`.
    """

    return get_provider().get_logger(name)
