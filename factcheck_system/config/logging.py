"""Loguru setup for the fact-check system.

Interactive terminals get a coloured one-line format; everything else (CI,
containers, pipes) gets one JSON object per line. Every record carries a
``component`` extra, ``factcheck_system`` unless a caller binds its own via
get_logger().
"""

import sys
from typing import Optional, TextIO

from loguru import logger

from factcheck_system.config.settings import settings

DEFAULT_COMPONENT = "factcheck_system"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[component]}</cyan> | <level>{message}</level>"
)


def _wants_console(stream: TextIO, log_format: str) -> bool:
    isatty = getattr(stream, "isatty", None)
    return log_format.lower() == "console" and bool(isatty and isatty())


def configure_logging(
    level: Optional[str] = None,
    log_format: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    (Re)install the single loguru sink.

    Args:
        level: Minimum level; defaults to settings.log_level
        log_format: ``console`` or ``json``; defaults to settings.log_format.
            Console output is only used when the stream is a TTY.
        stream: Destination; stderr for console output, stdout for JSON
    """
    level = (level if level is not None else settings.log_level).upper()
    log_format = log_format if log_format is not None else settings.log_format

    logger.remove()
    logger.configure(extra={"component": DEFAULT_COMPONENT})

    console_stream = stream if stream is not None else sys.stderr
    if _wants_console(console_stream, log_format):
        logger.add(console_stream, format=CONSOLE_FORMAT, level=level, colorize=True)
        return

    logger.add(
        stream if stream is not None else sys.stdout,
        format="{message}",
        level=level,
        serialize=True,
        diagnose=False,  # keep local variables out of shipped logs
    )


def get_logger(component: str):
    """
    Logger bound to a component name.

    Example:
        >>> log = get_logger("ConversationMemoryStore")
        >>> log.debug("Channel context updated", channel_id="c1", size=3)
    """
    return logger.bind(component=component)


configure_logging()

__all__ = ["logger", "get_logger", "configure_logging", "DEFAULT_COMPONENT"]
