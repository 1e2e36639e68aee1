"""
Utility functions for the Zonos Graph client.
Provides logging configuration and shared helpers.
"""

import logging
import sys
from typing import Optional, Union

import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(
    level: Union[int, str, None] = None,
    log_file: Optional[str] = config.LOG_FILE,
) -> None:
    """
    Configure the root logger for the client, the CLI and the fake Graph.

    Does nothing if the root logger already has handlers, so embedding
    applications keep their own setup.

    Args:
        level: Logging level or level name (default: config.LOG_LEVEL).
        log_file: File to append records to. Empty or None logs to stderr only.
    """
    root = logging.getLogger()

    if root.handlers:
        return

    if level is None:
        level = config.LOG_LEVEL
    root.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    # httpx logs every request at INFO; only show it when debugging
    if root.getEffectiveLevel() > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)


def describe_error(exc: BaseException) -> str:
    """
    Serialize an exception of unknown shape into a single message.

    Args:
        exc: The exception raised by the remote call.

    Returns:
        "<ExceptionType>: <message>", or just the type name if the message is empty.
    """
    message = str(exc).strip()
    if not message:
        return type(exc).__name__
    return f"{type(exc).__name__}: {message}"
