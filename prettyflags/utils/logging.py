"""
Library logging built on loguru.

prettyflags is imported by host applications, so its log records are
disabled until the application opts in with configure_logging().

Usage:
    from prettyflags.utils.logging import configure_logging, get_logger

    configure_logging(level="DEBUG")
    logger = get_logger(__name__)
    logger.debug("Registered flag --verbose")
"""

import os
import sys
from typing import Any, Optional

from loguru import logger as loguru_logger

_PACKAGE = "prettyflags"

loguru_logger.disable(_PACKAGE)


class RichLogger:
    """
    Thin named wrapper around the shared loguru logger.

    Messages are prefixed with the logger name so records from different
    modules stay distinguishable on a single sink.
    """

    def __init__(self, name: str):
        self.name = name
        self._logger = loguru_logger

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(f"[{self.name}] {message}", **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(f"[{self.name}] {message}", **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(f"[{self.name}] {message}", **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(f"[{self.name}] {message}", **kwargs)

    def bind(self, **kwargs: Any) -> "RichLogger":
        """
        Bind context to logger (for structured logging).

        Args:
            **kwargs: Context key-value pairs

        Returns:
            Self for chaining
        """
        self._logger = self._logger.bind(**kwargs)
        return self


def get_logger(name: str) -> RichLogger:
    """
    Get a named logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        RichLogger bound to the shared loguru logger
    """
    return RichLogger(name)


def configure_logging(
    level: Optional[str] = None,
    format: Optional[str] = None,
    sink: Any = sys.stderr,
) -> int:
    """
    Enable prettyflags log records and route them to a sink.

    Supports environment variables for easy configuration:
    - LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR)
    - LOG_FORMAT: Set custom format template

    Args:
        level: Log level. Defaults to LOG_LEVEL env var or "INFO"
        format: Custom loguru format string. Defaults to LOG_FORMAT env var
                or the default template
        sink: Output sink (default: stderr)

    Returns:
        The loguru handler id, usable with ``loguru.logger.remove``

    Example:
        >>> configure_logging(level="DEBUG")
    """
    if level is None:
        level = os.environ.get("LOG_LEVEL", "INFO")

    if format is None:
        format = os.environ.get("LOG_FORMAT")
        if format is None:
            format = (
                "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<level>{message}</level>"
            )

    loguru_logger.enable(_PACKAGE)

    return loguru_logger.add(
        sink,
        format=format,
        level=level.upper(),
        filter=_PACKAGE,
    )
