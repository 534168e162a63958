"""Utility modules for prettyflags."""

from prettyflags.utils.logging import get_logger, configure_logging, RichLogger

__all__ = [
    "get_logger",
    "configure_logging",
    "RichLogger",
]
