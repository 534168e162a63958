"""Configuration objects for prettyflags.

- AppMetadata: app name and build details for the usage header
- ColorTheme: rich styles per render role
- layout: fixed column widths and row format
"""

from prettyflags.config.metadata import AppMetadata, NOT_AVAILABLE
from prettyflags.config.theme import ColorTheme

__all__ = [
    "AppMetadata",
    "NOT_AVAILABLE",
    "ColorTheme",
]
