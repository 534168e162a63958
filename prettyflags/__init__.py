"""prettyflags - sectioned command-line flags with a colored usage screen.

Flags are registered one at a time into named sections. The usage screen
shows an app header with build details, then one aligned table per
section. Parsing is done by argparse.

Example:
    from prettyflags import FlagHandler

    flags = FlagHandler("myapp", version="1.2.0", commit="3f2a9c1")
    verbose = flags.add_flag_bool("verbose", "General", False, "enable verbose logging", ["v"])
    out = flags.add_flag_string("out", ["General", "Output"], "", "output file")
    flags.parse()
"""

__version__ = "0.1.0"

from prettyflags.errors import ConfigurationError, PrettyFlagsError, ValidationError
from prettyflags.config import AppMetadata, ColorTheme, NOT_AVAILABLE
from prettyflags.registry import FlagDescriptor, FlagRegistry, Sections
from prettyflags.cli import FlagArgumentParser, UsageRenderer
from prettyflags.handler import FlagHandler, FlagValue, new_flag_handler
from prettyflags.utils.logging import configure_logging, get_logger

__all__ = [
    # Version
    "__version__",
    # Handler
    "FlagHandler",
    "FlagValue",
    "new_flag_handler",
    # Registry
    "FlagDescriptor",
    "FlagRegistry",
    "Sections",
    # Rendering
    "UsageRenderer",
    "FlagArgumentParser",
    # Config
    "AppMetadata",
    "ColorTheme",
    "NOT_AVAILABLE",
    # Errors
    "PrettyFlagsError",
    "ConfigurationError",
    "ValidationError",
    # Logging
    "configure_logging",
    "get_logger",
]
