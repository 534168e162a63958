"""Command-line surface for prettyflags.

- UsageRenderer: colored, column-aligned usage screen
- FlagArgumentParser: argparse parser that shows that screen for help and errors
"""

from prettyflags.cli.help_formatter import (
    FlagArgumentParser,
    UsageRenderer,
)

__all__ = [
    "FlagArgumentParser",
    "UsageRenderer",
]
