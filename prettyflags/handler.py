"""Flag registration and parsing.

A FlagHandler owns everything a command line needs: the section registry,
the app metadata shown in the usage header, and its own argparse parser.
Several handlers can coexist in one process.

Example:
    flags = FlagHandler("myapp", version="1.2.0")
    verbose = flags.add_flag_bool("verbose", "General", False, "enable verbose logging", ["v"])
    port = flags.add_flag_uint("port", ["Server", "General"], 8080, "listen port")
    flags.parse()

    if verbose.value:
        ...
"""

import argparse
import sys
from typing import Any, Callable, List, Optional, Sequence, TextIO

from prettyflags.cli.help_formatter import FlagArgumentParser, UsageRenderer
from prettyflags.config.metadata import AppMetadata
from prettyflags.config.theme import ColorTheme
from prettyflags.errors import ConfigurationError
from prettyflags.registry import FlagRegistry, SectionArg, Sections
from prettyflags.utils.logging import get_logger
from prettyflags import values

logger = get_logger(__name__)


class FlagValue:
    """Handle to a flag's value.

    Holds the default until ``FlagHandler.parse`` runs, and the value from
    the command line afterwards.

    Attributes:
        name: Primary flag name
        kind: Flag kind name (``bool``, ``string``, ``int``, ...)
        value: Current value
    """

    def __init__(self, name: str, kind: str, value: Any):
        self.name = name
        self.kind = kind
        self.value = value

    def __bool__(self) -> bool:
        return bool(self.value)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"FlagValue(name={self.name!r}, kind={self.kind!r}, value={self.value!r})"


class FlagHandler:
    """Registers flags into sections and parses the command line.

    Args:
        app: Application name for the usage header
        version: Release version (``N/A`` when None)
        branch: Build branch (``N/A`` when None)
        commit: Build commit (``N/A`` when None)
        tag: Build tag (``N/A`` when None)
        output: Stream the usage screen is written to (default: stdout)
        theme: Color theme for the usage screen
        color: Force colors on (True) or off (False); None auto-detects
    """

    def __init__(
        self,
        app: str,
        version: Optional[str] = None,
        branch: Optional[str] = None,
        commit: Optional[str] = None,
        tag: Optional[str] = None,
        *,
        output: Optional[TextIO] = None,
        theme: Optional[ColorTheme] = None,
        color: Optional[bool] = None,
    ):
        self.metadata = AppMetadata.create(app, version=version, branch=branch, commit=commit, tag=tag)
        self.registry = FlagRegistry()
        self.renderer = UsageRenderer(self.metadata, self.registry, theme=theme, color=color)
        self.output = output
        self._parser = FlagArgumentParser(prog=app)
        self._handles: List[FlagValue] = []

    # Usage screen

    def print_app_header(self, output: Optional[TextIO]) -> None:
        self.renderer.print_app_header(output)

    def print_usage_section_header(self, output: Optional[TextIO], section: str) -> None:
        self.renderer.print_usage_section_header(output, section)

    def print_usage_line(
        self,
        output: Optional[TextIO],
        parameter: str,
        short: str,
        default: Any,
        description: str,
    ) -> None:
        self.renderer.print_usage_line(output, parameter, short, default, description)

    def usage(self, output: Optional[TextIO] = None) -> Callable[[], None]:
        return self.renderer.usage(output)

    # Parsing

    def parse(self, args: Optional[Sequence[str]] = None) -> argparse.Namespace:
        """Parse the command line and fill every issued FlagValue.

        ``-h``/``--help`` prints the usage screen and exits with status 0.
        Unknown flags and malformed values print the error and the usage
        screen, then exit with status 2.

        Args:
            args: Arguments to parse (default: ``sys.argv[1:]``)

        Returns:
            The argparse namespace, keyed by primary flag name
        """
        self._parser.usage_hook = self.usage(self.output)
        args = sys.argv[1:] if args is None else list(args)
        logger.debug(f"Parsing {len(args)} argument(s)")
        namespace = self._parser.parse_args(args)
        for handle in self._handles:
            handle.value = getattr(namespace, handle.name)
        return namespace

    # Registration

    def add_flag_bool(
        self, name: str, section: SectionArg, default: bool, usage: str, alt_names: Optional[Sequence[str]] = None
    ) -> FlagValue:
        return self._add_flag(values.BOOL, name, section, default, usage, alt_names)

    def add_flag_string(
        self, name: str, section: SectionArg, default: str, usage: str, alt_names: Optional[Sequence[str]] = None
    ) -> FlagValue:
        return self._add_flag(values.STRING, name, section, default, usage, alt_names)

    def add_flag_int(
        self, name: str, section: SectionArg, default: int, usage: str, alt_names: Optional[Sequence[str]] = None
    ) -> FlagValue:
        return self._add_flag(values.INT, name, section, default, usage, alt_names)

    def add_flag_int64(
        self, name: str, section: SectionArg, default: int, usage: str, alt_names: Optional[Sequence[str]] = None
    ) -> FlagValue:
        return self._add_flag(values.INT64, name, section, default, usage, alt_names)

    def add_flag_uint(
        self, name: str, section: SectionArg, default: int, usage: str, alt_names: Optional[Sequence[str]] = None
    ) -> FlagValue:
        return self._add_flag(values.UINT, name, section, default, usage, alt_names)

    def add_flag_uint64(
        self, name: str, section: SectionArg, default: int, usage: str, alt_names: Optional[Sequence[str]] = None
    ) -> FlagValue:
        return self._add_flag(values.UINT64, name, section, default, usage, alt_names)

    def add_flag_float64(
        self, name: str, section: SectionArg, default: float, usage: str, alt_names: Optional[Sequence[str]] = None
    ) -> FlagValue:
        return self._add_flag(values.FLOAT64, name, section, default, usage, alt_names)

    def _add_flag(
        self,
        kind: values.FlagKind,
        name: str,
        section: SectionArg,
        default: Any,
        usage: str,
        alt_names: Optional[Sequence[str]],
    ) -> FlagValue:
        sections = Sections.normalize(section)
        default = kind.check_default(name, default)
        alts = list(alt_names) if alt_names is not None else []

        option_strings = [f"--{name}"]
        for alt in alts:
            option_strings.extend([f"-{alt}", f"--{alt}"])

        argument: dict = dict(dest=name, default=default, type=kind.parse, help=usage.replace("%", "%%"))
        if kind is values.BOOL:
            argument.update(nargs="?", const=True)

        try:
            self._parser.add_argument(*option_strings, **argument)
        except (argparse.ArgumentError, ValueError) as e:
            logger.error(f"Cannot register flag --{name}: {e}")
            raise ConfigurationError(
                problem=f"Cannot register flag '{name}'",
                cause=str(e),
                recovery="Rename the flag or its alternate names so every spelling is unique",
                context=f"Spellings requested: {', '.join(option_strings)}",
            ) from e

        self.registry.add(name, sections, default, usage, alt_names)
        logger.debug(
            f"Registered {kind.name} flag --{name} in {list(sections)}"
            + (f" (alternates: {alts})" if alts else "")
        )

        handle = FlagValue(name, kind.name, default)
        self._handles.append(handle)
        return handle


def new_flag_handler(
    app: str,
    version: Optional[str] = None,
    branch: Optional[str] = None,
    commit: Optional[str] = None,
    tag: Optional[str] = None,
    **kwargs: Any,
) -> FlagHandler:
    """Create a FlagHandler; missing build details show as ``N/A``."""
    return FlagHandler(app, version, branch, commit, tag, **kwargs)
