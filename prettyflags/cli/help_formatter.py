"""Rich-rendered usage screen for registered flags.

The usage screen is a header with the application name and build details,
followed by one table per section:

    [+] myapp
        Version: 1.2.0 [ Branch: main | Commit: 3f2a9c1 | Tag: v1.2.0 ]

        General Options:
        Parameter            Short  Default              Description
        --verbose            -v     false                enable verbose logging

Columns are padded by character count with fixed widths (20/6/20), so a
value longer than its column pushes the rest of the row to the right
rather than being clipped. Caller text is written as-is: tabs are not
expanded and escape sequences count toward the column width.

Usage:
    renderer = UsageRenderer(metadata, registry)
    show_usage = renderer.usage(sys.stdout)
    show_usage()
"""

import argparse
import sys
from typing import Any, Callable, Optional, TextIO, Tuple

from rich.console import Console, ConsoleOptions, RenderResult
from rich.segment import Segment

from prettyflags.config.layout import COLUMN_TITLES, INDENT, ROW_FORMAT, SECTION_SUFFIX
from prettyflags.config.metadata import AppMetadata
from prettyflags.config.theme import ColorTheme
from prettyflags.registry import FlagRegistry
from prettyflags.values import format_default


class _Line:
    """One output line of styled spans, written verbatim.

    Tabs and other characters in caller text reach the stream unchanged.
    rich.text.Text would expand tabs to spaces here.
    """

    def __init__(self, *spans: Tuple[str, str]) -> None:
        self.spans = spans

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        for text, style in self.spans:
            yield Segment(text, console.get_style(style))
        yield Segment.line()


class UsageRenderer:
    """Writes the usage screen for a registry to a text stream.

    Attributes:
        metadata: App name and build details for the header
        registry: Sections and flags to render
        theme: Rich styles per render role
        color: True forces ANSI colors, False disables them, None lets rich
            decide from the stream (terminal detection, NO_COLOR, FORCE_COLOR)
    """

    def __init__(
        self,
        metadata: AppMetadata,
        registry: FlagRegistry,
        theme: Optional[ColorTheme] = None,
        color: Optional[bool] = None,
    ) -> None:
        self.metadata = metadata
        self.registry = registry
        self.theme = theme or ColorTheme()
        self.color = color

    def _console(self, output: Optional[TextIO]) -> Console:
        kwargs: dict = {}
        if self.color is True:
            kwargs.update(force_terminal=True, color_system="standard")
        elif self.color is False:
            kwargs["color_system"] = None
        return Console(
            file=output if output is not None else sys.stdout,
            highlight=False,
            markup=False,
            emoji=False,
            soft_wrap=True,
            **kwargs,
        )

    def print_app_header(self, output: Optional[TextIO]) -> None:
        theme = self.theme
        meta = self.metadata
        console = self._console(output)
        console.print(_Line((f"[+] {meta.app}", theme.app)))
        console.print(
            _Line(
                (f"{INDENT}Version: ", theme.label),
                (meta.version, theme.version),
                (" [ Branch: ", theme.label),
                (meta.branch, theme.meta),
                (" | Commit: ", theme.label),
                (meta.commit, theme.meta),
                (" | Tag: ", theme.label),
                (meta.tag, theme.meta),
                (" ]", theme.label),
            )
        )

    def print_usage_section_header(self, output: Optional[TextIO], section: str) -> None:
        console = self._console(output)
        console.print()
        console.print(_Line((f"{INDENT}{section}{SECTION_SUFFIX}:", self.theme.section)))
        console.print(_Line((ROW_FORMAT % ((INDENT,) + COLUMN_TITLES), self.theme.columns)))

    def print_usage_line(
        self,
        output: Optional[TextIO],
        parameter: str,
        short: str,
        default: Any,
        description: str,
    ) -> None:
        row = ROW_FORMAT % (INDENT, parameter, short, format_default(default), description)
        self._console(output).print(_Line((row, self.theme.row)))

    def usage(self, output: Optional[TextIO] = None) -> Callable[[], None]:
        """Build a callable that prints the whole usage screen to ``output``.

        Sections appear in first-registration order and flags in
        registration order within each section.
        """

        def show_usage() -> None:
            self.print_app_header(output)
            for section, flags in self.registry:
                self.print_usage_section_header(output, section)
                for flag in flags:
                    self.print_usage_line(output, flag.display_name, flag.short, flag.value, flag.usage)
            self._console(output).print()

        return show_usage


class FlagArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that shows the rich usage screen for help and errors.

    ``usage_hook`` is installed by the flag handler right before parsing.
    Prefix abbreviations are disabled so only registered spellings match.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("allow_abbrev", False)
        super().__init__(*args, **kwargs)
        self.usage_hook: Optional[Callable[[], None]] = None

    def print_help(self, file: Optional[TextIO] = None) -> None:
        if self.usage_hook is not None and file is None:
            self.usage_hook()
        else:
            super().print_help(file)

    def error(self, message: str) -> None:
        sys.stderr.write(f"{self.prog}: error: {message}\n")
        self.print_help()
        self.exit(2)
