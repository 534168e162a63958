"""Structured error handling with rich-formatted panels.

Registration mistakes are programmer errors: they are raised while the
application wires up its flags, long before any command line is parsed.
Each error carries a problem description, an optional cause, and a
recovery suggestion, and is displayed as a rich panel on stderr.

Example:
    raise ConfigurationError(
        problem="Invalid section type",
        cause="section must be a str or a list of str, got int",
        recovery="Pass a section name such as 'General' or ['General', 'Output']",
    )
"""

from typing import Optional

from rich.console import Console
from rich.panel import Panel


console = Console(stderr=True)


class PrettyFlagsError(Exception):
    """Base exception class for prettyflags errors with rich formatting.

    Attributes:
        problem: A concise description of what went wrong
        cause: Explanation of why the error occurred
        recovery: Actionable steps to fix the issue
        context: Optional additional context (e.g., the offending flag)
    """

    def __init__(
        self,
        problem: str,
        cause: Optional[str] = None,
        recovery: Optional[str] = None,
        context: Optional[str] = None,
    ):
        self.problem = problem
        self.cause = cause
        self.recovery = recovery
        self.context = context

        message_parts = [f"[bold red]Problem:[/bold red] {problem}"]

        if cause:
            message_parts.append(f"\n[bold yellow]Cause:[/bold yellow] {cause}")

        if recovery:
            message_parts.append(f"\n[bold green]Recovery:[/bold green] {recovery}")

        if context:
            message_parts.append(f"\n[bold blue]Context:[/bold blue] {context}")

        self.message = "\n".join(message_parts)

        self._display_error()

        super().__init__(problem)

    def _display_error(self):
        """Display the error message as a rich panel."""
        panel = Panel(
            self.message,
            title=f"[bold red]{self.__class__.__name__}[/bold red]",
            border_style="red",
            expand=False,
        )
        console.print(panel)


class ConfigurationError(PrettyFlagsError):
    """Error raised when flags are wired up incorrectly.

    Covers section arguments of the wrong shape, option names that collide
    with an already registered flag, and unknown theme roles.

    Example:
        raise ConfigurationError(
            problem="Option '-v' is already registered",
            cause="Alternate name 'v' of flag 'verbose' collides with flag 'version'",
            recovery="Choose a different alternate name for 'verbose'",
        )
    """
    pass


class ValidationError(PrettyFlagsError):
    """Error raised when a default value does not fit its flag kind.

    Example:
        raise ValidationError(
            problem="Invalid default for uint flag 'workers'",
            cause="-1 is outside the range 0..4294967295",
            recovery="Use a non-negative default",
        )
    """
    pass
