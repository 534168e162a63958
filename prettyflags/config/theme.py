"""Color theme for the usage screen.

Each render role maps to a rich style string. Defaults reproduce the
classic palette: bright white chrome, a bright yellow version, dimmer
build details, and bright blue section titles.
"""

from dataclasses import asdict, dataclass, fields
from typing import Dict, Optional

from prettyflags.errors import ConfigurationError


@dataclass(frozen=True)
class ColorTheme:
    """Rich styles for each part of the usage screen.

    Attributes:
        app: ``[+] <app>`` line
        label: ``Version``/``Branch``/``Commit``/``Tag`` labels and brackets
        version: The version value
        meta: Branch, commit and tag values
        section: Section titles
        columns: The ``Parameter Short Default Description`` row
        row: One row per flag
    """

    app: str = "bright_white"
    label: str = "bright_white"
    version: str = "bright_yellow"
    meta: str = "white"
    section: str = "bright_blue"
    columns: str = "bright_white"
    row: str = "white"

    @classmethod
    def from_dict(cls, overrides: Optional[Dict[str, str]] = None) -> "ColorTheme":
        """Merge partial overrides onto the default theme.

        Raises:
            ConfigurationError: If an override names an unknown role
        """
        overrides = dict(overrides or {})
        roles = [f.name for f in fields(cls)]
        unknown = sorted(set(overrides) - set(roles))
        if unknown:
            raise ConfigurationError(
                problem=f"Unknown theme role(s): {', '.join(unknown)}",
                cause="Theme overrides must name one of the render roles",
                recovery=f"Use one of: {', '.join(roles)}",
            )
        merged = asdict(cls())
        merged.update(overrides)
        return cls(**merged)
