"""Section registry: which flags are documented under which heading.

Sections keep first-registration order, and flags keep registration
order within a section. A flag registered under several sections gets
its own descriptor in each one.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from prettyflags.errors import ConfigurationError


SectionArg = Union[str, Sequence[str]]


@dataclass(frozen=True)
class FlagDescriptor:
    """Registered metadata for one flag.

    Attributes:
        name: Primary flag name, without dashes
        value: Default value
        usage: Help text
        alt_names: Alternate spellings sharing the flag's value, or None
    """

    name: str
    value: Any
    usage: str
    alt_names: Optional[Tuple[str, ...]] = None

    @property
    def display_name(self) -> str:
        return f"--{self.name}"

    @property
    def short(self) -> str:
        if not self.alt_names:
            return ""
        return f"-{self.alt_names[0]}"


class Sections:
    """Normalizes the section argument of a registration call."""

    @staticmethod
    def single(name: str) -> Tuple[str, ...]:
        return (name,)

    @staticmethod
    def many(names: Sequence[str]) -> Tuple[str, ...]:
        return tuple(names)

    @classmethod
    def normalize(cls, section: Any) -> Tuple[str, ...]:
        """Turn a section name or a list of names into a tuple of names.

        Raises:
            ConfigurationError: If ``section`` is neither a str nor a
                non-empty list/tuple of str
        """
        if isinstance(section, str):
            return cls.single(section)
        if isinstance(section, (list, tuple)) and section and all(isinstance(s, str) for s in section):
            return cls.many(section)
        raise ConfigurationError(
            problem="Invalid section type",
            cause=f"section must be a str or a non-empty list of str, got {type(section).__name__} ({section!r})",
            recovery="Pass a section name such as 'General' or a list like ['General', 'Output']",
        )


class FlagRegistry:
    """Ordered mapping of section name to flag descriptors."""

    def __init__(self) -> None:
        self._sections: List[str] = []
        self._flags: Dict[str, List[FlagDescriptor]] = {}

    def add(
        self,
        name: str,
        section: SectionArg,
        default: Any,
        usage: str,
        alt_names: Optional[Sequence[str]] = None,
    ) -> Tuple[str, ...]:
        """Record a flag under every named section.

        Returns:
            The normalized section names the flag was recorded under
        """
        sections = Sections.normalize(section)
        alts = tuple(alt_names) if alt_names is not None else None
        for title in sections:
            if title not in self._flags:
                self._flags[title] = []
                self._sections.append(title)
            self._flags[title].append(
                FlagDescriptor(name=name, value=default, usage=usage, alt_names=alts)
            )
        return sections

    @property
    def sections(self) -> Tuple[str, ...]:
        return tuple(self._sections)

    def flags(self, section: str) -> Tuple[FlagDescriptor, ...]:
        return tuple(self._flags.get(section, ()))

    def __iter__(self) -> Iterator[Tuple[str, Tuple[FlagDescriptor, ...]]]:
        for title in self._sections:
            yield title, tuple(self._flags[title])

    def __len__(self) -> int:
        return len(self._sections)

    def __contains__(self, section: object) -> bool:
        return section in self._flags
