"""Typed flag values: argparse converters and default validation.

Each flag kind pairs an argparse ``type=`` converter with a check applied
to the registration-time default. The accepted spellings follow the usual
command-line conventions: booleans take ``1/0``, ``t/f`` and
``true/false`` in any of the common casings, and integers take base
prefixes (``0x``, ``0o``, ``0b``), a bare leading ``0`` for octal, and
``_`` digit separators.
"""

import argparse
import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Dict, Optional, Tuple

from prettyflags.config.layout import EMPTY_DEFAULT
from prettyflags.errors import ValidationError


_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})

# 0644 is octal, as with C-style integer literals
_LEADING_ZERO_OCTAL = re.compile(r"^[+-]?0[0-7_]+$")


def parse_bool(text: str) -> bool:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {text!r}")


def _integer_parser(kind: str, bounds: Tuple[int, int]) -> Callable[[str], int]:
    low, high = bounds

    def parse(text: str) -> int:
        try:
            literal = text.strip()
            if _LEADING_ZERO_OCTAL.match(literal):
                value = int(literal, 8)
            else:
                value = int(literal, 0)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid {kind} value {text!r}") from None
        if not low <= value <= high:
            raise argparse.ArgumentTypeError(
                f"{kind} value {text!r} out of range [{low}, {high}]"
            )
        return value

    parse.__name__ = kind
    return parse


def parse_float64(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid float64 value {text!r}") from None


def parse_string(text: str) -> str:
    return text


@dataclass(frozen=True)
class FlagKind:
    """A supported flag value type.

    Attributes:
        name: Kind name used in messages (``bool``, ``int64``, ...)
        python_type: Type the default must be an instance of
        parse: argparse converter for command-line text
        bounds: Inclusive integer range, for integer kinds
    """

    name: str
    python_type: type
    parse: Callable[[str], Any]
    bounds: Optional[Tuple[int, int]] = None

    def check_default(self, flag: str, default: Any) -> Any:
        """Validate a registration-time default.

        ints are accepted for float64 flags and widened to float.

        Raises:
            ValidationError: If the default has the wrong type or range
        """
        if self.python_type is float and isinstance(default, int) and not isinstance(default, bool):
            default = float(default)

        wrong_type = not isinstance(default, self.python_type)
        # bool is an int subclass; keep it out of the integer kinds
        if self.python_type is int and isinstance(default, bool):
            wrong_type = True
        if wrong_type:
            raise ValidationError(
                problem=f"Invalid default for {self.name} flag '{flag}'",
                cause=f"Expected {self.python_type.__name__}, got {type(default).__name__} ({default!r})",
                recovery=f"Pass a {self.python_type.__name__} default or register the flag with a matching kind",
            )

        if self.bounds is not None:
            low, high = self.bounds
            if not low <= default <= high:
                raise ValidationError(
                    problem=f"Invalid default for {self.name} flag '{flag}'",
                    cause=f"{default} is outside the range {low}..{high}",
                    recovery=f"Use a default within {low}..{high}",
                )
        return default


def _kind(name: str, python_type: type, bounds: Optional[Tuple[int, int]] = None) -> FlagKind:
    if bounds is not None:
        parse = _integer_parser(name, bounds)
    elif python_type is bool:
        parse = parse_bool
    elif python_type is float:
        parse = parse_float64
    else:
        parse = parse_string
    return FlagKind(name=name, python_type=python_type, parse=parse, bounds=bounds)


BOOL = _kind("bool", bool)
STRING = _kind("string", str)
INT = _kind("int", int, (-(2 ** 31), 2 ** 31 - 1))
INT64 = _kind("int64", int, (-(2 ** 63), 2 ** 63 - 1))
UINT = _kind("uint", int, (0, 2 ** 32 - 1))
UINT64 = _kind("uint64", int, (0, 2 ** 64 - 1))
FLOAT64 = _kind("float64", float)

KINDS: Dict[str, FlagKind] = {
    kind.name: kind for kind in (BOOL, STRING, INT, INT64, UINT, UINT64, FLOAT64)
}


def format_float(value: float) -> str:
    """Shortest round-trip digits, in exponent form outside 1e-4 <= |x| < 1e6.

    2.0 renders as ``2``, 0.5 as ``0.5`` and 1e6 as ``1e+06``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    number = Decimal(repr(value)).normalize()
    sign, digits, exponent = number.as_tuple()
    point = len(digits) + exponent
    if value == 0 or -4 <= point - 1 < 6:
        return format(number, "f")

    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(str(d) for d in digits[1:])
    power = point - 1
    negative = "-" if sign else ""
    power_sign = "-" if power < 0 else "+"
    return f"{negative}{mantissa}e{power_sign}{abs(power):02d}"


def format_default(value: Any) -> str:
    """Render a default value for the usage table.

    Empty strings become a visible quote pair so the column is never blank.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return EMPTY_DEFAULT if value == "" else value
    if isinstance(value, float):
        return format_float(value)
    return str(value)
