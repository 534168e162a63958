"""Shared pytest fixtures for prettyflags tests."""

from io import StringIO
from unittest.mock import patch

import pytest

from prettyflags import FlagHandler
from prettyflags.config.layout import INDENT


@pytest.fixture
def row():
    """Build an expected usage table row, padded to the fixed column widths."""

    def build(parameter, short, default, description):
        return f"{INDENT}{parameter:<20} {short:<6} {default:<20} {description}"

    return build


@pytest.fixture
def output():
    return StringIO()


@pytest.fixture
def flags(output):
    """Handler with full build metadata and colors disabled."""
    return FlagHandler(
        "myapp",
        version="1.2.0",
        branch="main",
        commit="3f2a9c1",
        tag="v1.2.0",
        output=output,
        color=False,
    )


@pytest.fixture
def quiet_errors():
    """Suppress the rich error panels printed when errors are constructed."""
    with patch("prettyflags.errors.console.print") as mock_print:
        yield mock_print
