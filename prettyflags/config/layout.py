"""Fixed layout of the usage screen.

Widths count characters, not terminal cells. Escape sequences embedded in
caller-supplied values are counted too, so pre-colored values shift the
columns that follow them.
"""

INDENT = "    "

PARAMETER_WIDTH = 20
SHORT_WIDTH = 6
DEFAULT_WIDTH = 20

ROW_FORMAT = "%s%-{}s %-{}s %-{}s %s".format(PARAMETER_WIDTH, SHORT_WIDTH, DEFAULT_WIDTH)

COLUMN_TITLES = ("Parameter", "Short", "Default", "Description")

SECTION_SUFFIX = " Options"

EMPTY_DEFAULT = '""'
