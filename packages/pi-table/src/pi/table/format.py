"""Table formatting rules: border glyphs, separators, padding.

A ``TableFormat`` is an immutable value built with ``FormatBuilder``. The
predefined formats below are shared, read-only instances; ``FORMATS`` maps
their names for lookup from configuration files and the command line.
"""

from __future__ import annotations

import enum
import unicodedata
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from pi.table.errors import ConfigError


class Alignment(enum.Enum):
    """Horizontal alignment of a cell's content."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class LinePosition(enum.Enum):
    """Position of a line separator in a table."""

    TOP = "top"
    TITLE = "title"
    INTERN = "intern"
    BOTTOM = "bottom"


class ColumnPosition(enum.Enum):
    """Position of a column separator in a row."""

    LEFT = "left"
    INTERN = "intern"
    RIGHT = "right"


def _check_glyph(name: str, value: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")
    if unicodedata.category(value) == "Cc":
        raise ValueError(f"{name} must not be a control character, got {value!r}")
    return value


@dataclass(frozen=True)
class LineSeparator:
    """Glyphs of a horizontal separator line.

    ``line`` fills the width of each column, ``junction`` is printed where the
    line crosses a column separator, ``left``/``right`` where it meets the
    table borders.
    """

    line: str = "-"
    junction: str = "+"
    left: str = "+"
    right: str = "+"

    def __post_init__(self) -> None:
        _check_glyph("line", self.line)
        _check_glyph("junction", self.junction)
        _check_glyph("left", self.left)
        _check_glyph("right", self.right)


@dataclass(frozen=True)
class TableFormat:
    """Immutable table formatting rules."""

    column_separator: str | None = None
    left_border: str | None = None
    right_border: str | None = None
    top: LineSeparator | None = None
    title: LineSeparator | None = None
    intern: LineSeparator | None = None
    bottom: LineSeparator | None = None
    pad_left: int = 0
    pad_right: int = 0
    pad_vertical: int = 0
    indent: int = 0

    @property
    def padding(self) -> tuple[int, int]:
        """Left and right padding."""
        return (self.pad_left, self.pad_right)

    def separator_for(self, position: LinePosition) -> LineSeparator | None:
        """Return the separator drawn at *position*.

        The title position falls back to the intern separator.
        """
        if position is LinePosition.TOP:
            return self.top
        if position is LinePosition.BOTTOM:
            return self.bottom
        if position is LinePosition.TITLE:
            return self.title if self.title is not None else self.intern
        return self.intern

    def column_separator_for(self, position: ColumnPosition) -> str | None:
        if position is ColumnPosition.LEFT:
            return self.left_border
        if position is ColumnPosition.RIGHT:
            return self.right_border
        return self.column_separator


_POSITION_FIELDS = {
    LinePosition.TOP: "top",
    LinePosition.TITLE: "title",
    LinePosition.INTERN: "intern",
    LinePosition.BOTTOM: "bottom",
}


class FormatBuilder:
    """Incremental builder for ``TableFormat``. Every setter returns the builder."""

    def __init__(self, base: TableFormat | None = None) -> None:
        self._format = base if base is not None else TableFormat()

    def _set(self, **changes: Any) -> FormatBuilder:
        self._format = replace(self._format, **changes)
        return self

    def column_separator(self, separator: str | None) -> FormatBuilder:
        """Set the character used between columns (``None`` removes it)."""
        if separator is not None:
            _check_glyph("column separator", separator)
        return self._set(column_separator=separator)

    def borders(self, border: str | None) -> FormatBuilder:
        """Set both the left and the right border character."""
        return self.left_border(border).right_border(border)

    def left_border(self, border: str | None) -> FormatBuilder:
        if border is not None:
            _check_glyph("left border", border)
        return self._set(left_border=border)

    def right_border(self, border: str | None) -> FormatBuilder:
        if border is not None:
            _check_glyph("right border", border)
        return self._set(right_border=border)

    def padding(self, horizontal: int, vertical: int = 0) -> FormatBuilder:
        """Set symmetric horizontal padding and vertical padding.

        Vertical padding inserts blank lines above and below each row.
        """
        if horizontal < 0 or vertical < 0:
            raise ValueError("padding must be non-negative")
        return self._set(pad_left=horizontal, pad_right=horizontal, pad_vertical=vertical)

    def padding_sides(self, left: int, right: int) -> FormatBuilder:
        if left < 0 or right < 0:
            raise ValueError("padding must be non-negative")
        return self._set(pad_left=left, pad_right=right)

    def vertical_padding(self, lines: int) -> FormatBuilder:
        if lines < 0:
            raise ValueError("padding must be non-negative")
        return self._set(pad_vertical=lines)

    def indent(self, spaces: int) -> FormatBuilder:
        """Indent every line of the table by *spaces* columns."""
        if spaces < 0:
            raise ValueError("indent must be non-negative")
        return self._set(indent=spaces)

    def separator(self, position: LinePosition, separator: LineSeparator | None) -> FormatBuilder:
        """Set the separator at *position*; ``None`` suppresses that line."""
        return self._set(**{_POSITION_FIELDS[position]: separator})

    def separators(
        self, positions: Iterable[LinePosition], separator: LineSeparator | None
    ) -> FormatBuilder:
        for position in positions:
            self.separator(position, separator)
        return self

    def build(self) -> TableFormat:
        return self._format


# ---------------------------------------------------------------------------
# Predefined formats
# ---------------------------------------------------------------------------

MINUS_PLUS_SEP = LineSeparator("-", "+", "+", "+")
EQU_PLUS_SEP = LineSeparator("=", "+", "+", "+")

_ALL_LINES = (LinePosition.TOP, LinePosition.INTERN, LinePosition.BOTTOM)

# +----+----+
# | T1 | T2 |
# +====+====+
# | a  | b  |
# +----+----+
FORMAT_DEFAULT = (
    FormatBuilder()
    .column_separator("|")
    .borders("|")
    .separators(_ALL_LINES, MINUS_PLUS_SEP)
    .separator(LinePosition.TITLE, EQU_PLUS_SEP)
    .padding(1)
    .build()
)

# Same as FORMAT_DEFAULT with a plain separator under the title
FORMAT_NO_TITLE = (
    FormatBuilder(FORMAT_DEFAULT).separator(LinePosition.TITLE, MINUS_PLUS_SEP).build()
)

# +----+----+
# | T1 | T2 |
# +----+----+
# | a  | b  |
# | c  | d  |
# +----+----+
FORMAT_NO_LINESEP_WITH_TITLE = (
    FormatBuilder(FORMAT_NO_TITLE).separator(LinePosition.INTERN, None).build()
)

# +----+----+
# | T1 | T2 |
# | a  | b  |
# +----+----+
FORMAT_NO_LINESEP = (
    FormatBuilder(FORMAT_NO_LINESEP_WITH_TITLE).separator(LinePosition.TITLE, None).build()
)

# --------
#  T1  T2
# ========
#  a   b
# --------
FORMAT_NO_COLSEP = FormatBuilder(FORMAT_DEFAULT).column_separator(None).borders(None).build()

#  T1  T2
#  a   b
FORMAT_CLEAN = FormatBuilder().padding(1).build()

# +--------+
# | T1  T2 |
# +========+
# | a   b  |
# +--------+
FORMAT_BORDERS_ONLY = (
    FormatBuilder(FORMAT_DEFAULT).column_separator(None).separator(LinePosition.INTERN, None).build()
)

#  T1 | T2
# ====+====
#  a  | b
# ----+----
#  c  | d
FORMAT_NO_BORDER = (
    FormatBuilder(FORMAT_DEFAULT)
    .borders(None)
    .separators((LinePosition.TOP, LinePosition.BOTTOM), None)
    .build()
)

#  T1 | T2
# ----+----
#  a  | b
#  c  | d
FORMAT_NO_BORDER_LINE_SEPARATOR = (
    FormatBuilder()
    .column_separator("|")
    .separator(LinePosition.TITLE, MINUS_PLUS_SEP)
    .padding(1)
    .build()
)

# ┌────┬────┐
# │ T1 │ T2 │
# ╞════╪════╡
# │ a  │ b  │
# ├────┼────┤
# │ c  │ d  │
# └────┴────┘
FORMAT_BOX_CHARS = (
    FormatBuilder()
    .column_separator("│")
    .borders("│")
    .separator(LinePosition.TOP, LineSeparator("─", "┬", "┌", "┐"))
    .separator(LinePosition.TITLE, LineSeparator("═", "╪", "╞", "╡"))
    .separator(LinePosition.INTERN, LineSeparator("─", "┼", "├", "┤"))
    .separator(LinePosition.BOTTOM, LineSeparator("─", "┴", "└", "┘"))
    .padding(1)
    .build()
)

FORMATS: Mapping[str, TableFormat] = MappingProxyType(
    {
        "default": FORMAT_DEFAULT,
        "no-title": FORMAT_NO_TITLE,
        "no-linesep-with-title": FORMAT_NO_LINESEP_WITH_TITLE,
        "no-linesep": FORMAT_NO_LINESEP,
        "no-colsep": FORMAT_NO_COLSEP,
        "clean": FORMAT_CLEAN,
        "borders-only": FORMAT_BORDERS_ONLY,
        "no-border": FORMAT_NO_BORDER,
        "no-border-line-separator": FORMAT_NO_BORDER_LINE_SEPARATOR,
        "box": FORMAT_BOX_CHARS,
    }
)


# ---------------------------------------------------------------------------
# Mapping loader (configuration files)
# ---------------------------------------------------------------------------

_FORMAT_KEYS = frozenset(
    {
        "base",
        "column_separator",
        "borders",
        "left_border",
        "right_border",
        "padding",
        "vertical_padding",
        "indent",
        "separators",
    }
)


def _separator_from_value(position: str, value: Any) -> LineSeparator | None:
    if value is None:
        return None
    if isinstance(value, str):
        # Compact form: "<line><junction><left><right>", e.g. "-+++"
        if len(value) != 4:
            raise ConfigError(f"separator {position!r} must have 4 characters, got {value!r}")
        return LineSeparator(value[0], value[1], value[2], value[3])
    if isinstance(value, Mapping):
        unknown = set(value) - {"line", "junction", "left", "right"}
        if unknown:
            raise ConfigError(f"unknown keys in separator {position!r}: {sorted(unknown)}")
        return LineSeparator(**value)
    raise ConfigError(f"separator {position!r} must be a string, a mapping or null")


def format_from_dict(data: Mapping[str, Any]) -> TableFormat:
    """Build a ``TableFormat`` from a JSON-compatible mapping.

    Example::

        {
            "base": "default",
            "column_separator": "|",
            "padding": [1, 0],
            "separators": {"intern": null, "title": "=+++"}
        }

    ``padding`` is either a single horizontal count or ``[left, right]``.
    """
    if not isinstance(data, Mapping):
        raise ConfigError(f"format must be a mapping, got {data!r}")
    unknown = set(data) - _FORMAT_KEYS
    if unknown:
        raise ConfigError(f"unknown format keys: {sorted(unknown)}")

    base_name = data.get("base")
    if base_name is not None and (not isinstance(base_name, str) or base_name not in FORMATS):
        raise ConfigError(f"unknown base format {base_name!r}")
    builder = FormatBuilder(FORMATS[base_name] if base_name else None)

    separators = data.get("separators") or {}
    if not isinstance(separators, Mapping):
        raise ConfigError(f"separators must be a mapping, got {separators!r}")

    try:
        if "column_separator" in data:
            builder.column_separator(data["column_separator"])
        if "borders" in data:
            builder.borders(data["borders"])
        if "left_border" in data:
            builder.left_border(data["left_border"])
        if "right_border" in data:
            builder.right_border(data["right_border"])
        if "padding" in data:
            padding = data["padding"]
            if isinstance(padding, int):
                builder.padding_sides(padding, padding)
            else:
                left, right = padding
                builder.padding_sides(int(left), int(right))
        if "vertical_padding" in data:
            builder.vertical_padding(int(data["vertical_padding"]))
        if "indent" in data:
            builder.indent(int(data["indent"]))
        for name, value in separators.items():
            try:
                position = LinePosition(name)
            except ValueError:
                raise ConfigError(f"unknown separator position {name!r}") from None
            builder.separator(position, _separator_from_value(name, value))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"invalid format: {exc}") from exc

    return builder.build()
