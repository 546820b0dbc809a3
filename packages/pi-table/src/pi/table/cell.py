"""Table cells: multi-line content with alignment and style."""

from __future__ import annotations

from typing import Any, Iterable, Protocol, runtime_checkable

from pi.table.format import Alignment
from pi.table.style import Attr, merge_style, parse_style_spec
from pi.table.width import visible_width


@runtime_checkable
class Renderable(Protocol):
    """Anything that renders to a finite list of display lines.

    ``Table`` implements this, which is how a table becomes the content of a
    cell in another table.
    """

    def render_lines(self, colorize: bool = False) -> list[str]:
        """Render into display lines, without line terminators."""
        ...


class Cell:
    """A table cell holding one or more lines of content.

    A cell is immutable: the ``with_*`` methods return a new cell. Content
    that is not a string is either kept as a ``Renderable`` (nested tables,
    rendered on demand) or converted with ``str()``.
    """

    __slots__ = ("_lines", "_nested", "_alignment", "_style")

    def __init__(
        self,
        content: Any = "",
        alignment: Alignment = Alignment.LEFT,
        style: Iterable[Attr] = (),
    ) -> None:
        self._nested: Renderable | None = None
        self._lines: tuple[str, ...] = ("",)
        if isinstance(content, str):
            self._lines = tuple(content.split("\n"))
        elif isinstance(content, Renderable):
            self._nested = content
        else:
            self._lines = tuple(str(content).split("\n"))
        self._alignment = alignment
        merged: tuple[Attr, ...] = ()
        for attr in style:
            merged = merge_style(merged, attr)
        self._style = merged

    def _copy(self, alignment: Alignment, style: tuple[Attr, ...]) -> Cell:
        cell = Cell.__new__(Cell)
        cell._lines = self._lines
        cell._nested = self._nested
        cell._alignment = alignment
        cell._style = style
        return cell

    # -- Properties ---------------------------------------------------------

    @property
    def alignment(self) -> Alignment:
        return self._alignment

    @property
    def style(self) -> tuple[Attr, ...]:
        return self._style

    @property
    def is_nested(self) -> bool:
        return self._nested is not None

    # -- Builders -----------------------------------------------------------

    def with_style(self, attr: Attr) -> Cell:
        """Return a copy with *attr* added.

        An attribute of the same kind (e.g. a second foreground colour)
        replaces the earlier one; different kinds accumulate.
        """
        return self._copy(self._alignment, merge_style(self._style, attr))

    def with_alignment(self, alignment: Alignment) -> Cell:
        return self._copy(alignment, self._style)

    def reset_style(self) -> Cell:
        """Return a copy with no style and left alignment."""
        return self._copy(Alignment.LEFT, ())

    def style_spec(self, spec: str) -> Cell:
        """Return a copy styled by the specifier string *spec*.

        Existing style is discarded first. See
        :func:`pi.table.style.parse_style_spec` for the syntax.
        """
        style, alignment = parse_style_spec(spec)
        return self._copy(alignment or Alignment.LEFT, style)

    # -- Content ------------------------------------------------------------

    def render_lines(self, colorize: bool = False) -> list[str]:
        """Return the content lines; nested tables are rendered here."""
        if self._nested is None:
            return list(self._lines)
        return self._nested.render_lines(colorize) or [""]

    def line_count(self) -> int:
        return len(self.render_lines())

    def width(self) -> int:
        """Maximum visible width across the cell's lines."""
        return max(visible_width(line) for line in self.render_lines())

    def line(self, index: int) -> str:
        """Return line *index*, or an empty string past the last line."""
        lines = self.render_lines()
        if 0 <= index < len(lines):
            return lines[index]
        return ""

    def get_content(self) -> str:
        """Return the full content with lines joined by newlines."""
        return "\n".join(self.render_lines())

    def __str__(self) -> str:
        return self.get_content()

    def __repr__(self) -> str:
        return f"Cell({self.get_content()!r}, alignment={self._alignment}, style={self._style!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return (
            self.render_lines() == other.render_lines()
            and self._alignment == other._alignment
            and self._style == other._style
        )

    __hash__ = None  # type: ignore[assignment]
