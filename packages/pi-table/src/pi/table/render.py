"""Stateless rendering of rows and separators into physical lines.

Rendering happens in two passes. Every cell is first materialised into its
display lines (nested tables are rendered at this point, depth-first), then
the column widths are computed from those lines and each row is emitted.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from pi.table.cell import Cell
from pi.table.format import LinePosition, TableFormat
from pi.table.row import Row
from pi.table.style import apply_style
from pi.table.width import align_text, expand_tabs, visible_width

# A row whose cells have been rendered to lines
PreparedRow = list[tuple[Cell, list[str]]]

_EMPTY_CELL = Cell()


def prepare_row(row: Row, colorize: bool = False) -> PreparedRow:
    """Render every cell of *row* to its display lines."""
    return [(cell, cell.render_lines(colorize)) for cell in row]


def column_widths(rows: Iterable[PreparedRow]) -> list[int]:
    """Per-column maximum visible width over all lines of all *rows*."""
    widths: list[int] = []
    for row in rows:
        for col, (_cell, lines) in enumerate(row):
            width = max((visible_width(line) for line in lines), default=0)
            if col >= len(widths):
                widths.append(width)
            elif width > widths[col]:
                widths[col] = width
    return widths


def render_separator(fmt: TableFormat, widths: Sequence[int], position: LinePosition) -> str | None:
    """Render the separator line at *position*, or ``None`` if it is disabled."""
    sep = fmt.separator_for(position)
    if sep is None:
        return None

    pad = fmt.pad_left + fmt.pad_right
    junction = sep.junction if fmt.column_separator is not None else ""
    parts = [" " * fmt.indent]
    if fmt.left_border is not None:
        parts.append(sep.left)
    parts.append(junction.join(sep.line * (width + pad) for width in widths))
    if fmt.right_border is not None:
        parts.append(sep.right)
    return "".join(parts)


def _render_line(
    fmt: TableFormat,
    widths: Sequence[int],
    row: PreparedRow,
    index: int | None,
    colorize: bool,
) -> str:
    left_pad = " " * fmt.pad_left
    right_pad = " " * fmt.pad_right
    columns: list[str] = []
    for col, width in enumerate(widths):
        if col < len(row):
            cell, lines = row[col]
        else:
            cell, lines = _EMPTY_CELL, []
        text = ""
        if index is not None and index < len(lines):
            text = expand_tabs(lines[index])
        aligned = align_text(text, cell.alignment, width)
        if colorize and cell.style:
            aligned = apply_style(aligned, cell.style)
        columns.append(left_pad + aligned + right_pad)

    parts = [" " * fmt.indent]
    if fmt.left_border is not None:
        parts.append(fmt.left_border)
    parts.append((fmt.column_separator or "").join(columns))
    if fmt.right_border is not None:
        parts.append(fmt.right_border)
    return "".join(parts)


def row_height(row: PreparedRow) -> int:
    return max((len(lines) for _cell, lines in row), default=1)


def render_row(
    fmt: TableFormat,
    widths: Sequence[int],
    row: PreparedRow,
    colorize: bool = False,
) -> list[str]:
    """Render *row* into ``height + 2 * pad_vertical`` physical lines."""
    padding = [_render_line(fmt, widths, row, None, colorize)] * fmt.pad_vertical
    content = [_render_line(fmt, widths, row, i, colorize) for i in range(row_height(row))]
    return [*padding, *content, *padding]


def render_table(
    fmt: TableFormat,
    titles: Row | None,
    rows: Iterable[Row],
    colorize: bool = False,
) -> list[str]:
    """Render a whole table into its physical lines.

    An empty table (no titles and no rows) renders to no lines at all.
    """
    prepared_title = prepare_row(titles, colorize) if titles is not None else None
    prepared_rows = [prepare_row(row, colorize) for row in rows]
    if prepared_title is None and not prepared_rows:
        return []

    all_rows = prepared_rows if prepared_title is None else [prepared_title, *prepared_rows]
    widths = column_widths(all_rows)

    lines: list[str] = []

    def separator(position: LinePosition) -> None:
        line = render_separator(fmt, widths, position)
        if line is not None:
            lines.append(line)

    separator(LinePosition.TOP)
    if prepared_title is not None:
        lines.extend(render_row(fmt, widths, prepared_title, colorize))
        separator(LinePosition.TITLE)
    for i, row in enumerate(prepared_rows):
        if i > 0:
            separator(LinePosition.INTERN)
        lines.extend(render_row(fmt, widths, row, colorize))
    separator(LinePosition.BOTTOM)
    return lines
