"""Tables and read-only table slices.

``Table`` owns its rows, an optional title row and a ``TableFormat``.
``TableSlice`` is a view over a contiguous range of a table's rows that shares
the rendering API without copying any row. A slice borrows the table: it is
valid only as long as the table's rows are not added, inserted or removed.
"""

from __future__ import annotations

import io
import itertools
import logging
import sys
from typing import IO, Any, Iterable, Iterator

from pi.table.cell import Cell
from pi.table.errors import TableIndexError
from pi.table.format import FORMAT_DEFAULT, TableFormat
from pi.table.render import render_table
from pi.table.row import Row


logger = logging.getLogger(__name__)

DEFAULT_LINE_TERMINATOR = "\n"


def _to_row(value: Any) -> Row:
    if isinstance(value, Row):
        return value
    return Row(value)


def _is_byte_sink(out: Any) -> bool:
    if isinstance(out, io.TextIOBase):
        return False
    if isinstance(out, (io.RawIOBase, io.BufferedIOBase)):
        return True
    # Wrappers such as SpooledTemporaryFile only advertise their mode
    mode = getattr(out, "mode", "")
    return isinstance(mode, str) and "b" in mode


class _TableView:
    """Rendering API shared by ``Table`` and ``TableSlice``."""

    _format: TableFormat
    _titles: Row | None

    def _iter_rows(self) -> Iterator[Row]:
        raise NotImplementedError

    @property
    def format(self) -> TableFormat:
        return self._format

    @property
    def titles(self) -> Row | None:
        return self._titles

    def __iter__(self) -> Iterator[Row]:
        return self._iter_rows()

    def column_count(self) -> int:
        """Number of columns: the longest of the title row and all rows."""
        counts = [len(row) for row in self._iter_rows()]
        if self._titles is not None:
            counts.append(len(self._titles))
        return max(counts, default=0)

    def column_width(self, column: int) -> int:
        """Content width of *column* (0 if no row has that column)."""
        width = self._titles.cell_width(column) if self._titles is not None else 0
        for row in self._iter_rows():
            width = max(width, row.cell_width(column))
        return width

    def column_widths(self) -> list[int]:
        """Content width of every column, without padding."""
        return [self.column_width(col) for col in range(self.column_count())]

    def column_iter(self, column: int) -> Iterator[Cell]:
        """Iterate over the cells of *column*, skipping rows that are too short."""
        for row in self._iter_rows():
            cell = row.get_cell(column)
            if cell is not None:
                yield cell

    # -- Rendering ----------------------------------------------------------

    def render_lines(self, colorize: bool = False) -> list[str]:
        """Render into physical lines without line terminators."""
        lines = render_table(self._format, self._titles, self._iter_rows(), colorize)
        logger.debug("Rendered table into %d lines", len(lines))
        return lines

    def render(self, colorize: bool = False, line_terminator: str = DEFAULT_LINE_TERMINATOR) -> str:
        """Render into a single string, every line followed by *line_terminator*."""
        return "".join(line + line_terminator for line in self.render_lines(colorize))

    def print(
        self,
        out: IO[Any],
        colorize: bool = False,
        line_terminator: str = DEFAULT_LINE_TERMINATOR,
    ) -> int:
        """Write the table to *out* and return the number of lines written.

        *out* may be a text stream or a binary stream (written as UTF-8).
        """
        lines = self.render_lines(colorize)
        binary = _is_byte_sink(out)
        for line in lines:
            data = line + line_terminator
            out.write(data.encode("utf-8") if binary else data)
        out.flush()
        return len(lines)

    def print_tty(
        self,
        force_colorize: bool = False,
        line_terminator: str = DEFAULT_LINE_TERMINATOR,
    ) -> int:
        """Print to standard output, with colours if the terminal supports them."""
        from pi.table.config import should_colorize

        colorize = force_colorize or should_colorize("auto", sys.stdout)
        return self.print(sys.stdout, colorize=colorize, line_terminator=line_terminator)

    def printstd(self) -> int:
        """Print to standard output (colours when stdout is a terminal)."""
        return self.print_tty(False)

    def __str__(self) -> str:
        return self.render()

    # -- CSV ----------------------------------------------------------------

    def to_csv(self, out: IO[str], **fmtparams: Any) -> Any:
        """Write titles and rows to *out* as CSV records."""
        from pi.table.csv_io import to_csv

        return to_csv(self, out, **fmtparams)

    def to_csv_string(self, **fmtparams: Any) -> str:
        from pi.table.csv_io import to_csv_string

        return to_csv_string(self, **fmtparams)


class Table(_TableView):
    """A printable table made of rows of cells."""

    def __init__(
        self,
        rows: Iterable[Any] = (),
        titles: Any = None,
        fmt: TableFormat = FORMAT_DEFAULT,
    ) -> None:
        self._rows: list[Row] = [_to_row(row) for row in rows]
        self._titles: Row | None = _to_row(titles) if titles is not None else None
        self._format = fmt

    def _iter_rows(self) -> Iterator[Row]:
        return iter(self._rows)

    # -- Format and titles --------------------------------------------------

    def set_format(self, fmt: TableFormat) -> None:
        self._format = fmt

    def set_titles(self, titles: Any) -> Row:
        self._titles = _to_row(titles)
        return self._titles

    def unset_titles(self) -> None:
        self._titles = None

    # -- Rows ---------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._rows)

    def is_empty(self) -> bool:
        return not self._rows

    def get_row(self, index: int) -> Row | None:
        if 0 <= index < len(self._rows):
            return self._rows[index]
        return None

    def add_row(self, row: Any) -> Row:
        """Append *row* (a ``Row`` or an iterable of values) and return it."""
        row = _to_row(row)
        self._rows.append(row)
        return row

    def add_empty_row(self) -> Row:
        return self.add_row(Row())

    def insert_row(self, index: int, row: Any) -> Row:
        """Insert *row* before *index* (``0 <= index <= len(table)``)."""
        if not 0 <= index <= len(self._rows):
            raise TableIndexError("row", index, len(self._rows))
        row = _to_row(row)
        self._rows.insert(index, row)
        return row

    def remove_row(self, index: int) -> Row:
        if not 0 <= index < len(self._rows):
            raise TableIndexError("row", index, len(self._rows))
        return self._rows.pop(index)

    def set_element(self, element: Any, column: int, row: int) -> None:
        """Replace the content of one cell, keeping its alignment and style."""
        target = self.get_row(row)
        if target is None:
            raise TableIndexError("row", row, len(self._rows))
        old = target.get_cell(column)
        if old is None:
            raise TableIndexError("cell", column, len(target))
        target.set_cell(column, Cell(element, old.alignment, old.style))

    def add_column(self, values: Iterable[Any]) -> None:
        """Append a column after the current last column.

        Rows are added as needed and short rows are filled with empty cells
        so every value lands in the new column.
        """
        column = self.column_count()
        for index, value in enumerate(values):
            while index >= len(self._rows):
                self._rows.append(Row())
            row = self._rows[index]
            while len(row) < column:
                row.append(Cell())
            row.append(value)

    def __getitem__(self, key: int | slice) -> Any:
        if isinstance(key, slice):
            return self.slice(key.start, key.stop, key.step)
        row = self.get_row(key)
        if row is None:
            raise TableIndexError("row", key, len(self._rows))
        return row

    def slice(self, start: int | None = None, stop: int | None = None, step: int | None = None) -> TableSlice:
        """Return a read-only view of rows ``[start, stop)``.

        Bounds are clamped to the available rows, never failing.
        """
        if step not in (None, 1):
            raise ValueError("table slices must be contiguous")
        first, last, _ = slice(start, stop).indices(len(self._rows))
        return TableSlice(self, first, max(first, last))

    # -- CSV ----------------------------------------------------------------

    @classmethod
    def from_csv_string(cls, text: str, has_headers: bool = False, **fmtparams: Any) -> Table:
        from pi.table.csv_io import from_csv_string

        return from_csv_string(text, has_headers=has_headers, **fmtparams)

    @classmethod
    def from_csv_file(cls, path: Any, has_headers: bool = False, **fmtparams: Any) -> Table:
        from pi.table.csv_io import from_csv_file

        return from_csv_file(path, has_headers=has_headers, **fmtparams)

    @classmethod
    def from_csv(cls, records: Iterable[Iterable[str]], has_headers: bool = False) -> Table:
        from pi.table.csv_io import from_csv

        return from_csv(records, has_headers=has_headers)

    def __repr__(self) -> str:
        return f"Table(rows={len(self._rows)}, titles={self._titles!r})"


class TableSlice(_TableView):
    """Read-only view over rows ``[start, stop)`` of a ``Table``.

    Shares the table's rows, titles and format. Structural changes to the
    table (adding, inserting or removing rows) invalidate the view.
    """

    def __init__(self, table: Table, start: int, stop: int) -> None:
        self._table = table
        self._start = start
        self._stop = stop

    @property
    def _format(self) -> TableFormat:  # type: ignore[override]
        return self._table.format

    @property
    def _titles(self) -> Row | None:  # type: ignore[override]
        return self._table.titles

    def _iter_rows(self) -> Iterator[Row]:
        return itertools.islice(self._table._rows, self._start, self._stop)

    def __len__(self) -> int:
        return self._stop - self._start

    def get_row(self, index: int) -> Row | None:
        if 0 <= index < len(self):
            return self._table.get_row(self._start + index)
        return None

    def __getitem__(self, key: int | slice) -> Any:
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise ValueError("table slices must be contiguous")
            first, last, _ = slice(key.start, key.stop).indices(len(self))
            return TableSlice(self._table, self._start + first, self._start + max(first, last))
        row = self.get_row(key)
        if row is None:
            raise TableIndexError("row", key, len(self))
        return row

    def __repr__(self) -> str:
        return f"TableSlice(start={self._start}, stop={self._stop})"
