"""Table rows: an ordered sequence of cells."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from pi.table.cell import Cell
from pi.table.errors import TableIndexError


def to_cell(value: Any) -> Cell:
    """Return *value* as a ``Cell``, wrapping plain values."""
    if isinstance(value, Cell):
        return value
    return Cell(value)


class Row:
    """An ordered sequence of cells. Rows in a table may differ in length."""

    def __init__(self, cells: Iterable[Any] = ()) -> None:
        self._cells: list[Cell] = [to_cell(c) for c in cells]

    # -- Mutation -----------------------------------------------------------

    def append(self, cell: Any) -> Cell:
        """Append *cell* at the end of the row and return it."""
        cell = to_cell(cell)
        self._cells.append(cell)
        return cell

    def insert(self, index: int, cell: Any) -> Cell:
        """Insert *cell* before *index* (``0 <= index <= len(row)``)."""
        if not 0 <= index <= len(self._cells):
            raise TableIndexError("cell", index, len(self._cells))
        cell = to_cell(cell)
        self._cells.insert(index, cell)
        return cell

    def remove(self, index: int) -> Cell:
        """Remove and return the cell at *index*."""
        if not 0 <= index < len(self._cells):
            raise TableIndexError("cell", index, len(self._cells))
        return self._cells.pop(index)

    def set_cell(self, index: int, cell: Any) -> None:
        """Replace the cell at *index*."""
        if not 0 <= index < len(self._cells):
            raise TableIndexError("cell", index, len(self._cells))
        self._cells[index] = to_cell(cell)

    # -- Queries ------------------------------------------------------------

    def column_count(self) -> int:
        return len(self._cells)

    def is_empty(self) -> bool:
        return not self._cells

    def height(self) -> int:
        """Number of physical lines the row occupies (at least 1)."""
        return max((cell.line_count() for cell in self._cells), default=1)

    def get_cell(self, index: int) -> Cell | None:
        """Return the cell at *index*, or ``None`` if the row is shorter."""
        if 0 <= index < len(self._cells):
            return self._cells[index]
        return None

    def cell_width(self, index: int) -> int:
        """Width of the cell at *index*, 0 if there is none."""
        cell = self.get_cell(index)
        return cell.width() if cell is not None else 0

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __getitem__(self, index: int) -> Cell:
        cell = self.get_cell(index)
        if cell is None:
            raise TableIndexError("cell", index, len(self._cells))
        return cell

    def __setitem__(self, index: int, cell: Any) -> None:
        self.set_cell(index, cell)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Row({[cell.get_content() for cell in self._cells]!r})"
