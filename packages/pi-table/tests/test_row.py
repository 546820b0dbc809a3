"""Tests for pi.table.row -- ordered cell sequences."""

from __future__ import annotations

import pytest

from pi.table.cell import Cell
from pi.table.errors import TableError, TableIndexError
from pi.table.row import Row


def _contents(row: Row) -> list[str]:
    return [cell.get_content() for cell in row]


class TestRowBasics:
    def test_default_row_is_empty(self) -> None:
        row = Row()
        assert len(row) == 0
        assert row.column_count() == 0
        assert row.is_empty()

    def test_plain_values_become_cells(self) -> None:
        row = Row(["foo", 1, Cell("bar")])
        assert row.column_count() == 3
        assert all(isinstance(cell, Cell) for cell in row)
        assert _contents(row) == ["foo", "1", "bar"]

    def test_get_cell(self) -> None:
        row = Row(["foo", "bar", "foobar"])
        assert row.get_cell(0).get_content() == "foo"
        assert row.get_cell(12) is None
        assert row.get_cell(-1) is None

    def test_indexing_out_of_range_raises(self) -> None:
        row = Row(["foo"])
        with pytest.raises(TableIndexError):
            row[3]

    def test_cell_width(self) -> None:
        row = Row(["foo", "barbaz"])
        assert row.cell_width(1) == 6
        assert row.cell_width(5) == 0


class TestRowHeight:
    def test_single_line_cells(self) -> None:
        assert Row(["a", "b"]).height() == 1

    def test_tallest_cell_wins(self) -> None:
        row = Row(["This is\na multiline\ncell", "foo"])
        assert row.height() == 3

    def test_empty_row_is_one_line_high(self) -> None:
        assert Row().height() == 1


class TestRowMutation:
    """Indexed mutation reports out-of-range indices and leaves the row intact."""

    def test_append(self) -> None:
        row = Row(["foo"])
        row.append("baz")
        assert _contents(row) == ["foo", "baz"]

    def test_insert(self) -> None:
        row = Row(["foo", "bar", "foobar"])
        row.insert(1, Cell("baz"))
        assert _contents(row) == ["foo", "baz", "bar", "foobar"]

    def test_insert_at_end(self) -> None:
        row = Row(["foo", "bar"])
        row.insert(2, "baz")
        assert _contents(row) == ["foo", "bar", "baz"]

    def test_insert_out_of_range(self) -> None:
        row = Row(["foo", "bar", "foobar"])
        with pytest.raises(TableIndexError):
            row.insert(1000, Cell("baz"))
        with pytest.raises(TableIndexError):
            row.insert(-1, Cell("baz"))
        assert _contents(row) == ["foo", "bar", "foobar"]

    def test_remove(self) -> None:
        row = Row(["foo", "bar", "foobar"])
        removed = row.remove(1)
        assert removed.get_content() == "bar"
        assert _contents(row) == ["foo", "foobar"]

    def test_remove_out_of_range(self) -> None:
        row = Row(["foo", "bar", "foobar"])
        with pytest.raises(TableIndexError):
            row.remove(1000)
        assert len(row) == 3

    def test_set_cell(self) -> None:
        row = Row(["foo", "bar"])
        row.set_cell(0, "baz")
        row[1] = Cell("qux")
        assert _contents(row) == ["baz", "qux"]

    def test_set_cell_out_of_range(self) -> None:
        row = Row(["foo"])
        with pytest.raises(TableIndexError):
            row.set_cell(1, "baz")

    def test_index_error_is_catchable_as_index_error(self) -> None:
        row = Row()
        with pytest.raises(IndexError):
            row.remove(0)
        with pytest.raises(TableError):
            row.remove(0)


class TestRowEquality:
    def test_equal_rows(self) -> None:
        assert Row(["a", "b"]) == Row([Cell("a"), Cell("b")])

    def test_different_rows(self) -> None:
        assert Row(["a"]) != Row(["a", "b"])
