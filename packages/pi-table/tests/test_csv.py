"""Tests for pi.table.csv_io -- CSV import and export."""

from __future__ import annotations

import csv
import io
from pathlib import Path

import pytest

from pi.table.errors import CsvError
from pi.table.table import Table


def _contents(table: Table) -> list[list[str]]:
    return [[cell.get_content() for cell in row] for row in table]


class TestFromCsv:
    def test_basic(self) -> None:
        table = Table.from_csv_string("ABC,DEFG,HIJKLMN\nfoobar,bar,foo\n")
        assert table.titles is None
        assert table.render() == Table([["ABC", "DEFG", "HIJKLMN"], ["foobar", "bar", "foo"]]).render()

    def test_headers(self) -> None:
        table = Table.from_csv_string("t1,t2\na,b\n", has_headers=True)
        assert [cell.get_content() for cell in table.titles] == ["t1", "t2"]
        assert _contents(table) == [["a", "b"]]

    def test_headers_on_empty_input(self) -> None:
        table = Table.from_csv_string("", has_headers=True)
        assert table.titles is None
        assert table.render() == ""

    def test_delimiter_and_quotechar(self) -> None:
        table = Table.from_csv_string("a;'b;c'\n", delimiter=";", quotechar="'")
        assert _contents(table) == [["a", "b;c"]]

    def test_from_records(self) -> None:
        table = Table.from_csv(csv.reader(io.StringIO("x,y\n1,2\n")), has_headers=True)
        assert _contents(table) == [["1", "2"]]

    def test_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "data.csv"
        path.write_text("name,qty\napple,3\n", encoding="utf-8")
        table = Table.from_csv_file(path, has_headers=True)
        assert [cell.get_content() for cell in table.titles] == ["name", "qty"]
        assert _contents(table) == [["apple", "3"]]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CsvError):
            Table.from_csv_file(tmp_path / "missing.csv")

    def test_malformed_input(self) -> None:
        with pytest.raises(CsvError):
            Table.from_csv_string('a,"b"c\n', strict=True)

    def test_invalid_options(self) -> None:
        with pytest.raises(CsvError):
            Table.from_csv_string("a,b\n", delimiter="ab")


class TestToCsv:
    def test_titles_then_rows(self) -> None:
        table = Table([["a", "b"]], titles=["x", "y"])
        assert table.to_csv_string() == "x,y\r\na,b\r\n"

    def test_custom_delimiter(self) -> None:
        table = Table([["a", "b"]])
        assert table.to_csv_string(delimiter="\t", lineterminator="\n") == "a\tb\n"

    def test_round_trip_with_special_characters(self) -> None:
        table = Table([["a,b", 'say "hi"', "multi\nline"], ["plain", "", "x"]], titles=["c1", "c2", "c3"])
        back = Table.from_csv_string(table.to_csv_string(), has_headers=True)
        assert [cell.get_content() for cell in back.titles] == ["c1", "c2", "c3"]
        assert _contents(back) == _contents(table)

    def test_slice_export(self) -> None:
        table = Table([["a"], ["b"], ["c"]], titles=["t"])
        assert table[1:2].to_csv_string(lineterminator="\n") == "t\nb\n"

    def test_returns_writer(self) -> None:
        out = io.StringIO()
        writer = Table([["a"]]).to_csv(out, lineterminator="\n")
        writer.writerow(["b"])
        assert out.getvalue() == "a\nb\n"

    def test_failing_sink(self) -> None:
        class BrokenSink:
            def write(self, data: str) -> int:
                raise OSError("disk full")

        with pytest.raises(CsvError):
            Table([["a"]]).to_csv(BrokenSink())  # type: ignore[arg-type]
