"""CSV import and export.

Only cell contents travel through CSV: formats, styles and alignment are not
part of the delimited format. ``fmtparams`` are passed through to the
standard library ``csv`` reader/writer (``delimiter``, ``quotechar``,
``quoting``, ...).
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import IO, Any, Iterable

from pi.table.errors import CsvError
from pi.table.row import Row
from pi.table.table import Table, _TableView

logger = logging.getLogger(__name__)


def from_csv(records: Iterable[Iterable[str]], has_headers: bool = False) -> Table:
    """Build a table from CSV *records* (e.g. a ``csv.reader``).

    With *has_headers* the first record becomes the title row.
    """
    rows: list[Row] = []
    try:
        for record in records:
            rows.append(Row(record))
    except csv.Error as exc:
        raise CsvError(f"malformed CSV input: {exc}") from exc

    titles = rows.pop(0) if has_headers and rows else None
    logger.debug("Imported %d CSV records", len(rows) + (titles is not None))
    return Table(rows, titles=titles)


def from_csv_string(text: str, has_headers: bool = False, **fmtparams: Any) -> Table:
    """Build a table from CSV text. No header row unless *has_headers*."""
    try:
        reader = csv.reader(io.StringIO(text, newline=""), **fmtparams)
    except TypeError as exc:
        raise CsvError(f"invalid CSV options: {exc}") from exc
    return from_csv(reader, has_headers=has_headers)


def from_csv_file(
    path: str | Path,
    has_headers: bool = False,
    encoding: str = "utf-8",
    **fmtparams: Any,
) -> Table:
    """Build a table from a CSV file. No header row unless *has_headers*."""
    logger.debug("Reading CSV from %s", path)
    try:
        with open(path, newline="", encoding=encoding) as f:
            reader = csv.reader(f, **fmtparams)
            return from_csv(reader, has_headers=has_headers)
    except (OSError, UnicodeDecodeError) as exc:
        raise CsvError(f"cannot read {path}: {exc}") from exc
    except TypeError as exc:
        raise CsvError(f"invalid CSV options: {exc}") from exc


def to_csv(table: _TableView, out: IO[str], **fmtparams: Any) -> Any:
    """Write the titles (if any) and rows of *table* to *out*.

    Returns the ``csv`` writer so callers can keep writing records.
    """
    try:
        writer = csv.writer(out, **fmtparams)
        if table.titles is not None:
            writer.writerow([cell.get_content() for cell in table.titles])
        for row in table:
            writer.writerow([cell.get_content() for cell in row])
    except (csv.Error, OSError) as exc:
        raise CsvError(f"cannot write CSV: {exc}") from exc
    except TypeError as exc:
        raise CsvError(f"invalid CSV options: {exc}") from exc
    return writer


def to_csv_string(table: _TableView, **fmtparams: Any) -> str:
    buf = io.StringIO(newline="")
    to_csv(table, buf, **fmtparams)
    return buf.getvalue()
