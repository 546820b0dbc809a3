"""pi-table exception hierarchy.

Layout and width measurement never raise; only indexed mutation, CSV
import/export and configuration loading report errors.
"""

from __future__ import annotations


class TableError(Exception):
    """Base class for every error raised by pi-table."""


class TableIndexError(TableError, IndexError):
    """Row or cell index outside the valid range. Nothing was mutated."""

    def __init__(self, what: str, index: int, size: int) -> None:
        super().__init__(f"{what} index {index} out of range (size {size})")
        self.index = index
        self.size = size


class CsvError(TableError):
    """Malformed delimited input or an I/O failure while reading/writing it."""


class ConfigError(TableError):
    """Invalid configuration file or format mapping."""
