"""pi-table: aligned, bordered text tables for terminals and strings."""

# Cells and rows
from pi.table.cell import Cell, Renderable
from pi.table.row import Row

# Configuration
from pi.table.config import Config, load_config, should_colorize

# CSV import/export
from pi.table.csv_io import from_csv, from_csv_file, from_csv_string, to_csv, to_csv_string

# Errors
from pi.table.errors import ConfigError, CsvError, TableError, TableIndexError

# Formats
from pi.table.format import (
    EQU_PLUS_SEP,
    FORMAT_BORDERS_ONLY,
    FORMAT_BOX_CHARS,
    FORMAT_CLEAN,
    FORMAT_DEFAULT,
    FORMAT_NO_BORDER,
    FORMAT_NO_BORDER_LINE_SEPARATOR,
    FORMAT_NO_COLSEP,
    FORMAT_NO_LINESEP,
    FORMAT_NO_LINESEP_WITH_TITLE,
    FORMAT_NO_TITLE,
    FORMATS,
    MINUS_PLUS_SEP,
    Alignment,
    ColumnPosition,
    FormatBuilder,
    LinePosition,
    LineSeparator,
    TableFormat,
    format_from_dict,
)

# Styles
from pi.table.style import (
    Attr,
    Background,
    Bold,
    Color,
    Foreground,
    Italic,
    Underline,
    parse_style_spec,
)

# Tables
from pi.table.table import Table, TableSlice

# Tree prefixes
from pi.table.tree import provide_prefix

# Utilities
from pi.table.width import strip_ansi, visible_width

__all__ = [
    # Cells and rows
    "Cell",
    "Renderable",
    "Row",
    # Configuration
    "Config",
    "load_config",
    "should_colorize",
    # CSV
    "from_csv",
    "from_csv_file",
    "from_csv_string",
    "to_csv",
    "to_csv_string",
    # Errors
    "ConfigError",
    "CsvError",
    "TableError",
    "TableIndexError",
    # Formats
    "EQU_PLUS_SEP",
    "FORMAT_BORDERS_ONLY",
    "FORMAT_BOX_CHARS",
    "FORMAT_CLEAN",
    "FORMAT_DEFAULT",
    "FORMAT_NO_BORDER",
    "FORMAT_NO_BORDER_LINE_SEPARATOR",
    "FORMAT_NO_COLSEP",
    "FORMAT_NO_LINESEP",
    "FORMAT_NO_LINESEP_WITH_TITLE",
    "FORMAT_NO_TITLE",
    "FORMATS",
    "MINUS_PLUS_SEP",
    "Alignment",
    "ColumnPosition",
    "FormatBuilder",
    "LinePosition",
    "LineSeparator",
    "TableFormat",
    "format_from_dict",
    # Styles
    "Attr",
    "Background",
    "Bold",
    "Color",
    "Foreground",
    "Italic",
    "Underline",
    "parse_style_spec",
    # Tables
    "Table",
    "TableSlice",
    # Tree
    "provide_prefix",
    # Utilities
    "strip_ansi",
    "visible_width",
]
