"""Entry point for the pi-table CLI: render CSV input as a table."""

from __future__ import annotations

import argparse
import logging
import sys

from pi.table.config import COLOR_MODES, load_config, should_colorize
from pi.table.csv_io import from_csv_file, from_csv_string
from pi.table.errors import TableError
from pi.table.format import FORMATS
from pi.table.row import Row

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pi-table",
        description="Render CSV data as an aligned, bordered text table",
    )
    parser.add_argument("file", nargs="?", default="-", help="CSV file to read (default: stdin)")
    parser.add_argument("-d", "--delimiter", help="Field delimiter (default: ',')")
    parser.add_argument("-t", "--titles", action="store_true", help="Use the first record as the title row")
    parser.add_argument("-f", "--format", dest="format_name", choices=sorted(FORMATS), help="Table format")
    parser.add_argument("--title-style", help="Style spec for the title row (e.g. 'bFgc')")
    parser.add_argument("--color", choices=COLOR_MODES, help="When to emit colours (default: auto)")
    parser.add_argument("--crlf", action="store_true", help="End lines with CRLF")
    parser.add_argument("--config", help="Configuration file (default: ~/.pi/table.json)")
    parser.add_argument("--list-formats", action="store_true", help="List the available formats and exit")
    parser.add_argument("--log-level", default="warning", choices=["debug", "info", "warning", "error"])
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.list_formats:
        for name in FORMATS:
            print(name)
        return 0

    try:
        config = load_config(args.config).apply_overrides(
            format_name=args.format_name,
            color=args.color,
            line_ending="crlf" if args.crlf else None,
            delimiter=args.delimiter,
        )
        fmt = config.resolve_format()
        if args.file == "-":
            table = from_csv_string(sys.stdin.read(), has_headers=args.titles, delimiter=config.delimiter)
        else:
            table = from_csv_file(args.file, has_headers=args.titles, delimiter=config.delimiter)
    except TableError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.title_style and table.titles is not None:
        table.set_titles(Row(cell.style_spec(args.title_style) for cell in table.titles))

    table.set_format(fmt)
    colorize = should_colorize(config.color, sys.stdout)
    logger.info("Rendering %d rows (colorize=%s)", len(table), colorize)
    table.print(sys.stdout, colorize=colorize, line_terminator=config.line_terminator)
    return 0


if __name__ == "__main__":
    sys.exit(main())
