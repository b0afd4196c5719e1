"""Command line interface for inspecting delimited files.

This module provides a command line interface that loads a file
into a :class:`cellframe.table.Table`, applies the requested
transformations and prints the requested reports.

Transformations (``--dropna``, ``--fillna``, ``--sort-index``, ``--sort-values``)
are applied first, in that order, then reports are printed in the order
they are listed by ``--help``.

The tables are printed to the console in a tabular format
using the :mod:`cellframe.utils.tabulate` module.
"""

import argparse
import logging
import sys

from cellframe.errors import ColumnNotFoundError, TableError
from cellframe.table import Table

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect the content of a delimited file.")
    parser.add_argument("filename", type=str, help="The delimited file to load.")
    parser.add_argument(
        "-d", "--delimiter", default=",", help="The field delimiter, a comma by default."
    )
    parser.add_argument("--dropna", action="store_true", help="Drop rows with missing values.")
    parser.add_argument("--fillna", action="store_true", help="Fill missing values with defaults.")
    parser.add_argument("--sort-index", action="store_true", help="Sort columns by name.")
    parser.add_argument("--sort-values", metavar="COLUMN", help="Sort rows by a column.")
    parser.add_argument("--shape", action="store_true", help="Print number of columns and rows.")
    parser.add_argument("--dtypes", action="store_true", help="Print the type of each column.")
    parser.add_argument("--head", type=int, metavar="N", help="Print the first N rows.")
    parser.add_argument("--tail", type=int, metavar="N", help="Print the last N rows.")
    parser.add_argument("--describe", action="store_true", help="Print summary statistics.")
    parser.add_argument(
        "--stats", action="store_true", help="Print mean, median, min, max and sum."
    )
    parser.add_argument(
        "--value-counts", action="store_true", help="Print the occurrences of each value."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse the command line arguments and inspect the file."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        table = Table.open_csv(args.filename, delimiter=args.delimiter)
    except TableError as e:
        print(f"Unable to load file, {e}")
        return 1

    if args.dropna:
        table = table.drop_na()
    if args.fillna:
        table.fill_na()
    if args.sort_index:
        table.sort_index()
    if args.sort_values:
        try:
            table.sort_values(args.sort_values)
        except ColumnNotFoundError as e:
            print(f"Unable to sort, {e}")
            return 1

    if args.shape:
        print("(%d, %d)" % table.shape())
    if args.dtypes:
        for name, dtype in table.dtypes().items():
            print(f"{name}: {dtype}")
    if args.head is not None:
        print(table.head(args.head))
    if args.tail is not None:
        print(table.tail(args.tail))
    if args.describe:
        for name, description in table.describe().items():
            print(f"{name}: {description or 'No numeric data'}")
    if args.stats:
        for stat in ("mean", "median", "min", "max", "sum"):
            print(f"{stat}: {getattr(table, stat)()}")
    if args.value_counts:
        for name, counts in table.value_counts().items():
            pretty = ", ".join(f"{cell}: {count}" for cell, count in counts.items())
            print(f"{name}: {{{pretty}}}")

    logger.debug("Inspected %r", table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
