"""Combining the data of two tables.

Two ways of combining tables are provided:

Merge
=====

:func:`merge` overlays the columns of the right table on top of the left one.
The result contains all the columns of the left table followed by the
columns that only exist in the right table. When a column exists in both,
the cells of the right table win::

    left:  a, b        right: b, c        merged: a, b (right), c
           1, x               y, 10               1, y,         10
           2, x               z, 20               2, z,         20

Rows are not aligned on the key column, the merge requires both
tables to have the same number of rows and pairs them by position.

Concat
======

:func:`concat` appends the rows of the right table after the rows of the left one.
The columns of the result are the columns of the left table, columns
only existing in the right table are discarded, and columns missing
from the right table are filled with MISSING cells::

    left:  a, b        right: a, c        concatenated: a, b
           1, x               3, 10                     1, x
           2, y                                         2, y
                                                        3, <NA>
"""

import logging

from ..cells import MISSING
from .base import ColumnsData, copy_data, require_column, row_count

logger = logging.getLogger(__name__)


def merge(left: ColumnsData, right: ColumnsData, on: str) -> ColumnsData:
    """Overlay the columns of ``right`` on the columns of ``left``.

    :param left: The columns of the receiving table.
    :param right: The columns to overlay.
    :param on: The key column, must exist in both tables.
    """
    require_column(left, on)
    require_column(right, on)
    if left and right and row_count(left) != row_count(right):
        raise ValueError(
            f"Cannot merge tables with different row counts: {row_count(left)} and {row_count(right)}"
        )

    merged = copy_data(left)
    merged.update(copy_data(right))
    return merged


def concat(top: ColumnsData, bottom: ColumnsData) -> ColumnsData:
    """Append the rows of ``bottom`` after the rows of ``top``.

    :param top: The columns of the receiving table, they dictate the result columns.
    :param bottom: The columns providing the rows to append.
    """
    dropped = [name for name in bottom if name not in top]
    if dropped:
        logger.warning("Columns %s are not part of the receiving table, discarding them", dropped)

    bottom_rows = row_count(bottom)
    concatenated = {}
    for name, cells in top.items():
        appended = bottom.get(name)
        if appended is None:
            appended = [MISSING] * bottom_rows
        concatenated[name] = cells + appended
    return concatenated
