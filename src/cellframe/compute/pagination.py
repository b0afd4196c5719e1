"""Selecting a window of rows.

Implements the kernels whose purpose is to slice the data,
discarding the rows that are not part of the selected window.

For example if ``start=1`` and ``end=2``
only the second row will be kept::

    0: skip because < start
    1: keep
    2: skip because >= end
"""

from ..errors import RangeError
from .base import ColumnsData, row_count


def row_slice(data: ColumnsData, start: int, end: int) -> ColumnsData:
    """Return new columns with the rows from ``start`` to ``end`` excluded.

    Differently from Python slicing, indices out of the
    table bounds are an error and are not clamped.
    """
    nrows = row_count(data)
    if start < 0 or end > nrows or start > end:
        raise RangeError(f"Row slice {start}:{end} is out of range for {nrows} rows")
    return {name: cells[start:end] for name, cells in data.items()}


def head(data: ColumnsData, n: int) -> ColumnsData:
    """The first ``n`` rows, or all of them if there are fewer."""
    if n < 0:
        raise ValueError(f"Number of rows must not be negative, got {n}")
    return row_slice(data, 0, min(n, row_count(data)))


def tail(data: ColumnsData, n: int) -> ColumnsData:
    """The last ``n`` rows, or all of them if there are fewer."""
    if n < 0:
        raise ValueError(f"Number of rows must not be negative, got {n}")
    nrows = row_count(data)
    return row_slice(data, max(nrows - n, 0), nrows)
